"""Main CLI application entry point."""

import typer

from spellcore.cli.commands import check, dictionary, status
from spellcore.cli.utils.async_runner import run_async
from spellcore.cli.utils.console import error_console
from spellcore.database import init_db
from spellcore.logging_config import setup_logging

app = typer.Typer(
    name="spellcore",
    help="Spell checker with bundled and user dictionaries",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Initialize application on startup."""
    setup_logging("DEBUG" if verbose else "WARNING", stream=error_console.file)

    try:
        run_async(init_db())
    except Exception as e:
        error_console.print(f"[error]Failed to initialize database: {e}[/]")
        raise typer.Exit(1) from None


app.command(name="check", help="Check the spelling of words")(check.check)
app.command(name="suggest", help="Suggest corrections for a word")(check.suggest)
app.command(name="status", help="Show loaded dictionaries")(status.status)

app.add_typer(dictionary.app, name="dict")


if __name__ == "__main__":
    app()
