"""Status command for displaying loaded dictionaries."""

from rich.panel import Panel
from rich.table import Table

from spellcore.cli.utils.async_runner import run_async
from spellcore.cli.utils.console import console
from spellcore.cli.utils.engine import load_engine
from spellcore.config import settings
from spellcore.services.dictionary.compressed import CompressedDictionary


def status() -> None:
    """Show bundled and user dictionaries."""
    run_async(_status())


async def _status() -> None:
    """Async implementation of status command."""
    engine = await load_engine()
    try:
        bundled = engine.registry.bundled
        user = engine.registry.user
    finally:
        engine.close()

    bundled_table = Table(show_header=False, box=None, padding=(0, 2))
    bundled_table.add_column("Name", style="bold")
    bundled_table.add_column("Words", justify="right")
    for dictionary in bundled:
        size = len(dictionary) if isinstance(dictionary, CompressedDictionary) else "?"
        bundled_table.add_row(dictionary.name, str(size))
    if not bundled:
        bundled_table.add_row(
            "[yellow]None loaded[/]", f"[dim]{settings.resolved_dictionary_dir}[/]"
        )

    user_table = Table(show_header=False, box=None, padding=(0, 2))
    user_table.add_column("Name", style="bold")
    user_table.add_column("Words", justify="right")
    for dictionary in user:
        user_table.add_row(dictionary.name, str(len(dictionary)))

    console.print()
    console.print(Panel(bundled_table, title="[bold]Bundled dictionaries[/]", border_style="blue"))
    console.print(Panel(user_table, title="[bold]User dictionaries[/]", border_style="blue"))
    console.print()
