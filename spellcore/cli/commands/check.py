"""Spell checking commands."""

import typer
from rich.table import Table

from spellcore.cli.utils.async_runner import run_async
from spellcore.cli.utils.console import console
from spellcore.cli.utils.engine import load_engine
from spellcore.config import settings


def check(
    words: list[str] = typer.Argument(..., help="Words to check"),
    show_suggestions: bool = typer.Option(
        True, "--suggest/--no-suggest", help="Show suggestions for misspelled words"
    ),
) -> None:
    """Check words; exits with status 1 if any is misspelled."""
    misspelled = run_async(_check(words, show_suggestions))
    if misspelled:
        raise typer.Exit(1)


async def _check(words: list[str], show_suggestions: bool) -> int:
    """Async implementation of check command. Returns the misspelled count."""
    engine = await load_engine()
    try:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Word", style="word")
        table.add_column("Status")
        if show_suggestions:
            table.add_column("Suggestions", style="dim")

        misspelled = 0
        for word in words:
            if engine.is_correct(word):
                row = [word, "[success]ok[/]"]
                if show_suggestions:
                    row.append("")
            else:
                misspelled += 1
                row = [f"[misspelled]{word}[/]", "[error]misspelled[/]"]
                if show_suggestions:
                    suggestions = engine.suggest(
                        word, settings.suggestion_threshold, settings.suggestion_quality
                    )
                    row.append(", ".join(suggestions) or "-")
            table.add_row(*row)
    finally:
        engine.close()

    console.print(table)
    if misspelled:
        console.print(f"[warning]{misspelled} of {len(words)} words misspelled[/]")
    return misspelled


def suggest(
    word: str = typer.Argument(..., help="Word to find corrections for"),
    threshold: int = typer.Option(
        settings.suggestion_threshold, "--threshold", "-t", help="Maximum number of suggestions"
    ),
    quality: int = typer.Option(
        settings.suggestion_quality, "--quality", "-q", help="Allowed distance from the best match"
    ),
) -> None:
    """Suggest corrections for a word."""
    run_async(_suggest(word, threshold, quality))


async def _suggest(word: str, threshold: int, quality: int) -> None:
    """Async implementation of suggest command."""
    engine = await load_engine()
    try:
        suggestions = engine.suggest(word, threshold, quality)
    finally:
        engine.close()

    if not suggestions:
        console.print(f"[dim]No suggestions for[/] [word]{word}[/]")
        return

    for suggestion in suggestions:
        console.print(suggestion)
