"""User dictionary management commands."""

import typer
from rich.table import Table

from spellcore.cli.utils.async_runner import run_async
from spellcore.cli.utils.console import console, error_console
from spellcore.config import settings
from spellcore.database import async_session
from spellcore.services.transform import Transformation
from spellcore.services.user_words import UserWordStore


def _store() -> UserWordStore:
    return UserWordStore(Transformation(min_length=settings.min_word_length))


app = typer.Typer(
    name="dict",
    help="User dictionary commands",
    no_args_is_help=True,
)


@app.command(name="add")
def add_words(
    words: list[str] = typer.Argument(..., help="Words to add"),
    dictionary: str = typer.Option(
        settings.user_dictionary_name, "--dictionary", "-d", help="User dictionary name"
    ),
) -> None:
    """Add words to a user dictionary."""
    run_async(_add_words(words, dictionary))


async def _add_words(words: list[str], dictionary: str) -> None:
    """Async implementation of add command."""
    store = _store()
    async with async_session() as session:
        for word in words:
            if await store.add(session, dictionary, word):
                console.print(f"[success]Added[/] [word]{store.normalize(word)}[/]")
            else:
                console.print(f"[dim]Skipped {word!r} (too short or already present)[/]")
        await session.commit()


@app.command(name="remove")
def remove_words(
    words: list[str] = typer.Argument(..., help="Words to remove"),
    dictionary: str = typer.Option(
        settings.user_dictionary_name, "--dictionary", "-d", help="User dictionary name"
    ),
) -> None:
    """Remove words from a user dictionary."""
    missing = run_async(_remove_words(words, dictionary))
    if missing:
        raise typer.Exit(1)


async def _remove_words(words: list[str], dictionary: str) -> int:
    """Async implementation of remove command. Returns the number of unknown words."""
    store = _store()
    missing = 0
    async with async_session() as session:
        for word in words:
            if await store.remove(session, dictionary, word):
                console.print(f"[success]Removed[/] [word]{word}[/]")
            else:
                missing += 1
                error_console.print(f"[warning]{word!r} is not in {dictionary}[/]")
        await session.commit()
    return missing


@app.command(name="list")
def list_words(
    dictionary: str = typer.Option(
        settings.user_dictionary_name, "--dictionary", "-d", help="User dictionary name"
    ),
) -> None:
    """List the words of a user dictionary."""
    run_async(_list_words(dictionary))


async def _list_words(dictionary: str) -> None:
    """Async implementation of list command."""
    async with async_session() as session:
        words = await UserWordStore().list_words(session, dictionary)

    if not words:
        console.print(f"[dim]{dictionary} is empty[/]")
        return

    table = Table(title=f"{dictionary} ({len(words)} words)", show_header=False)
    table.add_column("Word", style="word")
    for word in words:
        table.add_row(word)
    console.print(table)
