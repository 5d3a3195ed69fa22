"""Engine setup for CLI commands."""

from rich.progress import Progress, SpinnerColumn, TextColumn

from spellcore.cli.utils.console import error_console
from spellcore.config import settings
from spellcore.database import async_session
from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.engine import SpellCheckerEngine
from spellcore.services.factory import build_spell_checker, populate_engine
from spellcore.services.user_words import UserWordStore


async def load_engine() -> SpellCheckerEngine:
    """
    Build an engine with every dictionary loaded.

    The CLI runs in synchronous mode: when this returns, all bundled word
    lists have been built and the user dictionary is registered.
    """
    engine = build_spell_checker(settings, synchronous=True)
    user_dictionary = EditableDictionary(settings.user_dictionary_name)

    async with async_session() as session:
        await UserWordStore(engine.transform).load_into(session, user_dictionary)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=error_console,
        transient=True,
    ) as progress:
        progress.add_task("Loading dictionaries...", total=None)
        populate_engine(engine, user_dictionary, settings)

    return engine
