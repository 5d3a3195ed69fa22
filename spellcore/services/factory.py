"""Construction of a configured spell checker engine."""

import logging

from spellcore.config import Settings
from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.dictionary.loaders import EditableDictionaryLoader, discover_dictionaries
from spellcore.services.engine import SpellCheckerEngine
from spellcore.services.transform import Transformation

logger = logging.getLogger(__name__)


def build_spell_checker(config: Settings, synchronous: bool | None = None) -> SpellCheckerEngine:
    """
    Create an engine from settings.

    Args:
        config: Application settings
        synchronous: Override config.async_loading (the CLI always passes True)
    """
    if synchronous is None:
        synchronous = not config.async_loading
    return SpellCheckerEngine(
        transform=Transformation(min_length=config.min_word_length),
        synchronous=synchronous,
    )


def populate_engine(
    engine: SpellCheckerEngine,
    user_dictionary: EditableDictionary | None,
    config: Settings,
) -> int:
    """
    Request loading of every bundled word list and register the user dictionary.

    Returns:
        Number of bundled word lists requested
    """
    loaders = discover_dictionaries(config.resolved_dictionary_dir)
    for loader in loaders:
        engine.load_dictionary(loader)
    if user_dictionary is not None:
        engine.load_dictionary(EditableDictionaryLoader(user_dictionary))

    logger.info(
        f"Requested {len(loaders)} bundled dictionaries from {config.resolved_dictionary_dir}"
    )
    return len(loaders)
