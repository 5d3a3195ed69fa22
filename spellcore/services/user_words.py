"""Persistence of user dictionary words in SQLite."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from spellcore.models import UserWord
from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.transform import Transform, Transformation

logger = logging.getLogger(__name__)


class UserWordStore:
    """
    Keeps editable dictionaries and the user_words table in step.

    Words are stored as lookup keys, normalized with the same transform the
    engine applies before asking the user dictionaries.
    """

    def __init__(self, transform: Transform | None = None) -> None:
        self.transform = transform or Transformation()

    def normalize(self, word: str) -> str | None:
        """Lookup key for `word`, or None if it cannot be checked."""
        return self.transform(word)

    async def list_words(self, session: AsyncSession, dictionary_name: str) -> list[str]:
        stmt = (
            select(UserWord.word)
            .where(UserWord.dictionary == dictionary_name)
            .order_by(UserWord.word)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def load_into(self, session: AsyncSession, dictionary: EditableDictionary) -> int:
        """
        Replace the content of `dictionary` with its persisted words.

        Rows are normalized on the way in; rows the transform rejects are skipped.

        Returns the number of words loaded.
        """
        stored = await self.list_words(session, dictionary.name)
        words = {key for key in map(self.normalize, stored) if key}
        dictionary.replace_all(words)
        if len(words) != len(stored):
            logger.debug(f"Skipped {len(stored) - len(words)} stored words in '{dictionary.name}'")
        logger.info(f"Loaded {len(words)} words into user dictionary '{dictionary.name}'")
        return len(words)

    async def add(self, session: AsyncSession, dictionary_name: str, word: str) -> bool:
        """
        Persist the lookup key of a word.

        Returns:
            False if the word cannot be checked or was already stored
        """
        key = self.normalize(word)
        if not key:
            return False

        stmt = select(UserWord).where(
            UserWord.dictionary == dictionary_name,
            UserWord.word == key,
        )
        result = await session.execute(stmt)
        if result.scalar_one_or_none() is not None:
            return False

        session.add(UserWord(dictionary=dictionary_name, word=key))
        await session.flush()
        logger.debug(f"Stored '{key}' in '{dictionary_name}'")
        return True

    async def remove(self, session: AsyncSession, dictionary_name: str, word: str) -> bool:
        """Delete a persisted word. Returns False if it was not stored."""
        key = self.normalize(word)
        if not key:
            return False

        stmt = delete(UserWord).where(
            UserWord.dictionary == dictionary_name,
            UserWord.word == key,
        )
        result = await session.execute(stmt)
        await session.flush()
        return bool(result.rowcount)
