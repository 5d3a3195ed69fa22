"""Dictionary management routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from spellcore.config import settings
from spellcore.database import get_session
from spellcore.routes.deps import get_engine, get_user_dictionary
from spellcore.services.dictionary.base import Dictionary
from spellcore.services.dictionary.compressed import CompressedDictionary
from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.engine import SpellCheckerEngine
from spellcore.services.factory import populate_engine
from spellcore.services.user_words import UserWordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionaries", tags=["dictionaries"])


class WordRequest(BaseModel):
    word: str


def _describe(dictionary: Dictionary) -> dict[str, Any]:
    info: dict[str, Any] = {"name": dictionary.name}
    if isinstance(dictionary, CompressedDictionary):
        info["words"] = len(dictionary)
    return info


@router.get("")
async def list_dictionaries(
    engine: SpellCheckerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """List loaded dictionaries and the loader state."""
    return {
        "bundled": [_describe(d) for d in engine.registry.bundled],
        "user": [{"name": d.name, "words": len(d)} for d in engine.registry.user],
        "loading": engine.is_loading,
        "pending": engine.coordinator.pending_count,
    }


@router.post("/reset")
async def reset_dictionaries(
    engine: SpellCheckerEngine = Depends(get_engine),
    user_dictionary: EditableDictionary = Depends(get_user_dictionary),
) -> dict[str, Any]:
    """Drop every dictionary and load them again from disk."""
    engine.reset()
    requested = populate_engine(engine, user_dictionary, settings)
    return {"requested": requested, "loading": engine.is_loading}


@router.post("/user/words", status_code=201)
async def add_user_word(
    body: WordRequest,
    session: AsyncSession = Depends(get_session),
    engine: SpellCheckerEngine = Depends(get_engine),
    user_dictionary: EditableDictionary = Depends(get_user_dictionary),
) -> dict[str, Any]:
    """Add a word to the user dictionary, stored as its lookup key."""
    store = UserWordStore(engine.transform)
    word = store.normalize(body.word)
    if not word:
        raise HTTPException(status_code=400, detail="Word is empty or too short to check")

    added = await store.add(session, user_dictionary.name, word)
    await session.commit()
    user_dictionary.add_word(word)

    if added:
        logger.info(f"Added '{word}' to user dictionary")
    return {"word": word, "added": added}


@router.delete("/user/words/{word}")
async def remove_user_word(
    word: str,
    session: AsyncSession = Depends(get_session),
    engine: SpellCheckerEngine = Depends(get_engine),
    user_dictionary: EditableDictionary = Depends(get_user_dictionary),
) -> dict[str, Any]:
    """Remove a word from the user dictionary."""
    store = UserWordStore(engine.transform)
    removed = await store.remove(session, user_dictionary.name, word)
    await session.commit()
    key = store.normalize(word)
    if key:
        user_dictionary.remove_word(key)
    return {"word": word, "removed": removed}


@router.delete("/{name}")
async def remove_dictionary(
    name: str,
    engine: SpellCheckerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Unload a bundled dictionary. Unknown names are ignored."""
    was_loaded = engine.is_dictionary_loaded(name)
    engine.remove_dictionary(name)
    return {"name": name, "removed": was_loaded}
