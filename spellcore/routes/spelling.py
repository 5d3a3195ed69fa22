"""Spell checking routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from spellcore.config import settings
from spellcore.routes.deps import get_engine
from spellcore.services.engine import SpellCheckerEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/spelling", tags=["spelling"])


class CheckRequest(BaseModel):
    words: list[str]


@router.post("/check")
async def check_words(
    body: CheckRequest,
    request: Request,
    engine: SpellCheckerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Check a batch of words.

    `generation` changes every time a background load finishes; clients
    caching results should drop them when it changes.
    """
    results = {word: engine.is_correct(word) for word in body.words}
    return {
        "results": results,
        "loading": engine.is_loading,
        "generation": getattr(request.app.state, "analysis_generation", 0),
    }


@router.get("/suggest")
async def suggest_words(
    word: str,
    threshold: int = Query(default=settings.suggestion_threshold, ge=0, le=100),
    quality: int = Query(default=settings.suggestion_quality),
    engine: SpellCheckerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Suggest corrections for a single word."""
    suggestions = engine.suggest(word, threshold, quality)
    logger.debug(f"{len(suggestions)} suggestions for '{word}'")
    return {"word": word, "suggestions": suggestions}
