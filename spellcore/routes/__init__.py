"""API routes."""

from spellcore.routes.dictionaries import router as dictionaries_router
from spellcore.routes.spelling import router as spelling_router

__all__ = [
    "dictionaries_router",
    "spelling_router",
]
