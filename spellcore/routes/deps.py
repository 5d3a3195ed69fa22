"""Request dependencies shared by the routers."""

from fastapi import HTTPException, Request

from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.engine import SpellCheckerEngine


def get_engine(request: Request) -> SpellCheckerEngine:
    """Return the engine created by the application lifespan."""
    engine: SpellCheckerEngine | None = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Spell checker is not initialized")
    return engine


def get_user_dictionary(request: Request) -> EditableDictionary:
    dictionary: EditableDictionary | None = getattr(request.app.state, "user_dictionary", None)
    if dictionary is None:
        raise HTTPException(status_code=503, detail="User dictionary is not initialized")
    return dictionary
