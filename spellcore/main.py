"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from spellcore.config import settings
from spellcore.database import async_session, init_db
from spellcore.logging_config import setup_logging
from spellcore.routes import dictionaries_router, spelling_router
from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.factory import build_spell_checker, populate_engine
from spellcore.services.user_words import UserWordStore

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting spellcore...")

    await init_db()
    logger.info("Database initialized")

    engine = build_spell_checker(settings)
    user_dictionary = EditableDictionary(settings.user_dictionary_name)
    async with async_session() as session:
        await UserWordStore(engine.transform).load_into(session, user_dictionary)

    app.state.analysis_generation = 0

    def on_reanalysis() -> None:
        app.state.analysis_generation += 1
        logger.info(f"Dictionaries loaded, analysis generation {app.state.analysis_generation}")

    engine.add_reanalysis_listener(on_reanalysis)
    app.state.engine = engine
    app.state.user_dictionary = user_dictionary
    populate_engine(engine, user_dictionary, settings)

    yield

    logger.info("Shutting down spellcore...")
    engine.close()


app = FastAPI(
    title="spellcore",
    description="Spell checking service with bundled and user dictionaries",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(spelling_router)
app.include_router(dictionaries_router)


@app.get("/health")
async def health() -> dict[str, str | bool]:
    """Health check endpoint."""
    engine = getattr(app.state, "engine", None)
    return {
        "status": "healthy",
        "version": VERSION,
        "loading": engine.is_loading if engine is not None else False,
    }


def run() -> None:
    """Run the API server (for use with the `spellcore-server` command)."""
    import uvicorn

    uvicorn.run(
        "spellcore.main:app",
        host="127.0.0.1",
        port=8000,
    )


if __name__ == "__main__":
    run()
