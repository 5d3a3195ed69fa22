"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from spellcore.database import Base, get_session
from spellcore.main import app
from spellcore.services.dictionary import EditableDictionary, WordListLoader
from spellcore.services.engine import SpellCheckerEngine


@pytest.fixture
def basic_words() -> list[str]:
    return ["cat", "car", "cap", "dog"]


@pytest.fixture
def spell_engine(basic_words: list[str]) -> Generator[SpellCheckerEngine, None, None]:
    """Synchronous engine with the 'basic' word list loaded."""
    engine = SpellCheckerEngine(synchronous=True)
    engine.load_dictionary(WordListLoader("basic", basic_words))
    yield engine
    engine.close()


@pytest.fixture
def user_dictionary() -> EditableDictionary:
    return EditableDictionary("user")


@pytest.fixture
def word_list_file(tmp_path: Path) -> Path:
    """Write a small word list file."""
    path = tmp_path / "english.dic"
    path.write_text("# sample list\nhouse\nhorse\n\nmouse\n", encoding="utf-8")
    return path


@pytest.fixture
async def async_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session_maker() as session:
        yield session


@pytest.fixture
def test_app(
    async_session: AsyncSession,
    spell_engine: SpellCheckerEngine,
    user_dictionary: EditableDictionary,
) -> Generator[FastAPI, None, None]:
    """Application wired to the test engine and database session."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        yield async_session

    spell_engine.register_user_dictionary(user_dictionary)
    app.dependency_overrides[get_session] = override_get_session
    app.state.engine = spell_engine
    app.state.user_dictionary = user_dictionary
    app.state.analysis_generation = 0
    yield app
    app.dependency_overrides.clear()
    del app.state.engine
    del app.state.user_dictionary


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
