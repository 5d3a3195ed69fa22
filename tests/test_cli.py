"""Tests for CLI commands."""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from spellcore.cli.commands.check import _check, _suggest
from spellcore.cli.commands.dictionary import _add_words, _list_words, _remove_words
from spellcore.cli.main import app
from spellcore.services.dictionary import WordListLoader
from spellcore.services.engine import SpellCheckerEngine
from spellcore.services.user_words import UserWordStore

runner = CliRunner()


def _engine() -> SpellCheckerEngine:
    engine = SpellCheckerEngine(synchronous=True)
    engine.load_dictionary(WordListLoader("basic", ["cat", "car", "cap"]))
    return engine


def _patch_session(module: str, session):
    """Route `async_session()` in a CLI module to the test session."""
    patcher = patch(f"spellcore.cli.commands.{module}.async_session")
    mock_session_ctx = patcher.start()
    mock_session_ctx.return_value.__aenter__ = AsyncMock(return_value=session)
    mock_session_ctx.return_value.__aexit__ = AsyncMock(return_value=None)
    return patcher


class TestCheckCommand:
    """Tests for the check command."""

    @pytest.mark.asyncio
    async def test_check_counts_misspelled(self):
        """Should return the number of misspelled words."""
        with patch("spellcore.cli.commands.check.load_engine", AsyncMock(return_value=_engine())):
            misspelled = await _check(["cat", "cag", "car"], show_suggestions=True)
        assert misspelled == 1

    @pytest.mark.asyncio
    async def test_check_all_correct(self):
        """Should return zero when every word is known."""
        with patch("spellcore.cli.commands.check.load_engine", AsyncMock(return_value=_engine())):
            misspelled = await _check(["cat", "car"], show_suggestions=False)
        assert misspelled == 0

    def test_check_exit_code(self):
        """Should exit with status 1 when a word is misspelled."""
        with (
            patch("spellcore.cli.main.init_db", AsyncMock()),
            patch("spellcore.cli.commands.check.load_engine", AsyncMock(return_value=_engine())),
        ):
            result = runner.invoke(app, ["check", "cat", "cag"])
        assert result.exit_code == 1
        assert "misspelled" in result.output

    def test_check_success_exit_code(self):
        """Should exit with status 0 when every word is known."""
        with (
            patch("spellcore.cli.main.init_db", AsyncMock()),
            patch("spellcore.cli.commands.check.load_engine", AsyncMock(return_value=_engine())),
        ):
            result = runner.invoke(app, ["check", "cat"])
        assert result.exit_code == 0


class TestSuggestCommand:
    """Tests for the suggest command."""

    @pytest.mark.asyncio
    async def test_suggest_prints_words(self, capsys):
        """Should print one suggestion per line."""
        with patch("spellcore.cli.commands.check.load_engine", AsyncMock(return_value=_engine())):
            await _suggest("cas", 3, 1)
        output = capsys.readouterr().out
        for word in ("cat", "car", "cap"):
            assert word in output

    @pytest.mark.asyncio
    async def test_suggest_none(self, capsys):
        """Should say so when nothing is close."""
        with patch("spellcore.cli.commands.check.load_engine", AsyncMock(return_value=_engine())):
            await _suggest("xylophone", 3, 1)
        assert "No suggestions" in capsys.readouterr().out


class TestDictCommands:
    """Tests for the dict subcommands."""

    @pytest.mark.asyncio
    async def test_add_words(self, async_session):
        """Should persist new words."""
        patcher = _patch_session("dictionary", async_session)
        try:
            await _add_words(["kubectl", "kubectl", "zsh"], "user")
        finally:
            patcher.stop()

        assert await UserWordStore().list_words(async_session, "user") == ["kubectl", "zsh"]

    @pytest.mark.asyncio
    async def test_add_words_normalizes(self, async_session):
        """Should store lookup keys and skip words too short to check."""
        patcher = _patch_session("dictionary", async_session)
        try:
            await _add_words(["Kubectl", "ok"], "user")
        finally:
            patcher.stop()

        assert await UserWordStore().list_words(async_session, "user") == ["kubectl"]

    @pytest.mark.asyncio
    async def test_remove_words(self, async_session):
        """Should count words that were not stored."""
        await UserWordStore().add(async_session, "user", "zsh")
        patcher = _patch_session("dictionary", async_session)
        try:
            missing = await _remove_words(["zsh", "fish"], "user")
        finally:
            patcher.stop()

        assert missing == 1
        assert await UserWordStore().list_words(async_session, "user") == []

    @pytest.mark.asyncio
    async def test_list_words(self, async_session, capsys):
        """Should print stored words."""
        await UserWordStore().add(async_session, "user", "kubectl")
        patcher = _patch_session("dictionary", async_session)
        try:
            await _list_words("user")
        finally:
            patcher.stop()

        assert "kubectl" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_list_empty(self, async_session, capsys):
        """Should report an empty dictionary."""
        patcher = _patch_session("dictionary", async_session)
        try:
            await _list_words("user")
        finally:
            patcher.stop()

        assert "user is empty" in capsys.readouterr().out
