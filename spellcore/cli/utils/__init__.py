"""CLI utility modules."""

from spellcore.cli.utils.async_runner import run_async
from spellcore.cli.utils.console import console, error_console
from spellcore.cli.utils.engine import load_engine

__all__ = ["run_async", "console", "error_console", "load_engine"]
