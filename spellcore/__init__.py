"""Spell checking engine with bundled and user dictionaries."""

__version__ = "0.1.0"
