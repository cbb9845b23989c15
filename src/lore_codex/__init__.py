"""Lore Codex: a browsable, queryable encyclopedia of a fictional world."""

__version__ = "0.1.0"
