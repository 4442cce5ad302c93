"""Damka — board-state core for 10x10 draughts."""

__version__ = "0.1.0"
