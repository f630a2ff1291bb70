"""Solvers for days 1 to 15 of a season of daily programming puzzles."""

__version__ = "0.1.0"