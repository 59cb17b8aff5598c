"""Classify tic-tac-toe boards and run built-in checks against known positions."""

__version__ = "0.1.0"
__all__ = ["board", "selfcheck"]