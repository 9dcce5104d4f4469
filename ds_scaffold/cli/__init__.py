"""
CLI module for ds-scaffold.

Provides the main entry point installed as the ``ds-scaffold`` console script.
"""

from .commands import main

__all__ = ["main"]
