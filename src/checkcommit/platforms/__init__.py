# src/checkcommit/platforms/__init__.py
from .base import DiffSource
from .git import GitDiffSource

__all__ = ["DiffSource", "GitDiffSource"]
