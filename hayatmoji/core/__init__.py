"""Core modules for hayatmoji.

This module contains the core functionality including:
- The bundled emoji catalog
- Commit message composition
- Git operations
"""

from .catalog import EmojiCatalog, EmojiEntry, load_catalog, parse_catalog
from .git import GitFile, GitOperations, Signature
from .message import CommitMessage

__all__ = [
    "EmojiCatalog",
    "EmojiEntry",
    "load_catalog",
    "parse_catalog",
    "GitFile",
    "GitOperations",
    "Signature",
    "CommitMessage",
]
