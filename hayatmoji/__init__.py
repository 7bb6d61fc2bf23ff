"""hayatmoji - Interactively commit with an emoji prefixed message."""

from .cli.main import Hayatmoji
from .core.catalog import EmojiCatalog, EmojiEntry, load_catalog
from .core.git import GitFile, GitOperations
from .core.message import CommitMessage
from .errors import (
    CatalogError,
    CommitError,
    DetachedOrEmptyHeadError,
    GitError,
    HayatmojiError,
    NothingStagedError,
    PromptError,
)

__version__ = "0.1.0"

__all__ = [
    "Hayatmoji",
    "EmojiCatalog",
    "EmojiEntry",
    "load_catalog",
    "GitFile",
    "GitOperations",
    "CommitMessage",
    "HayatmojiError",
    "CatalogError",
    "PromptError",
    "CommitError",
    "NothingStagedError",
    "DetachedOrEmptyHeadError",
    "GitError",
]
