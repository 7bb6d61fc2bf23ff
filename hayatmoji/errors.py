"""Exceptions raised by hayatmoji."""


class HayatmojiError(Exception):
    """Base exception for hayatmoji errors."""


class CatalogError(HayatmojiError):
    """Raised when the bundled emoji catalog is malformed."""


class PromptError(HayatmojiError):
    """Raised when an interactive prompt is aborted or cannot run."""


class CommitError(HayatmojiError):
    """Base exception for commit creation errors."""


class NothingStagedError(CommitError):
    """Raised when the index has no staged changes."""

    def __init__(self, message: str = "nothing to commit"):
        super().__init__(message)


class DetachedOrEmptyHeadError(CommitError):
    """Raised when HEAD does not resolve to a commit."""

    def __init__(self, message: str = "failed to resolve HEAD to a commit"):
        super().__init__(message)


class GitError(CommitError):
    """Git operation error."""

    pass
