"""Commit message composition."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitMessage:
    """A commit message prefixed with a hayatmoji."""

    emoji: str
    title: str
    body: str | None = None

    @property
    def summary(self) -> str:
        """The first line of the commit message."""
        return f"{self.emoji} {self.title}"

    def format(self) -> str:
        """Format the full text passed to git."""
        if self.body:
            return f"{self.summary}\n\n{self.body}"
        return self.summary
