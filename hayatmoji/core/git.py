"""Git operations module."""

import logging
import os
import re
import subprocess
from dataclasses import dataclass

from ..errors import DetachedOrEmptyHeadError, GitError, NothingStagedError
from .message import CommitMessage

logger = logging.getLogger(__name__)

# Index status codes from `git status --porcelain` that count as staged.
STAGED_STATUSES = frozenset("AMDRT")

IDENT_PATTERN = re.compile(r"^(?P<name>.*) <(?P<email>[^>]*)> (?P<date>\d+ [+-]\d{4})$")


@dataclass
class GitFile:
    """Represents a changed path and its index status."""

    path: str
    index_status: str

    @property
    def is_staged(self) -> bool:
        return self.index_status in STAGED_STATUSES


@dataclass(frozen=True)
class Signature:
    """An identity used as both author and committer."""

    name: str
    email: str
    date: str

    @classmethod
    def parse(cls, ident: str) -> "Signature":
        """Parse a `git var GIT_AUTHOR_IDENT` line."""
        match = IDENT_PATTERN.match(ident.strip())
        if match is None:
            raise GitError(f"Failed to parse the default signature: {ident.strip()}")
        return cls(name=match["name"], email=match["email"], date=match["date"])

    def as_env(self) -> dict[str, str]:
        """Environment variables making git use this identity for both roles."""
        env = {}
        for role in ("AUTHOR", "COMMITTER"):
            env[f"GIT_{role}_NAME"] = self.name
            env[f"GIT_{role}_EMAIL"] = self.email
            env[f"GIT_{role}_DATE"] = self.date
        return env


def parse_status(output: str) -> list[GitFile]:
    """Parse `git status --porcelain` output into GitFile entries."""
    files = []
    for line in output.splitlines():
        if not line.strip():
            continue

        status = line[:2]

        # Skip ignored files
        if status == "!!":
            continue

        files.append(GitFile(path=line[3:].strip(), index_status=status[0]))

    return files


class GitOperations:
    """Git operations against the repository rooted at ``path``."""

    def __init__(self, path: str = "."):
        self.path = path

    @classmethod
    def open(cls, path: str = ".") -> "GitOperations":
        """Open the repository containing ``path``."""
        repo = cls(path)
        inside = repo._run(["rev-parse", "--is-inside-work-tree"], "open repository")
        if inside.strip() != "true":
            raise GitError(f"Failed to open repository: {path} is not inside a work tree")
        return repo

    def _run(
        self,
        args: list[str],
        action: str,
        input: str | None = None,
        env: dict[str, str] | None = None,
    ) -> str:
        """Run a git command and return its stdout."""
        cmd = ["git", *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=self.path,
                input=input,
                env={**os.environ, **env} if env else None,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else str(e)
            raise GitError(f"Failed to {action}: {error_msg}") from e
        except OSError as e:
            raise GitError(f"Failed to {action}: {e}") from e
        return result.stdout

    def get_status(self) -> list[GitFile]:
        """Get the status of every changed path."""
        output = self._run(["status", "--porcelain"], "get status")
        return parse_status(output)

    def ensure_staged(self) -> None:
        """Raise NothingStagedError unless the index has staged changes."""
        staged = [f for f in self.get_status() if f.is_staged]
        if not staged:
            raise NothingStagedError()
        logger.debug("%d staged paths", len(staged))

    def resolve_head(self) -> str:
        """Return the id of the commit HEAD points to."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--verify", "--quiet", "HEAD^{commit}"],
                cwd=self.path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as e:
            raise GitError(f"Failed to resolve HEAD: {e}") from e
        head = result.stdout.strip()
        if result.returncode != 0 or not head:
            raise DetachedOrEmptyHeadError()
        return head

    def get_signature(self) -> Signature:
        """Return the default identity from the repository configuration."""
        ident = self._run(["var", "GIT_AUTHOR_IDENT"], "get the default signature")
        return Signature.parse(ident)

    def write_tree(self) -> str:
        """Write the index as a tree object and return its id."""
        return self._run(["write-tree"], "write tree").strip()

    def write_commit(self, message: CommitMessage) -> str:
        """Create a commit from the index on top of HEAD and return its id."""
        text = message.format()
        parent = self.resolve_head()
        signature = self.get_signature()
        logger.debug("Committing as %s <%s> on top of %s", signature.name, signature.email, parent)

        tree = self.write_tree()
        commit = self._run(
            ["commit-tree", tree, "-p", parent, "-F", "-"],
            "create commit",
            input=text,
            env=signature.as_env(),
        ).strip()

        self._run(
            ["update-ref", "-m", f"commit: {message.summary}", "HEAD", commit, parent],
            "update HEAD",
        )
        logger.info("Created commit %s", commit)
        return commit
