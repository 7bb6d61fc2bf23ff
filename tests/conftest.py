"""Common test fixtures."""

import shutil
import subprocess

import pytest

from hayatmoji.config.settings import Config
from hayatmoji.core.catalog import EmojiCatalog, EmojiEntry


@pytest.fixture
def catalog():
    """Fixture for a small catalog."""
    return EmojiCatalog(
        entries=(
            EmojiEntry("🎨", "orange", "Improve structure / format of the code."),
            EmojiEntry("⚡️", "yellow", "Improve performance."),
            EmojiEntry("🔥", "red", "Remove code or files."),
            EmojiEntry("🐛", "green", "Fix a bug."),
            EmojiEntry("✨", "yellow", "Introduce new features."),
            EmojiEntry("📝", "blue", "Add or update documentation."),
            EmojiEntry("🚀", "purple", "Deploy stuff."),
            EmojiEntry("✅", "green", "Add, update, or pass tests."),
        )
    )


@pytest.fixture
def settings():
    """Fixture for explicit settings."""
    return Config(
        select_prompt="Choose a hayatmoji",
        title_prompt="Enter the commit title",
        body_prompt="Enter the commit message",
        max_visible=6,
        log_level="WARNING",
        strict_exit=False,
    )


@pytest.fixture
def interactive(mocker):
    """Pretend stdin and stdout are a terminal."""
    return mocker.patch("hayatmoji.cli.console.is_interactive", return_value=True)


@pytest.fixture
def mock_ask(mocker, interactive):
    """Fixture for mocked prompt answers."""
    return mocker.patch("hayatmoji.cli.console.Prompt.ask")


def _run_git(repo, *args: str) -> str:
    """Run git in ``repo`` and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def empty_repo(tmp_path, monkeypatch):
    """A freshly initialized repository without any commit."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in (
        "GIT_DIR",
        "GIT_INDEX_FILE",
        "GIT_AUTHOR_NAME",
        "GIT_AUTHOR_EMAIL",
        "GIT_COMMITTER_NAME",
        "GIT_COMMITTER_EMAIL",
    ):
        monkeypatch.delenv(name, raising=False)

    repo = tmp_path / "repo"
    repo.mkdir()
    _run_git(repo, "init", "-q")
    _run_git(repo, "config", "user.name", "Test User")
    _run_git(repo, "config", "user.email", "test@example.com")
    _run_git(repo, "config", "commit.gpgsign", "false")
    return repo


@pytest.fixture
def git_repo(empty_repo):
    """A repository with a single initial commit."""
    (empty_repo / "README.md").write_text("hello\n")
    _run_git(empty_repo, "add", "README.md")
    _run_git(empty_repo, "commit", "-q", "-m", "initial commit")
    return empty_repo


@pytest.fixture
def git():
    """Fixture for running git commands in a test repository."""
    return _run_git
