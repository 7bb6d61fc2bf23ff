"""Main CLI module for hayatmoji."""

import logging

from ..config.settings import Config, config
from ..core.catalog import EmojiCatalog, load_catalog
from ..core.git import GitOperations
from ..core.message import CommitMessage
from . import console

logger = logging.getLogger(__name__)


class Hayatmoji:
    """Main application class."""

    def __init__(
        self,
        catalog: EmojiCatalog | None = None,
        settings: Config | None = None,
        repo_path: str = ".",
    ):
        """Initialize the application."""
        self.catalog = catalog if catalog is not None else load_catalog()
        self.settings = settings or config
        self.repo_path = repo_path

    def prompt_message(self) -> CommitMessage:
        """Ask for the emoji, the title and the body, in that order."""
        emoji = console.select_emoji(
            self.catalog, self.settings.select_prompt, self.settings.max_visible
        )
        title = console.ask_title(self.settings.title_prompt)
        body = console.ask_body(self.settings.body_prompt)
        return CommitMessage(emoji=emoji, title=title, body=body)

    def commit(self, message: CommitMessage) -> str:
        """Write ``message`` as a new commit and return its id."""
        git = GitOperations.open(self.repo_path)
        git.ensure_staged()
        return git.write_commit(message)

    def run(self) -> str:
        """Run the interactive commit flow."""
        message = self.prompt_message()
        logger.debug("Composed message: %r", message.format())

        commit_id = self.commit(message)

        console.print_commit_message(message.format())
        console.print_success(f"Created commit {commit_id[:7]}")
        return commit_id
