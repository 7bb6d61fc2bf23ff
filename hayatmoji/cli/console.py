"""Console output formatting and user interaction."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ..core.catalog import EmojiCatalog, EmojiEntry
from ..core.fuzzy import window
from ..errors import PromptError

console = Console()
err_console = Console(stderr=True)

SCROLL_DOWN = ">"
SCROLL_UP = "<"


def setup_logging(debug: bool = False, level: str = "WARNING") -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=debug)],
        force=True,
    )


def is_interactive() -> bool:
    """Whether both stdin and stdout are attached to a terminal."""
    return sys.stdin.isatty() and console.is_terminal


def _ensure_interactive() -> None:
    if not is_interactive():
        raise PromptError("not a terminal")


def _ask(prompt: str) -> str:
    try:
        return Prompt.ask(prompt, console=console, default="", show_default=False)
    except (KeyboardInterrupt, EOFError) as e:
        raise PromptError("Operation cancelled by user.") from e


def _print_choices(visible: list[EmojiEntry], offset: int, total: int) -> None:
    for row, entry in enumerate(visible, start=1):
        if row == 1:
            console.print(f"[bold cyan]> {row}. {escape(str(entry))}[/bold cyan]")
        else:
            console.print(f"  {row}. {escape(str(entry))}")
    if total > len(visible):
        console.print(
            f"[dim]  {offset + 1}-{offset + len(visible)} of {total} "
            f"('{SCROLL_DOWN}' next, '{SCROLL_UP}' previous)[/dim]"
        )


def select_emoji(catalog: EmojiCatalog, prompt: str, max_visible: int = 6) -> str:
    """Let the user pick an emoji from the catalog and return its glyph.

    Typing text narrows the list with a fuzzy search, a number picks a row of
    the visible window, and an empty answer picks the highlighted (first) row.
    """
    _ensure_interactive()

    query = ""
    offset = 0
    while True:
        matches = catalog.search(query)
        if not matches:
            print_warning(f"No hayatmoji matches '{escape(query)}'")
            query = ""
            offset = 0
            continue

        offset, visible = window(matches, offset, max_visible)
        header = f"\n[bold blue]{prompt}[/bold blue]"
        if query:
            header += f" [dim]{escape(query)}[/dim]"
        console.print(header)
        _print_choices(visible, offset, len(matches))

        answer = _ask("Search, number or enter").strip()
        if not answer:
            return visible[0].glyph
        if answer == SCROLL_DOWN:
            offset += max_visible
        elif answer == SCROLL_UP:
            offset -= max_visible
        elif answer.isdecimal() and 1 <= int(answer) <= len(visible):
            return visible[int(answer) - 1].glyph
        else:
            query = answer
            offset = 0


def ask_title(prompt: str) -> str:
    """Ask for the commit title until a non-empty one is entered."""
    _ensure_interactive()
    while True:
        title = _ask(prompt).strip()
        if title:
            return title
        print_warning("The commit title cannot be empty.")


def ask_body(prompt: str) -> str | None:
    """Ask for an optional commit body."""
    _ensure_interactive()
    body = _ask(prompt).strip()
    return body or None


def print_commit_message(message: str) -> None:
    """Print formatted commit message."""
    console.print(Panel(Text(message), expand=False, border_style="green"))


def print_catalog(catalog: EmojiCatalog) -> None:
    """Print every hayatmoji as a table."""
    table = Table(title="Hayatmojis")
    table.add_column("Emoji")
    table.add_column("Description")
    table.add_column("Background", style="dim")
    for entry in catalog:
        table.add_row(entry.glyph, entry.description, entry.background)
    console.print(table)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"\n[bold green]✅ {message}[/bold green]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[bold yellow]⚠️ {message}[/bold yellow]")
