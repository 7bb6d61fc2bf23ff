"""Bundled hayatmoji catalog."""

import logging
import tomllib
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources

from ..errors import CatalogError
from .fuzzy import fuzzy_filter

logger = logging.getLogger(__name__)

CATALOG_PACKAGE = "hayatmoji.data"
CATALOG_RESOURCE = "hayatmojis.toml"
CATALOG_TABLE = "hayatmojis"


@dataclass(frozen=True)
class EmojiEntry:
    """A single emoji that can prefix a commit message."""

    glyph: str
    background: str
    description: str

    def __str__(self) -> str:
        return f"{self.glyph} - {self.description}"


@dataclass(frozen=True)
class EmojiCatalog:
    """Ordered, read-only collection of emoji entries."""

    entries: tuple[EmojiEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[EmojiEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> EmojiEntry:
        return self.entries[index]

    def search(self, query: str) -> list[EmojiEntry]:
        """Return entries fuzzy-matching ``query``, best match first."""
        return fuzzy_filter(query, self.entries)


def _parse_entry(key: str, value: object) -> EmojiEntry:
    if not isinstance(value, dict):
        raise CatalogError(f"Catalog entry '{key}' is not a table")

    glyph = value.get("emoji")
    background = value.get("background", "")
    description = value.get("description")

    if not isinstance(glyph, str) or not glyph:
        raise CatalogError(f"Catalog entry '{key}' has no emoji")
    if not isinstance(description, str) or not description:
        raise CatalogError(f"Catalog entry '{key}' has no description")
    if not isinstance(background, str):
        raise CatalogError(f"Catalog entry '{key}' has an invalid background")

    return EmojiEntry(glyph=glyph, background=background, description=description)


def parse_catalog(text: str) -> EmojiCatalog:
    """Parse a TOML catalog document.

    Entries are ordered by their table key.
    """
    try:
        root = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise CatalogError(f"Failed to parse catalog: {e}") from e

    table = root.get(CATALOG_TABLE)
    if not isinstance(table, dict):
        raise CatalogError(f"Catalog has no '{CATALOG_TABLE}' table")

    entries = tuple(_parse_entry(key, value) for key, value in sorted(table.items()))
    if not entries:
        raise CatalogError("Catalog is empty")

    return EmojiCatalog(entries=entries)


@lru_cache(maxsize=None)
def load_catalog() -> EmojiCatalog:
    """Load the catalog bundled with the package, parsing it once per process."""
    source = resources.files(CATALOG_PACKAGE).joinpath(CATALOG_RESOURCE)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Failed to read catalog: {e}") from e

    catalog = parse_catalog(text)
    logger.debug("Loaded %d hayatmojis", len(catalog))
    return catalog
