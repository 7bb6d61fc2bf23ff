"""Configuration settings for hayatmoji."""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


def load_env() -> None:
    """Load the nearest .env file, searching up from the working directory."""
    load_dotenv(find_dotenv(usecwd=True))


# Load environment variables at module level
load_env()

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Config:
    """Main configuration settings."""

    select_prompt: str
    title_prompt: str
    body_prompt: str
    max_visible: int
    log_level: str
    strict_exit: bool

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        max_visible = int(os.getenv("HAYATMOJI_MAX_VISIBLE", "6"))
        if max_visible < 1:
            raise ValueError("HAYATMOJI_MAX_VISIBLE must be at least 1.")

        log_level = os.getenv("HAYATMOJI_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"HAYATMOJI_LOG_LEVEL is not a valid level: {log_level}")

        return cls(
            select_prompt=os.getenv("HAYATMOJI_SELECT_PROMPT", "Choose a hayatmoji"),
            title_prompt=os.getenv("HAYATMOJI_TITLE_PROMPT", "Enter the commit title"),
            body_prompt=os.getenv("HAYATMOJI_BODY_PROMPT", "Enter the commit message"),
            max_visible=max_visible,
            log_level=log_level,
            strict_exit=_parse_bool(
                "HAYATMOJI_STRICT_EXIT", os.getenv("HAYATMOJI_STRICT_EXIT", "")
            ),
        )


# Global configuration instance
config = Config.from_env()
