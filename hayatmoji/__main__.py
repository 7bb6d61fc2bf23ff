#!/usr/bin/env python3
"""Entry point for running hayatmoji as a module."""

import sys

import click

from . import __version__
from .cli import console
from .cli.main import Hayatmoji
from .config.settings import config
from .core.catalog import load_catalog
from .errors import HayatmojiError, PromptError


def handle_error(error: Exception) -> None:
    """Report a failed flow as a single line on stdout."""
    click.echo(f"error: {error}")
    if config.strict_exit:
        sys.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-c", "--commit", is_flag=True, help="Interactively commit using the prompts")
@click.option("-l", "--list", "list_", is_flag=True, help="List the available hayatmojis")
@click.option("-d", "--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="hayatmoji")
@click.pass_context
def main(ctx: click.Context, commit: bool, list_: bool, debug: bool) -> None:
    """A hayatmoji client for using emojis on commit messages."""
    console.setup_logging(debug, config.log_level)

    if not commit and not list_:
        click.echo(ctx.get_help())
        return

    try:
        if list_:
            console.print_catalog(load_catalog())
        if commit:
            Hayatmoji().run()
    except HayatmojiError as e:
        handle_error(e)
    except KeyboardInterrupt:
        handle_error(PromptError("Operation cancelled by user."))


if __name__ == "__main__":
    main()
