"""Shared utility functions for CLI commands."""

import logging
import sys

import typer

from gnomit import global_config
from gnomit.config import GIT_INSTALL_HELP, INSTALLATION_ERROR_SUMMARY
from gnomit.git import GitError, GitNotInstalledError, install_as_git_editor

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool) -> None:
    """Send gnomit's log records to stderr.

    Args:
        debug: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def install_editor() -> None:
    """Install gnomit as the default Git editor, exiting 1 on failure.

    Raises:
        typer.Exit: Always; code 0 on success, 1 on failure.
    """
    try:
        command = install_as_git_editor()
    except GitNotInstalledError:
        typer.echo(f"\n{INSTALLATION_ERROR_SUMMARY}\n\n{GIT_INSTALL_HELP}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"\n{INSTALLATION_ERROR_SUMMARY}\n\n{e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Gnomit is now your default Git editor ({command})")
    raise typer.Exit(0)


def load_display_settings() -> tuple[str, bool]:
    """Read (comment_color, show_title) from the global config.

    Raises:
        typer.Exit: If the config file is unreadable.
    """
    try:
        return global_config.get_comment_color(), global_config.get_show_title()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)
