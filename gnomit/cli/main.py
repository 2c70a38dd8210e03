"""Main CLI command: open a commit message file for editing."""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from gnomit import __version__
from gnomit.config import PROGRAM_NAME, READ_ERROR_SUMMARY, WRITE_ERROR_SUMMARY
from gnomit.display import read_message, show_session
from gnomit.message import DecodeError, MessageFileError
from gnomit.session import EditingSession
from gnomit.cli.utils import configure_logging, install_editor, load_display_settings

logger = logging.getLogger(__name__)


def main_command(
    ctx: typer.Context,
    files: Optional[List[Path]] = typer.Argument(
        None,
        metavar="<path-to-git-commit-message-file>",
        help="Commit message file passed in by Git",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version number and exit",
    ),
    install: bool = typer.Option(
        False,
        "--install",
        "-i",
        help="Install Gnomit as your default Git editor",
    ),
    markup: bool = typer.Option(
        False,
        "--markup",
        "-m",
        help="Print the annotated message markup and exit without editing",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Log debugging information to stderr",
    ),
) -> None:
    """Edit a Git commit message with the instructions greyed out."""
    configure_logging(debug)

    if install:
        install_editor()

    # Minimal version string per the GNU coding standards
    if version:
        typer.echo(f"{PROGRAM_NAME} {__version__}")
        raise typer.Exit(0)

    # Git always passes the file, so no file means someone ran us directly
    if not files:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    if len(files) > 1:
        typer.echo("Error: expected exactly one commit message file.", err=True)
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(2)

    comment_color, show_title = load_display_settings()

    try:
        session = EditingSession.open(files[0], comment_color)
    except (MessageFileError, DecodeError) as e:
        typer.echo(f"\n{READ_ERROR_SUMMARY}\n\n{e}\n", err=True)
        raise typer.Exit(1)

    if markup:
        typer.echo(session.annotated.markup)
        raise typer.Exit(0)

    show_session(session, comment_color, show_title)
    session.insert(read_message())

    if not session.dirty:
        logger.debug("Nothing written, leaving %s untouched", session.path)
        return

    try:
        session.save()
    except MessageFileError as e:
        typer.echo(f"\n{WRITE_ERROR_SUMMARY}\n\n{e}\n", err=True)
        raise typer.Exit(1)

    typer.echo(f"Saved {session.authored_line_count()} line(s) of message.", err=True)
