"""Terminal display for an editing session.

Shows the title, the body as plain text and the comment block dimmed in the
configured colour, then collects the person's message from standard input.
"""

import sys
from typing import Optional, TextIO

import typer

from gnomit.session import EditingSession

EDIT_PROMPT = "Write your commit message above the comments. Press Ctrl-D when done."


def hex_to_rgb(color: str) -> Optional[tuple[int, int, int]]:
    """Convert ``#rrggbb`` to an RGB tuple, or None if malformed."""
    value = color.lstrip("#")
    if len(value) != 6:
        return None
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        return None


def render_session(session: EditingSession, comment_color: str, show_title: bool = True) -> str:
    """Render the session buffer for a terminal.

    Args:
        session: The open editing session.
        comment_color: Hex colour for the comment block.
        show_title: Whether to put the title on the first line.

    Returns:
        Text with ANSI styling, ready for typer.echo.
    """
    parsed = session.parsed
    parts = []

    if show_title:
        parts.append(typer.style(session.title, bold=True))
        parts.append("\n")

    if parsed.body:
        parts.append(parsed.body)

    parts.append(typer.style(parsed.comment, fg=hex_to_rgb(comment_color), dim=True))
    return "".join(parts)


def read_message(stream: Optional[TextIO] = None) -> str:
    """Read the person's message until end of input.

    Trailing newlines are dropped so the comment block keeps its position.
    """
    stream = stream or sys.stdin
    return stream.read().rstrip("\n")


def show_session(session: EditingSession, comment_color: str, show_title: bool = True) -> None:
    """Print the session and the editing hint."""
    typer.echo(render_session(session, comment_color, show_title))
    typer.echo("")
    typer.echo(EDIT_PROMPT, err=True)
