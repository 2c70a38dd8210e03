"""CLI entry point for gnomit.

Git runs gnomit as its core.editor with the path of the commit message file.
"""

import typer

from gnomit.config import COPYRIGHT, SUMMARY
from gnomit.cli.main import main_command

app = typer.Typer(
    name="gnomit",
    add_completion=False,
)

app.command(help=SUMMARY, epilog=COPYRIGHT)(main_command)


__all__ = [
    "app",
    "main_command",
]
