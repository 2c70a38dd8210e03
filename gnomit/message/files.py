"""Commit message file access.

Contains:
- read_message_file: Read the raw bytes of a commit message file
- write_message_file: Save an edited commit message
"""

import logging
from pathlib import Path

from gnomit.message.exceptions import MessageFileError

logger = logging.getLogger(__name__)


def read_message_file(file_path: Path) -> bytes:
    """Read the commit message file Git handed to the editor.

    Args:
        file_path: Path to the commit message file.

    Returns:
        The raw file content.

    Raises:
        MessageFileError: If the file cannot be read.
    """
    try:
        content = Path(file_path).read_bytes()
    except OSError as e:
        raise MessageFileError(f"Failed to read {file_path}: {e.strerror or e}") from e

    logger.debug("Read %d bytes from %s", len(content), file_path)
    return content


def write_message_file(file_path: Path, text: str) -> None:
    """Write the edited commit message back for Git to pick up.

    Raises:
        MessageFileError: If the file cannot be written.
    """
    try:
        Path(file_path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise MessageFileError(f"Failed to write {file_path}: {e.strerror or e}") from e

    logger.debug("Wrote %d characters to %s", len(text), file_path)
