"""Editing session for a single commit message file.

The session owns everything that lives as long as the editor is open: the
file path, the parsed message, the current buffer and the line count seen at
the last edit. It is created by the caller and passed around explicitly.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from gnomit.config import DEFAULT_COMMENT_COLOR
from gnomit.message import (
    AnnotatedMessage,
    ParsedCommitMessage,
    annotate,
    parse,
    read_message_file,
    recount,
    write_message_file,
)

logger = logging.getLogger(__name__)


def count_lines(text: str) -> int:
    """Count lines the way the parser does: newline-separated entries."""
    return len(text.split("\n"))


@dataclass
class EditingSession:
    """State of one open commit message."""

    path: Path
    parsed: ParsedCommitMessage
    annotated: AnnotatedMessage
    buffer: str = ""
    previous_line_count: int = 1
    dirty: bool = field(default=False, compare=False)

    @classmethod
    def open(cls, path: Path, comment_color: str = DEFAULT_COMMENT_COLOR) -> "EditingSession":
        """Read and parse a commit message file.

        Raises:
            MessageFileError: If the file cannot be read.
            DecodeError: If the file is not text.
        """
        path = Path(path)
        parsed = parse(read_message_file(path), path.absolute())
        annotated = annotate(parsed, comment_color)
        logger.debug("Opened session for %s titled %r", path, annotated.title)
        return cls(path=path, parsed=parsed, annotated=annotated, buffer=annotated.text)

    @property
    def title(self) -> str:
        return self.annotated.title

    def authored_line_count(self, buffer: Optional[str] = None) -> int:
        """Lines of the buffer outside the protected comment block."""
        text = self.buffer if buffer is None else buffer
        return max(0, recount(count_lines(text), self.parsed.comment_line_count))

    def update(self, buffer: str) -> int:
        """Replace the buffer after an edit.

        Returns:
            How many lines were added (negative if removed) since the last edit.
        """
        line_count = count_lines(buffer)
        delta = line_count - self.previous_line_count
        self.buffer = buffer
        self.previous_line_count = line_count
        self.dirty = True
        logger.debug("Buffer now %d lines (%+d), %d authored", line_count, delta, self.authored_line_count())
        return delta

    def insert(self, text: str) -> str:
        """Insert the person's text at the cursor and update the buffer.

        A non-empty body is kept on its own line above the inserted text.

        Returns:
            The new buffer.
        """
        if not text:
            return self.buffer

        offset = self.annotated.cursor_offset
        if offset:
            text = "\n" + text

        buffer = self.buffer[:offset] + text + self.buffer[offset:]
        self.update(buffer)
        return buffer

    def message(self) -> str:
        """The part of the buffer the person can edit."""
        comment = self.parsed.comment
        if comment and self.buffer.endswith(comment):
            return self.buffer[: len(self.buffer) - len(comment)]
        return self.buffer[: self.annotated.cursor_offset]

    def save(self) -> None:
        """Write the buffer back to the commit message file.

        Raises:
            MessageFileError: If the file cannot be written.
        """
        write_message_file(self.path, self.buffer)
        self.dirty = False
