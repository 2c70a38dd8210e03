"""Commit message file parser.

Splits the raw content of a Git commit message file into the auto-generated
body and the instructional comment block, and recovers the project and branch
names used for the editor title.
"""

import logging
import os
from pathlib import PurePath
from typing import Optional, Union

from gnomit.config import BRANCH_LINE_INDEX
from gnomit.message.exceptions import DecodeError
from gnomit.message.models import ParsedCommitMessage

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"


def decode_message(raw_content: bytes) -> str:
    """Decode commit message bytes as UTF-8.

    Raises:
        DecodeError: If the bytes are not valid UTF-8.
    """
    try:
        return raw_content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Commit message is not valid UTF-8 text: {e}") from e


def split_message(text: str) -> tuple[str, str]:
    """Split decoded text into (body, comment).

    A message whose second character is ``#`` starts straight away with
    the comment block. Otherwise the first line is auto-generated content
    (e.g. a merge message) and becomes the body.
    """
    if len(text) > 1 and text[1] == "#":
        return "", f"\n{text}"

    lines = text.split("\n")
    body = lines[0]
    comment = "\n" + "\n".join(lines[1:])
    return body, comment


def extract_project_name(file_path: Union[str, PurePath]) -> Optional[str]:
    """Get the name of the directory holding the first ``.git`` segment.

    Args:
        file_path: Absolute path of the commit message file.

    Returns:
        The project directory name, or None if the path has no ``.git``.
    """
    components = str(file_path).replace(os.sep, "/").split("/")
    try:
        index = components.index(GIT_DIR_NAME)
    except ValueError:
        return None

    if index == 0:
        return None
    return components[index - 1] or None


def extract_branch_name(comment: str) -> Optional[str]:
    """Get the branch name from its fixed position in the comment block.

    The branch is the last word of the line at ``BRANCH_LINE_INDEX``. Relying
    on position rather than wording keeps this working for every language
    Git may be configured to use.

    Returns:
        The branch name, or None when the comment block is too short or the
        line ends in a space and so has no last word.
    """
    comment_lines = comment.split("\n")
    if len(comment_lines) <= BRANCH_LINE_INDEX:
        return None

    words = comment_lines[BRANCH_LINE_INDEX].split(" ")
    return words[-1] or None


def parse(raw_content: bytes, file_path: Union[str, PurePath]) -> ParsedCommitMessage:
    """Parse a commit message file.

    Args:
        raw_content: Full byte content of the commit message file.
        file_path: Absolute path of the file.

    Returns:
        The parsed commit message.

    Raises:
        DecodeError: If the content is not valid text.
    """
    text = decode_message(raw_content)
    body, comment = split_message(text)

    parsed = ParsedCommitMessage(
        body=body,
        comment=comment,
        comment_line_count=len(comment.split("\n")),
        branch_name=extract_branch_name(comment),
        project_name=extract_project_name(file_path),
    )

    logger.debug(
        "Parsed %s: body=%d chars, comment=%d lines, project=%s, branch=%s",
        file_path,
        len(parsed.body),
        parsed.comment_line_count,
        parsed.project_name,
        parsed.branch_name,
    )
    return parsed


def recount(edited_line_count: int, comment_line_count: int) -> int:
    """Number of buffer lines outside the comment block.

    The result is not clamped and may be negative.
    """
    return edited_line_count - comment_line_count
