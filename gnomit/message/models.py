"""Commit message data models.

Contains Pydantic models for a parsed commit message file:
- ParsedCommitMessage: The semantic regions of a commit message file
- AnnotatedMessage: The display form of a parsed message
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ParsedCommitMessage(BaseModel):
    """A commit message file split into body and comment block.

    Attributes:
        body: Auto-generated first line (e.g. a merge summary), or "".
        comment: The rest of the file, always starting with a newline.
        comment_line_count: Number of lines in ``comment``.
        branch_name: Current branch as reported in the comment block.
        project_name: Directory that contains the ``.git`` directory.
    """

    model_config = ConfigDict(frozen=True)

    body: str
    comment: str
    comment_line_count: int
    branch_name: Optional[str] = None
    project_name: Optional[str] = None

    @property
    def text(self) -> str:
        """The display buffer: body followed by the comment block."""
        return self.body + self.comment


class AnnotatedMessage(BaseModel):
    """A parsed message prepared for an editing surface.

    Attributes:
        text: Plain buffer text.
        markup: Pango markup with the comment block greyed out.
        cursor_offset: Character offset where editing starts.
        protected_start: Start of the non-editable range.
        protected_end: End of the non-editable range.
        title: Window or session title.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    markup: str
    cursor_offset: int
    protected_start: int
    protected_end: int
    title: str
