"""Annotated representation of a parsed commit message.

Builds what an editing surface needs: Pango markup with the comment block
greyed out, the initial cursor position, the protected range and the title.
"""

from typing import Optional
from xml.sax.saxutils import escape

from gnomit.config import APPLICATION_NAME, DEFAULT_COMMENT_COLOR, PROGRAM_NAME
from gnomit.message.models import AnnotatedMessage, ParsedCommitMessage

# Extra entities for values placed inside a double-quoted attribute
ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def window_title(project_name: Optional[str], branch_name: Optional[str]) -> str:
    """Build the title ``ProjectFolderName (branch)``.

    Args:
        project_name: Name of the project directory, if known.
        branch_name: Name of the current branch, if known.

    Returns:
        The title, falling back to the application name when neither is known.
    """
    if project_name and branch_name:
        return f"{project_name} ({branch_name})"
    if project_name:
        return project_name
    if branch_name:
        return f"{PROGRAM_NAME} ({branch_name})"
    return APPLICATION_NAME


def build_markup(body: str, comment: str, comment_color: str = DEFAULT_COMMENT_COLOR) -> str:
    """Wrap the comment block in a coloured span."""
    color = escape(comment_color, ATTRIBUTE_ENTITIES)
    return f'{escape(body)}<span foreground="{color}">{escape(comment)}</span>'


def annotate(
    parsed: ParsedCommitMessage,
    comment_color: str = DEFAULT_COMMENT_COLOR,
) -> AnnotatedMessage:
    """Prepare a parsed message for display and editing.

    The cursor sits at the end of the body, or at the very start when there
    is no body. Everything from the cursor onwards is protected.
    """
    text = parsed.text
    cursor_offset = len(parsed.body)

    return AnnotatedMessage(
        text=text,
        markup=build_markup(parsed.body, parsed.comment, comment_color),
        cursor_offset=cursor_offset,
        protected_start=cursor_offset,
        protected_end=len(text),
        title=window_title(parsed.project_name, parsed.branch_name),
    )
