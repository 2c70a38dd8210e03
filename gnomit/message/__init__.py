"""Commit message parsing for gnomit.

This package provides:
- exceptions: CommitMessageError, DecodeError, MessageFileError
- models: ParsedCommitMessage, AnnotatedMessage
- parser: parse, recount, extract_branch_name, extract_project_name
- markup: annotate, build_markup, window_title
- files: read_message_file, write_message_file
"""

# Exceptions
from gnomit.message.exceptions import (
    CommitMessageError,
    DecodeError,
    MessageFileError,
)

# Models
from gnomit.message.models import (
    AnnotatedMessage,
    ParsedCommitMessage,
)

# Parser
from gnomit.message.parser import (
    decode_message,
    extract_branch_name,
    extract_project_name,
    parse,
    recount,
    split_message,
)

# Annotation
from gnomit.message.markup import (
    annotate,
    build_markup,
    window_title,
)

# File access
from gnomit.message.files import (
    read_message_file,
    write_message_file,
)


__all__ = [
    # Exceptions
    "CommitMessageError",
    "DecodeError",
    "MessageFileError",
    # Models
    "AnnotatedMessage",
    "ParsedCommitMessage",
    # Parser
    "decode_message",
    "extract_branch_name",
    "extract_project_name",
    "parse",
    "recount",
    "split_message",
    # Annotation
    "annotate",
    "build_markup",
    "window_title",
    # File access
    "read_message_file",
    "write_message_file",
]
