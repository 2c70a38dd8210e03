"""Commit message exception classes.

Contains all exception classes for commit message handling:
- CommitMessageError: Base exception for commit message errors
- DecodeError: Raised when the file content is not valid text
- MessageFileError: Raised when the file cannot be read or written
"""


class CommitMessageError(Exception):
    """Base exception for commit message errors."""

    pass


class DecodeError(CommitMessageError, ValueError):
    """Raised when the commit message bytes cannot be decoded as text."""

    pass


class MessageFileError(CommitMessageError):
    """Raised when the commit message file cannot be read or written."""

    pass
