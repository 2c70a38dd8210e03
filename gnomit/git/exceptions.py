"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- GitNotInstalledError: Raised when the git executable cannot be found
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class GitNotInstalledError(GitError):
    """Raised when git is not installed or not in PATH."""

    pass
