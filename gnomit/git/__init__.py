"""Git integration for gnomit.

This package provides:
- exceptions: GitError, GitNotInstalledError
- runner: _run_git_command
- install: default_editor_command, install_as_git_editor
"""

from gnomit.git.exceptions import (
    GitError,
    GitNotInstalledError,
)

from gnomit.git.runner import _run_git_command

from gnomit.git.install import (
    default_editor_command,
    install_as_git_editor,
)


__all__ = [
    "GitError",
    "GitNotInstalledError",
    "_run_git_command",
    "default_editor_command",
    "install_as_git_editor",
]
