"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
"""

import logging
import subprocess

from gnomit.git.exceptions import GitError, GitNotInstalledError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
        GitNotInstalledError: If git cannot be found.
    """
    logger.debug("Running git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitNotInstalledError("Git is not installed or not in PATH.")
