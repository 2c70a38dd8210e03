"""Register gnomit as the default Git editor.

Contains:
- default_editor_command: Command Git should run to open gnomit
- install_as_git_editor: Set core.editor in the global Git configuration
"""

import logging
import shlex
import shutil
import sys
from pathlib import Path
from typing import Optional

from gnomit import global_config
from gnomit.git.runner import _run_git_command

logger = logging.getLogger(__name__)


def _configured_command() -> Optional[str]:
    """The recorded editor command, if its executable still resolves."""
    try:
        configured = global_config.get_editor_command()
    except global_config.GlobalConfigError as e:
        logger.warning("Ignoring unreadable configuration: %s", e)
        return None

    if not configured:
        return None

    try:
        executable = shlex.split(configured)[0]
    except (ValueError, IndexError):
        executable = None

    # noinspection PyArgumentList
    if executable and shutil.which(executable):
        return configured

    logger.warning("Configured editor command %r no longer resolves, ignoring it", configured)
    return None


def default_editor_command() -> str:
    """Work out the command that launches gnomit.

    Preference order:
    1. editor_command from ~/.gnomit/config.yaml, if it still resolves
    2. gnomit on PATH
    3. the script currently running

    Returns:
        A command line, with discovered paths quoted for the shell Git
        runs the editor through.
    """
    configured = _configured_command()
    if configured:
        return configured

    # noinspection PyArgumentList
    on_path = shutil.which("gnomit")
    if on_path:
        return shlex.quote(on_path)

    return shlex.quote(str(Path(sys.argv[0]).resolve()))


def install_as_git_editor(command: Optional[str] = None) -> str:
    """Set gnomit as core.editor in the global Git configuration.

    Recording the command in ~/.gnomit/config.yaml is best effort; a failure
    there is logged and does not undo the install.

    Args:
        command: Editor command to install. Defaults to default_editor_command().

    Returns:
        The command that was installed.

    Raises:
        GitError: If git config fails.
        GitNotInstalledError: If git is not installed.
    """
    editor_command = command or default_editor_command()
    _run_git_command(["config", "--global", "core.editor", editor_command])
    logger.debug("Installed %s as core.editor", editor_command)

    try:
        global_config.set_editor_command(editor_command)
    except global_config.GlobalConfigError as e:
        logger.warning("Installed %s but could not record it: %s", editor_command, e)
    return editor_command
