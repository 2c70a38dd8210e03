"""Global configuration management for gnomit.

Handles user-level configuration stored in ~/.gnomit/config.yaml:
- comment_color: Foreground colour of the instructional comment block
- editor_command: Command written to Git's core.editor by --install
- show_title: Whether to show the "project (branch)" title
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gnomit.config import DEFAULT_COMMENT_COLOR


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".gnomit"


def get_global_config_dir() -> Path:
    """Get the global gnomit configuration directory.

    Returns:
        Path to ~/.gnomit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.gnomit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.gnomit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.gnomit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_comment_color() -> str:
    """Get the colour used for the comment block.

    Returns:
        Hex colour string, defaulting to DEFAULT_COMMENT_COLOR.
    """
    config = load_global_config()
    return str(config.get("comment_color") or DEFAULT_COMMENT_COLOR)


def get_editor_command() -> Optional[str]:
    """Get the editor command recorded by the last --install.

    Returns:
        Command string, or None if not set.
    """
    config = load_global_config()
    return config.get("editor_command")


def set_editor_command(command: str) -> None:
    """Record the editor command in global config.

    Args:
        command: Command written to core.editor.
    """
    config = load_global_config()
    config["editor_command"] = command
    save_global_config(config)


def get_show_title() -> bool:
    """Whether the session title should be shown."""
    config = load_global_config()
    return bool(config.get("show_title", True))
