"""Gnomit: a Git commit message editor."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gnomit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
