"""Allow running gnomit with ``python -m gnomit``."""

from gnomit.cli import app

if __name__ == "__main__":
    app()
