"""Command-line interface for rdftypes."""

from rdftypes.cli.main import app

__all__ = ["app"]
