"""Command line interface for postindex."""

from postindex.cli.main import app

__all__ = ["app"]
