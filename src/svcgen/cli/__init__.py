"""Command-line interface for svcgen."""

from svcgen.cli.app import app

__all__ = ["app"]
