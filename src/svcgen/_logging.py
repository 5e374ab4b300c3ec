"""Namespaced loggers for svcgen, rendered through Rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_BASE = "svcgen"


def setup_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Configure the base ``svcgen`` logger once and return it."""
    base = logging.getLogger(_BASE)
    level = logging.DEBUG if verbose else logging.WARNING
    base.setLevel(level)
    if base.handlers:
        return base

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    base.addHandler(handler)
    base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``svcgen`` namespace."""
    if not name or name == _BASE:
        return logging.getLogger(_BASE)
    if name.startswith(f"{_BASE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_BASE}.{name}")
