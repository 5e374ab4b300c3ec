"""Rendering contract shared by every generated-file variant."""

from __future__ import annotations

import importlib.resources as ilr
from typing import TYPE_CHECKING, BinaryIO, Protocol

if TYPE_CHECKING:
    from svcgen.config import ServiceData

_SCAFFOLD_PKG = "svcgen.scaffold"


class RenderError(Exception):
    """A template could not be rendered against the data context."""

    def __init__(self, path: str, token: str) -> None:
        super().__init__(f"{path}: unresolved placeholder {token}")
        self.path = path
        self.token = token


class Renderable(Protocol):
    """Produces the content of one output file from a data context."""

    def render(self, path: str, data: ServiceData) -> BinaryIO: ...


def read_template(filename: str) -> str:
    """Read a packaged ``*.gotemplate`` asset."""
    return ilr.files(_SCAFFOLD_PKG).joinpath(filename).read_text(encoding="utf-8")
