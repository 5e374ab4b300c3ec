"""Renderer that expands a template against the service data."""

from __future__ import annotations

import io
import re
from typing import TYPE_CHECKING, BinaryIO

from svcgen.render._base import RenderError

if TYPE_CHECKING:
    from svcgen.config import ServiceData

_PLACEHOLDER_RE = re.compile(r"__[A-Z][A-Z_]*[A-Z]__")


class TemplateRenderer:
    """Regenerates its file from ``template`` on every run."""

    def __init__(self, template: str) -> None:
        self._template = template

    def render(self, path: str, data: ServiceData) -> BinaryIO:
        values = data.placeholders()

        def substitute(match: re.Match[str]) -> str:
            token = match.group(0)
            if token not in values:
                raise RenderError(path, token)
            return values[token]

        content = _PLACEHOLDER_RE.sub(substitute, self._template)
        return io.BytesIO(content.encode("utf-8"))
