"""Renderer for the per-service hook file."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, BinaryIO

from svcgen.render._base import read_template

if TYPE_CHECKING:
    from svcgen.config import ServiceData

HOOK_PATH = "NAME/handlers/server/hooks.go"

DEFAULT_HOOK_TEMPLATE: str = read_template("hooks.gotemplate")


class HookRenderer:
    """
    Keeps an existing hook file, or emits the default one.

    Args:
        prev: Readable stream over the previously generated file, or ``None``
            when there is no such file or it should not be kept. The caller
            owns the stream and closes it.
    """

    __slots__ = ("_prev",)

    def __init__(self, prev: BinaryIO | None = None) -> None:
        self._prev = prev

    @property
    def prev(self) -> BinaryIO | None:
        return self._prev

    def render(self, path: str, data: ServiceData | None) -> BinaryIO:
        """
        Return the existing hook content if there is any, otherwise a fresh copy
        of the default template. ``path`` and ``data`` are ignored.

        The previous stream is returned as is. It can be read once: a second
        call hands back the same, already consumed, stream.
        """
        if self._prev is None:
            return io.BytesIO(DEFAULT_HOOK_TEMPLATE.encode("utf-8"))
        return self._prev
