"""Orchestrates rendering of a service's files to disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from svcgen._logging import get_logger
from svcgen._types import GeneratedFile, HookPolicy
from svcgen.config import GeneratorConfig, ServiceData
from svcgen.render import FileRenderer, HookRenderer, TemplateRenderer, read_template

_log = get_logger(__name__)

_TEMPLATE_FILES: dict[GeneratedFile, str] = {
    GeneratedFile.HANDLERS: "handlers.gotemplate",
    GeneratedFile.MIDDLEWARES: "middlewares.gotemplate",
}


@dataclass(frozen=True)
class GeneratedOutput:
    """One file written by :func:`generate_service`."""

    kind: GeneratedFile
    path: Path
    preserved: bool


def resolve_path(pattern: str, service_name: str) -> str:
    """Substitute the service name for ``NAME`` in an output path pattern."""
    return pattern.replace("NAME", service_name)


def open_previous(path: Path) -> BinaryIO | None:
    """Open an existing regular file for binary reading, or return ``None`` if there is none."""
    if not path.is_file():
        return None
    return path.open("rb")


def renderer_for(kind: GeneratedFile, prev: BinaryIO | None = None) -> FileRenderer:
    """Build the renderer for ``kind``. Only the hook file uses ``prev``."""
    if kind is GeneratedFile.HOOKS:
        return HookRenderer(prev)
    return TemplateRenderer(read_template(_TEMPLATE_FILES[kind]))


def hook_exists(data: ServiceData, config: GeneratorConfig) -> bool:
    """Whether the hook file for ``data`` is already on disk."""
    rel = resolve_path(GeneratedFile.HOOKS.path_pattern, data.name)
    return (config.out_dir / rel).is_file()


def generate_service(data: ServiceData, config: GeneratorConfig) -> list[GeneratedOutput]:
    """Render every generated file of ``data`` under ``config.out_dir``.

    The hook file is passed through unchanged when it exists and the policy is
    :attr:`HookPolicy.KEEP`. All other files are regenerated.

    Raises:
        RenderError: A template references a placeholder the data does not provide.
    """
    outputs: list[GeneratedOutput] = []

    for kind in GeneratedFile:
        rel = resolve_path(kind.path_pattern, data.name)
        path = config.out_dir / rel

        prev: BinaryIO | None = None
        if kind is GeneratedFile.HOOKS and config.hook_policy is HookPolicy.KEEP:
            prev = open_previous(path)

        try:
            renderer = renderer_for(kind, prev)
            _log.debug("%s: %s", rel, type(renderer).__name__)
            content = renderer.render(rel, data).read()
        finally:
            if prev is not None:
                prev.close()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

        preserved = prev is not None
        if preserved:
            _log.debug("%s: kept existing content", rel)
        _log.info("wrote %s", rel)
        outputs.append(GeneratedOutput(kind=kind, path=path, preserved=preserved))

    return outputs
