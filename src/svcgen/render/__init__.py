"""Renderers for generated service files."""

from typing import TypeAlias

from svcgen.render._base import Renderable, RenderError, read_template
from svcgen.render.hook import DEFAULT_HOOK_TEMPLATE, HOOK_PATH, HookRenderer
from svcgen.render.template import TemplateRenderer

FileRenderer: TypeAlias = HookRenderer | TemplateRenderer
"""Closed set of renderer variants."""

__all__ = [
    "DEFAULT_HOOK_TEMPLATE",
    "HOOK_PATH",
    "FileRenderer",
    "HookRenderer",
    "RenderError",
    "Renderable",
    "TemplateRenderer",
    "read_template",
]
