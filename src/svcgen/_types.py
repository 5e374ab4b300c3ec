"""Enums for generated files and hook handling."""

from enum import Enum


class GeneratedFile(str, Enum):
    """Files generated for every service."""

    HANDLERS = "handlers"
    MIDDLEWARES = "middlewares"
    HOOKS = "hooks"

    @property
    def path_pattern(self) -> str:
        """Output path relative to the output directory; ``NAME`` is the service name."""
        patterns: dict[GeneratedFile, str] = {
            GeneratedFile.HANDLERS: "NAME/handlers/server/server_handler.go",
            GeneratedFile.MIDDLEWARES: "NAME/handlers/server/middlewares.go",
            GeneratedFile.HOOKS: "NAME/handlers/server/hooks.go",
        }
        return patterns[self]

    @property
    def label(self) -> str:
        labels: dict[GeneratedFile, str] = {
            GeneratedFile.HANDLERS: "RPC handler stubs",
            GeneratedFile.MIDDLEWARES: "endpoint and service middleware wiring",
            GeneratedFile.HOOKS: "user hooks, kept across regenerations",
        }
        return labels[self]


class HookPolicy(str, Enum):
    """What to do with a hook file that already exists."""

    KEEP = "keep"
    OVERWRITE = "overwrite"

    @property
    def label(self) -> str:
        labels: dict[HookPolicy, str] = {
            HookPolicy.KEEP: "Keep my hooks file",
            HookPolicy.OVERWRITE: "Overwrite it with the default template",
        }
        return labels[self]
