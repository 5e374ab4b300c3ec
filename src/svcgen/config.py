"""Configuration dataclasses for service generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

from svcgen._types import HookPolicy

_NAME_RE = re.compile(r"[a-z][a-z0-9_]*")
_METHOD_RE = re.compile(r"[A-Z][A-Za-z0-9]*")


@dataclass(frozen=True, kw_only=True)
class ServiceData:
    """
    Data context handed to every renderer.

    Attributes:
        name: Service name, lower case. Substituted for ``NAME`` in output paths.
        package: Go package name of the generated service. Defaults to ``<name>svc``.
        methods: Exported RPC method names.
    """

    name: str
    package: str = ""
    methods: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not _NAME_RE.fullmatch(self.name):
            raise ValueError(
                f"name must be lower case letters, digits or '_', got {self.name!r}."
            )
        if not self.package:
            object.__setattr__(self, "package", f"{self.name}svc")
        elif not _NAME_RE.fullmatch(self.package):
            raise ValueError(f"package must be a valid Go package name, got {self.package!r}.")
        for method in self.methods:
            if not _METHOD_RE.fullmatch(method):
                raise ValueError(f"method names must be exported identifiers, got {method!r}.")
        if len(set(self.methods)) != len(self.methods):
            raise ValueError(f"method names must be unique, got {list(self.methods)}.")

    @property
    def service_type(self) -> str:
        """Go type name of the service, e.g. ``echo_v2`` -> ``EchoV2Service``."""
        return "".join(part.capitalize() for part in self.name.split("_")) + "Service"

    def placeholders(self) -> dict[str, str]:
        """Template placeholders and their values."""
        return {
            "__SERVICE_NAME__": self.name,
            "__PACKAGE__": self.package,
            "__SERVICE_TYPE__": self.service_type,
            "__METHODS__": "\n".join(_method_stub(self.service_type, m) for m in self.methods),
        }


def _method_stub(service_type: str, method: str) -> str:
    return f"""\
// {method} implements {service_type}.
func (s {service_type}) {method}(ctx context.Context, in interface{{}}) (interface{{}}, error) {{
	var resp interface{{}}
	return resp, nil
}}
"""


@dataclass(kw_only=True)
class GeneratorConfig:
    """
    Configuration for one generation run.

    Attributes:
        out_dir: Directory the service tree is generated under.
        hook_policy: Whether an existing hook file is kept or overwritten.
    """

    out_dir: Path
    hook_policy: HookPolicy = HookPolicy.KEEP

    def __post_init__(self) -> None:
        self.out_dir = Path(self.out_dir)
        if self.out_dir.exists() and not self.out_dir.is_dir():
            raise ValueError(f"out_dir must be a directory, got {str(self.out_dir)!r}.")
        if not isinstance(self.hook_policy, HookPolicy):
            raise ValueError(f"hook_policy must be a HookPolicy, got {self.hook_policy!r}.")
