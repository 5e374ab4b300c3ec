"""Typer CLI application for svcgen."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import svcgen
from svcgen._logging import setup_logging
from svcgen._types import GeneratedFile, HookPolicy
from svcgen.cli._prompts import prompt_hook_policy
from svcgen.config import GeneratorConfig, ServiceData
from svcgen.generator import generate_service, hook_exists, resolve_path
from svcgen.render import RenderError

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """svcgen — scaffolding generator for Go services."""


@app.command()
def generate(
    name: Annotated[str, Argument(help="Service name, lower case")],
    package: Annotated[
        str | None,
        Option(
            "--package",
            "-p",
            help="Package name shown in generated doc comments. Defaults to <name>svc.",
            show_default=False,
        ),
    ] = None,
    methods: Annotated[
        list[str] | None,
        Option(
            "--method", "-m", help="RPC method to stub. Repeat for several.", show_default=False
        ),
    ] = None,
    out_dir: Annotated[Path, Option("--out", "-o", help="Output directory")] = Path("."),
    keep_hooks: Annotated[
        bool | None,
        Option(
            "--keep-hooks/--overwrite-hooks",
            help="Keep or overwrite an existing hooks file. Asks when omitted.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log each rendering step")] = False,
) -> None:
    """Generate (or regenerate) the files of a service."""
    setup_logging(verbose)

    try:
        data = ServiceData(name=name, package=package or "", methods=tuple(methods or ()))
        config = GeneratorConfig(out_dir=out_dir)
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None

    _console.print()
    _console.print(f"[bold cyan]●[/]  svcgen v{svcgen.__version__}")
    _console.print("[dim]│[/]")

    if keep_hooks is not None:
        config.hook_policy = HookPolicy.KEEP if keep_hooks else HookPolicy.OVERWRITE
    elif hook_exists(data, config):
        config.hook_policy = prompt_hook_policy(
            resolve_path(GeneratedFile.HOOKS.path_pattern, data.name)
        )

    _console.print(f"[bold green]◇[/]  Generating {data.name} into {config.out_dir}/...")

    try:
        outputs = generate_service(data, config)
    except (RenderError, OSError) as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None

    for out in outputs:
        rel = resolve_path(out.kind.path_pattern, data.name)
        note = " [dim]— kept[/]" if out.preserved else ""
        _console.print(f"[dim]│[/]  {rel}{note}")

    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done!")
    _console.print()


@app.command()
def files() -> None:
    """List the files generated for every service."""
    _console.print()
    _console.print("[bold cyan]◆[/]  Generated files")
    _console.print("[dim]│[/]")
    for kind in GeneratedFile:
        _console.print(f"[dim]│[/]  [bold cyan]{kind.value:<12}[/] {kind.path_pattern}")
        _console.print(f"[dim]│[/]  {' ' * 12} [dim]{kind.label}[/]")
        _console.print("[dim]│[/]")
    _console.print()
