"""Clack-style hook policy prompt using Rich + simple-term-menu."""

from __future__ import annotations

import sys

from rich.console import Console
from simple_term_menu import TerminalMenu
from typer import Exit

from svcgen._types import HookPolicy

_console = Console()

_POLICIES: list[HookPolicy] = [HookPolicy.KEEP, HookPolicy.OVERWRITE]


def _erase(n: int) -> None:
    """Erase the last *n* printed lines."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def prompt_hook_policy(hook_path: str) -> HookPolicy:
    """Ask whether an existing hook file is kept or overwritten.

    The cursor starts on :attr:`HookPolicy.KEEP`. Escape aborts the run
    before anything is written.
    """
    question = f"{hook_path} already exists"
    _console.print(f"[bold cyan]◆[/]  {question}")
    _console.print("[dim]│[/]")

    menu = TerminalMenu(
        [p.label for p in _POLICIES],
        cursor_index=_POLICIES.index(HookPolicy.KEEP),
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    choice = menu.show()

    # Replace the open question with its answer
    _erase(2)

    if choice is None:
        _console.print(f"[bold red]■[/]  {question}")
        _console.print("[dim]│[/]  Cancelled, nothing was written.")
        raise Exit(code=1)

    policy = _POLICIES[int(choice)]
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {policy.label}")
    _console.print("[dim]│[/]")
    return policy
