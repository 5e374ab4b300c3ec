"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from typer import Exit

from svcgen._types import HookPolicy
from svcgen.cli._prompts import prompt_hook_policy

HOOK = "foo/handlers/server/hooks.go"


class TestPromptHookPolicy:
    @patch("svcgen.cli._prompts.TerminalMenu")
    def test_returns_keep(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        result = prompt_hook_policy(HOOK)
        assert result is HookPolicy.KEEP

    @patch("svcgen.cli._prompts.TerminalMenu")
    def test_returns_overwrite(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        result = prompt_hook_policy(HOOK)
        assert result is HookPolicy.OVERWRITE

    @patch("svcgen.cli._prompts.TerminalMenu")
    def test_shows_policy_labels(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        prompt_hook_policy(HOOK)
        labels = mock_menu_cls.call_args.args[0]
        assert labels == [HookPolicy.KEEP.label, HookPolicy.OVERWRITE.label]

    @patch("svcgen.cli._prompts.TerminalMenu")
    def test_cursor_starts_on_keep(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        prompt_hook_policy(HOOK)
        labels = mock_menu_cls.call_args.args[0]
        cursor = mock_menu_cls.call_args.kwargs["cursor_index"]
        assert labels[cursor] == HookPolicy.KEEP.label

    @patch("svcgen.cli._prompts.TerminalMenu")
    def test_escape_aborts(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(Exit) as info:
            prompt_hook_policy(HOOK)
        assert info.value.exit_code == 1
