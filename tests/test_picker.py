"""Tests for the interactive picker loop."""

from __future__ import annotations

import io
from typing import Iterable, Optional
from unittest.mock import patch

from rich.console import Console
from rich.text import Text

from utilhub.ui.navigation import Key, NavigationState, Status
from utilhub.ui.picker import pick, run_navigation


def scripted(keys: Iterable[Optional[Key]]):
    remaining = iter(keys)
    return lambda: next(remaining, None)


def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=100)


class TestRunNavigation:
    """Test run_navigation loop."""

    def test_repaints_after_each_move(self) -> None:
        repaints: list[NavigationState] = []
        keys = scripted([Key.DOWN, Key.OTHER, Key.DOWN, Key.ENTER])

        state = run_navigation(NavigationState.start(5), keys, repaints.append)

        assert state.status is Status.SELECTED
        assert state.index == 2
        assert [s.index for s in repaints] == [1, 1, 2]

    def test_no_repaint_on_terminal_transition(self) -> None:
        repaints: list[NavigationState] = []

        run_navigation(NavigationState.start(5), scripted([Key.ESCAPE]), repaints.append)

        assert repaints == []

    def test_exhausted_input_cancels(self) -> None:
        state = run_navigation(NavigationState.start(5), scripted([Key.DOWN]), lambda _: None)

        assert state.status is Status.CANCELLED
        assert state.index == 1


class TestPick:
    """Test pick function."""

    def test_returns_selected_item(self) -> None:
        items = ["a", "b", "c"]

        chosen = pick(
            items,
            lambda state: Text(items[state.index]),
            quiet_console(),
            keys=scripted([Key.DOWN, Key.DOWN, Key.ENTER]),
        )

        assert chosen == "c"

    def test_escape_returns_none(self) -> None:
        items = ["a", "b"]

        chosen = pick(items, lambda state: Text("x"), quiet_console(), keys=scripted([Key.ESCAPE]))

        assert chosen is None

    def test_page_down_clamps_to_last(self) -> None:
        items = list("abcde")

        chosen = pick(
            items,
            lambda state: Text(items[state.index]),
            quiet_console(),
            keys=scripted([Key.PAGE_DOWN, Key.ENTER]),
        )

        assert chosen == "e"

    def test_renders_final_state(self) -> None:
        console = quiet_console()
        items = ["first", "second"]

        pick(items, lambda state: Text(f"current={items[state.index]}"), console, keys=scripted([Key.DOWN, Key.ENTER]))

        assert "current=second" in console.file.getvalue()

    def test_terminal_mode_held_for_whole_session(self) -> None:
        """cbreak mode is entered once around the live view, not per key."""
        items = ["a", "b", "c"]

        with patch("utilhub.ui.picker.KeyboardInput") as mock_input:
            pick(items, lambda state: Text("x"), quiet_console(), keys=scripted([Key.DOWN, Key.DOWN, Key.ENTER]))

        mock_input.assert_called_once_with()
        mock_input.return_value.__enter__.assert_called_once()
        mock_input.return_value.__exit__.assert_called_once()
