"""Selection state for the interactive picker.

The picker keeps a selected index and a scroll offset over a list of ``size``
items, of which ``window`` rows are visible at a time. ``step`` is a pure
transition from one state to the next for a single key.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Key(Enum):
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


class Status(Enum):
    BROWSING = "browsing"
    SELECTED = "selected"
    CANCELLED = "cancelled"


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True, slots=True)
class NavigationState:
    size: int
    window: int
    index: int = 0
    offset: int = 0
    status: Status = Status.BROWSING

    @classmethod
    def start(cls, size: int, *, min_visible: int = 6, max_visible: int = 12) -> "NavigationState":
        if size < 1:
            raise ValueError("Cannot navigate an empty list")
        return cls(size=size, window=clamp(size, min_visible, max_visible))

    @property
    def done(self) -> bool:
        return self.status is not Status.BROWSING

    def visible_range(self) -> range:
        return range(self.offset, min(self.size, self.offset + self.window))


def _scroll_to(state: NavigationState, index: int) -> NavigationState:
    index = clamp(index, 0, state.size - 1)
    offset = state.offset
    if index < offset:
        offset = index
    if index >= offset + state.window:
        offset = index - state.window + 1
    return replace(state, index=index, offset=offset)


def step(state: NavigationState, key: Key) -> NavigationState:
    """Apply ``key`` to ``state``. Terminal states are returned unchanged."""
    if state.done:
        return state

    if key is Key.ENTER:
        return replace(state, status=Status.SELECTED)
    if key is Key.ESCAPE:
        return replace(state, status=Status.CANCELLED)

    if key is Key.UP:
        return _scroll_to(state, state.index - 1)
    if key is Key.DOWN:
        return _scroll_to(state, state.index + 1)
    if key is Key.PAGE_UP:
        return _scroll_to(state, state.index - state.window)
    if key is Key.PAGE_DOWN:
        return _scroll_to(state, state.index + state.window)
    return state
