"""Interactive key-driven selection over a list."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional, Sequence, TypeVar

from rich.console import Console, RenderableType
from rich.live import Live

from utilhub.ui.keys import KeyboardInput, read_key
from utilhub.ui.navigation import Key, NavigationState, Status, step

T = TypeVar("T")

KeySource = Callable[[], Optional[Key]]


def run_navigation(
    state: NavigationState,
    keys: KeySource,
    on_change: Callable[[NavigationState], None],
) -> NavigationState:
    """Consume keys until the state is terminal.

    ``on_change`` is called after every non-terminal transition. Exhausted input
    cancels the session.
    """
    while not state.done:
        key = keys()
        if key is None:
            return replace(state, status=Status.CANCELLED)
        state = step(state, key)
        if not state.done:
            on_change(state)
    return state


def pick(
    items: Sequence[T],
    render: Callable[[NavigationState], RenderableType],
    console: Console,
    *,
    keys: KeySource = read_key,
    min_visible: int = 6,
    max_visible: int = 12,
) -> Optional[T]:
    """Show ``items`` in a live view and return the chosen one, or ``None`` on Escape."""
    state = NavigationState.start(len(items), min_visible=min_visible, max_visible=max_visible)

    with KeyboardInput(), Live(
        render(state),
        console=console,
        auto_refresh=False,
        vertical_overflow="crop",
    ) as live:
        state = run_navigation(state, keys, lambda new: live.update(render(new), refresh=True))

    if state.status is Status.SELECTED:
        return items[state.index]
    return None
