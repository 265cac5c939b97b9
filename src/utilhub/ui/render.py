"""Rich renderables for the launcher screens."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from utilhub.constants import (
    APP_NAME,
    APP_SUBTITLE,
    FORMAT_ITEM_COUNT,
    HEADER_ACTION,
    HEADER_UTILITIES,
    LABEL_DESCRIPTION,
    LABEL_FILE,
    LABEL_ID,
    LABEL_TAGS,
    PLACEHOLDER,
)
from utilhub.models import UtilityRecord
from utilhub.ui.icons import pick_icon
from utilhub.ui.navigation import NavigationState


def render_header(console: Console) -> None:
    console.print(Rule(Text(APP_NAME, style="bold blue"), style="blue"))
    console.print(Text(APP_NAME, style="bold bright_cyan"), justify="center")
    console.print(Text(APP_SUBTITLE, style="grey50"))
    console.print()


def _row(text: str, selected: bool, icon: str = "") -> Text:
    pointer = Text("> ", style="bold bright_cyan") if selected else Text("  ")
    label = Text(text, style="bold white" if selected else "grey50")
    prefix = f"{icon} " if icon else ""
    return Text.assemble(pointer, prefix, label)


def build_list_panel(
    records: Sequence[UtilityRecord], state: NavigationState, *, no_icons: bool = False
) -> Panel:
    lines: list[RenderableType] = [
        _row(records[i].title, i == state.index, pick_icon(records[i], no_icons))
        for i in state.visible_range()
    ]
    lines.append(Rule(style="grey50"))
    lines.append(Text(FORMAT_ITEM_COUNT.format(state.index + 1, state.size), style="grey50"))

    return Panel(
        Group(*lines),
        title=Text(HEADER_UTILITIES, style="bold cyan"),
        title_align="left",
        box=box.ROUNDED,
        padding=(1, 1),
        expand=True,
    )


def build_preview_panel(record: UtilityRecord, *, no_icons: bool = False) -> Panel:
    description = record.description if record.description.strip() else PLACEHOLDER
    tags = ", ".join(record.tags) if record.tags else PLACEHOLDER

    def field(label: str, value: str) -> Text:
        return Text.assemble((label, "bold"), " ", value)

    content = Group(
        field(LABEL_ID, record.id),
        field(LABEL_FILE, record.file_name),
        field(LABEL_DESCRIPTION, description),
        field(LABEL_TAGS, tags),
    )
    title = Text(f"{pick_icon(record, no_icons)} {record.title}", style="bold bright_cyan")
    return Panel(content, title=title, title_align="left", box=box.ROUNDED, padding=(1, 1), expand=True)


def render_two_pane(
    records: Sequence[UtilityRecord], state: NavigationState, *, no_icons: bool = False
) -> Table:
    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(ratio=1)
    grid.add_row(
        build_list_panel(records, state, no_icons=no_icons),
        build_preview_panel(records[state.index], no_icons=no_icons),
    )
    return grid


def render_choices(labels: Sequence[str], state: NavigationState) -> Group:
    """Plain selection list used by the action menu."""
    return Group(
        Text(HEADER_ACTION, style="bold"),
        *(_row(labels[i], i == state.index) for i in state.visible_range()),
    )
