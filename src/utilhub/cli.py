"""Command line interface for UtilHub."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from utilhub.actions import Outcome, choose_action, dispatch
from utilhub.catalog.loader import CatalogLoader
from utilhub.config import AppConfig
from utilhub.constants import (
    KEYBOARD_HINTS,
    MESSAGE_FOLDER_NOT_FOUND,
    MESSAGE_NO_UTILITIES,
    MESSAGE_PRESS_KEY_TO_EXIT,
    MESSAGE_SKIPPED_FILES,
    STATUS_LOADING,
)
from utilhub.runner import DotnetHarness
from utilhub.ui.keys import read_key
from utilhub.ui.picker import KeySource, pick
from utilhub.ui.render import build_preview_panel, render_header, render_two_pane


console = Console()
app = typer.Typer(help="UtilHub - launcher for file-based .NET utilities", add_completion=False)

LOGGER = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def run_session(
    config: AppConfig,
    utilities_dir: Path,
    *,
    keys: Optional[KeySource] = None,
    harness: Optional[DotnetHarness] = None,
) -> int:
    """Load, browse and act until the user exits. Returns the process exit code."""
    keys = keys or read_key
    harness = harness or DotnetHarness(config.toolchain)
    loader = CatalogLoader(max_lines=config.header_lines, pattern=config.file_pattern)
    folders = [utilities_dir, config.extra_dir]

    while True:
        console.clear()
        render_header(console)

        with console.status(STATUS_LOADING, spinner="dots", spinner_style="bright_cyan"):
            catalog = loader.load(folders)

        if loader.stats.failed:
            skipped = ", ".join(path.name for path in loader.stats.failed_files)
            console.print(Text.assemble((MESSAGE_SKIPPED_FILES, "yellow"), " ", skipped))

        if not catalog:
            console.print(Text(MESSAGE_NO_UTILITIES, style="yellow"))
            console.print(Text(MESSAGE_PRESS_KEY_TO_EXIT, style="grey50"))
            keys()
            return 0

        console.print(Text(KEYBOARD_HINTS, style="grey50"))
        console.print()
        selected = pick(
            catalog,
            lambda state: render_two_pane(catalog, state, no_icons=config.no_icons),
            console,
            keys=keys,
            min_visible=config.min_visible,
            max_visible=config.max_visible,
        )
        if selected is None:
            return 0

        console.clear()
        render_header(console)
        console.print(build_preview_panel(selected, no_icons=config.no_icons))
        console.print()

        action = choose_action(console, keys=keys)
        outcome = dispatch(action, selected, console, folder=utilities_dir, harness=harness, keys=keys)
        if outcome is Outcome.EXIT:
            return 0


@app.command()
def main(
    folder: Optional[Path] = typer.Argument(
        None, help="Additional folder with utilities, loaded next to ./Utilities."
    ),
) -> None:
    """Browse the utilities in ./Utilities and build/run the selected one."""
    config = AppConfig.from_env(extra_dir=folder)
    _setup_logging(config.verbose)

    utilities_dir = config.resolve_utilities_dir(Path.cwd())
    if not utilities_dir.is_dir():
        console.print(Text.assemble((MESSAGE_FOLDER_NOT_FOUND, "red"), " ", str(utilities_dir)))
        raise typer.Exit(code=1)

    if folder is not None and not folder.is_dir():
        LOGGER.info("Ignoring missing folder %s", folder)

    raise typer.Exit(code=run_session(config, utilities_dir))
