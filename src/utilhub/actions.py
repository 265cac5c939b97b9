"""Post-selection action menu."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.text import Text

from utilhub.constants import (
    ACTION_EXIT,
    ACTION_OPEN_FOLDER,
    ACTION_RELOAD,
    ACTION_RUN,
    FORMAT_EXIT_CODE,
    MESSAGE_BUILD_FAILED,
    MESSAGE_COULD_NOT_OPEN_FOLDER,
    MESSAGE_DONE,
    MESSAGE_EXIT_CODE,
    MESSAGE_FAILED_TO_START,
    MESSAGE_FINISHED_WITH_EXIT_CODE,
    MESSAGE_PRESS_KEY_TO_RETURN,
    STATUS_BUILDING,
    STATUS_RUNNING,
)
from utilhub.models import UtilityRecord
from utilhub.runner import FAILED_TO_START, DotnetHarness, open_folder
from utilhub.ui.keys import read_key
from utilhub.ui.picker import KeySource, pick
from utilhub.ui.render import render_choices

LOGGER = logging.getLogger(__name__)


class Action(Enum):
    RUN = ACTION_RUN
    RELOAD = ACTION_RELOAD
    OPEN_FOLDER = ACTION_OPEN_FOLDER
    EXIT = ACTION_EXIT


class Outcome(Enum):
    CONTINUE = "continue"
    EXIT = "exit"


def choose_action(console: Console, *, keys: KeySource = read_key) -> Optional[Action]:
    """Let the user pick an action. Escape returns ``None``."""
    actions = list(Action)
    labels = [action.value for action in actions]
    return pick(actions, lambda state: render_choices(labels, state), console, keys=keys, min_visible=1)


def run_utility(record: UtilityRecord, console: Console, harness: DotnetHarness) -> int:
    """Build then run ``record``, reporting progress. Returns the final exit code."""
    try:
        with console.status(STATUS_BUILDING, spinner="dots", spinner_style="bright_cyan"):
            build_exit = harness.build(record.file_path)
    except OSError as exc:
        LOGGER.error("Unable to start build for %s: %s", record.file_path, exc)
        console.print(Text(MESSAGE_FAILED_TO_START, style="red"))
        return FAILED_TO_START

    if build_exit != 0:
        console.print(
            Text.assemble((MESSAGE_BUILD_FAILED, "red"), f" {FORMAT_EXIT_CODE.format(build_exit)}.")
        )
        return build_exit

    console.print(Text.assemble((STATUS_RUNNING, "grey50"), " ", (record.file_name, "bold")))
    console.print()
    try:
        run_exit = harness.run(record.file_path)
    except OSError as exc:
        LOGGER.error("Unable to start %s: %s", record.file_path, exc)
        console.print(Text(MESSAGE_FAILED_TO_START, style="red"))
        return FAILED_TO_START

    if run_exit != 0:
        console.print()
        console.print(Text.assemble((MESSAGE_EXIT_CODE, "yellow"), " ", (str(run_exit), "bold")))
    return run_exit


def report_exit(exit_code: int, console: Console) -> None:
    console.print()
    if exit_code == 0:
        console.print(Text(MESSAGE_DONE, style="green"))
    else:
        console.print(
            Text.assemble((MESSAGE_FINISHED_WITH_EXIT_CODE, "yellow"), " ", (str(exit_code), "bold"))
        )


def open_utilities_folder(folder: Path, console: Console) -> bool:
    try:
        open_folder(folder)
    except OSError as exc:
        LOGGER.warning("Unable to open %s: %s", folder, exc)
        console.print(Text.assemble((MESSAGE_COULD_NOT_OPEN_FOLDER, "yellow"), " ", str(folder)))
        return False
    return True


def wait_for_key(console: Console, message: str, keys: KeySource) -> None:
    console.print(Text(message, style="grey50"))
    keys()


def dispatch(
    action: Optional[Action],
    record: UtilityRecord,
    console: Console,
    *,
    folder: Path,
    harness: DotnetHarness,
    keys: KeySource = read_key,
) -> Outcome:
    """Carry out ``action`` for the selected ``record``.

    Failures of external processes are reported and never end the session.
    """
    if action is Action.EXIT:
        return Outcome.EXIT

    if action is Action.RUN:
        report_exit(run_utility(record, console, harness), console)
        wait_for_key(console, MESSAGE_PRESS_KEY_TO_RETURN, keys)
    elif action is Action.OPEN_FOLDER:
        open_utilities_folder(folder, console)
        wait_for_key(console, MESSAGE_PRESS_KEY_TO_RETURN, keys)

    # Reload and Escape fall through: the caller rebuilds the catalog.
    return Outcome.CONTINUE
