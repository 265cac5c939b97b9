"""External process glue: the dotnet build/run harness and the folder opener."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

LOGGER = logging.getLogger(__name__)

FAILED_TO_START = 1


class DotnetHarness:
    """Builds and runs file-based utilities with the dotnet toolchain."""

    def __init__(self, toolchain: str = "dotnet") -> None:
        self.toolchain = toolchain

    def build_command(self, path: Path) -> list[str]:
        return [self.toolchain, "build", "--file", str(path), "-v:q"]

    def run_command(self, path: Path) -> list[str]:
        return [self.toolchain, "run", "--no-build", "--file", str(path)]

    def build(self, path: Path) -> int:
        """Compile ``path`` quietly and return the exit code.

        Raises ``OSError`` if the toolchain cannot be started.
        """
        command = self.build_command(path)
        LOGGER.debug("Building: %s", command)
        completed = subprocess.run(command, capture_output=True, text=True)
        if completed.returncode != 0:
            LOGGER.debug("Build output for %s:\n%s%s", path, completed.stdout, completed.stderr)
        return completed.returncode

    def run(self, path: Path) -> int:
        """Run the already built utility with the terminal attached.

        Raises ``OSError`` if the toolchain cannot be started.
        """
        command = self.run_command(path)
        LOGGER.debug("Running: %s", command)
        return subprocess.run(command).returncode


def open_folder(path: Path) -> None:
    """Open ``path`` in the platform file browser. Raises ``OSError`` on failure."""
    if os.name == "posix":  # macOS/Linux
        opener = "open" if sys.platform == "darwin" else "xdg-open"
        subprocess.Popen([opener, str(path)])
    else:
        os.startfile(path)  # type: ignore[attr-defined]
