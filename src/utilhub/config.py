"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from utilhub.constants import (
    ENV_NO_EMOJI,
    ENV_VERBOSE,
    FILE_PATTERN,
    HEADER_LINES_TO_SCAN,
    UTILITIES_FOLDER_NAME,
)


@dataclass(slots=True)
class AppConfig:
    utilities_dir: Path | None = None
    extra_dir: Path | None = None
    file_pattern: str = FILE_PATTERN
    header_lines: int = HEADER_LINES_TO_SCAN
    min_visible: int = 6
    max_visible: int = 12
    toolchain: str = "dotnet"
    no_icons: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.utilities_dir is None:
            self.utilities_dir = Path(UTILITIES_FOLDER_NAME)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "AppConfig":
        """Build a config, reading the environment toggles once."""
        env = os.environ if environ is None else environ
        overrides.setdefault("no_icons", bool(env.get(ENV_NO_EMOJI)))
        overrides.setdefault("verbose", bool(env.get(ENV_VERBOSE)))
        return cls(**overrides)

    def resolve_utilities_dir(self, base_dir: Path | None = None) -> Path:
        if self.utilities_dir is None:
            self.utilities_dir = Path(UTILITIES_FOLDER_NAME)
        if Path(self.utilities_dir).is_absolute() or base_dir is None:
            return Path(self.utilities_dir)
        return base_dir / self.utilities_dir
