"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_utility_paths(folder: Path | str | None, pattern: str) -> Iterator[Path]:
    """Yield files matching ``pattern`` directly inside ``folder``, ordered by name.

    A missing, blank or non-directory folder yields nothing.
    """
    if folder is None or not str(folder).strip():
        return
    root = Path(folder)
    if not root.is_dir():
        return
    yield from sorted(
        (child for child in root.glob(pattern) if child.is_file()),
        key=lambda child: child.name,
    )
