"""Core UtilHub data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True, slots=True)
class UtilityRecord:
    """Metadata describing a single utility file."""

    id: str
    title: str
    file_path: Path
    description: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def file_name(self) -> str:
        return self.file_path.name
