"""Utility catalog loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from utilhub.constants import FILE_PATTERN, HEADER_LINES_TO_SCAN
from utilhub.ingestion.header import read_info
from utilhub.models import UtilityRecord
from utilhub.utils.files import iter_utility_paths

LOGGER = logging.getLogger(__name__)

Catalog = List[UtilityRecord]


def sort_catalog(records: Iterable[UtilityRecord]) -> Catalog:
    """Order records by title, ignoring case."""
    return sorted(records, key=lambda record: record.title.lower())


@dataclass(slots=True)
class LoadStats:
    loaded: int = 0
    failed: int = 0
    failed_files: list[Path] = field(default_factory=list)

    def record_failure(self, path: Path) -> None:
        self.failed += 1
        self.failed_files.append(path)


class CatalogLoader:
    """Scans utility folders and extracts one record per file."""

    def __init__(
        self,
        *,
        max_lines: int = HEADER_LINES_TO_SCAN,
        pattern: str = FILE_PATTERN,
    ) -> None:
        self.max_lines = max_lines
        self.pattern = pattern
        self.stats = LoadStats()

    def load_folder(self, folder: Path | str | None) -> Catalog:
        """Extract every matching file directly inside ``folder``."""
        records: Catalog = []
        for path in iter_utility_paths(folder, self.pattern):
            try:
                records.append(read_info(path, self.max_lines))
            except OSError as exc:
                LOGGER.warning("Skipping %s: %s", path, exc)
                self.stats.record_failure(path)
                continue
            self.stats.loaded += 1
        return records

    def load(self, folders: Iterable[Path | str | None]) -> Catalog:
        """Load all folders into a fresh catalog sorted by title.

        Same-named files in different folders are kept as separate entries.
        """
        self.stats = LoadStats()
        records: Catalog = []
        for folder in folders:
            records.extend(self.load_folder(folder))
        LOGGER.info("Loaded %d utilities (%d skipped)", self.stats.loaded, self.stats.failed)
        return sort_catalog(records)
