"""Header directive parsing for utility files.

A utility declares its metadata with comment lines near the top of the file::

    // @id backup-db
    // @title Backup database
    // @desc Dumps the local database to a timestamped file
    // @tags db, backup

Only the first ``max_lines`` lines are scanned. Later directives of the same
key overwrite earlier ones.
"""

from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path
from typing import Iterable, Optional

from utilhub.constants import DIRECTIVE_MARKER, HEADER_LINES_TO_SCAN, KEY_DESC, KEY_ID, KEY_TAGS, KEY_TITLE
from utilhub.models import UtilityRecord
from utilhub.utils.text import split_tags

LOGGER = logging.getLogger(__name__)


def parse_directive(line: str, key: str) -> Optional[str]:
    """Return the value of ``key`` if the trimmed ``line`` declares it."""
    prefix = f"// {key} "
    if not line.startswith(prefix):
        return None
    return line[len(prefix) :].strip()


def parse_header(lines: Iterable[str], default_id: str, file_path: Path) -> UtilityRecord:
    """Build a record from already limited header lines."""
    record_id = default_id
    title = default_id
    description = ""
    tags: tuple[str, ...] = ()

    for raw in lines:
        line = raw.strip()
        if not line.startswith(DIRECTIVE_MARKER):
            continue

        if (value := parse_directive(line, KEY_ID)) is not None:
            record_id = value
        elif (value := parse_directive(line, KEY_TITLE)) is not None:
            title = value
        elif (value := parse_directive(line, KEY_DESC)) is not None:
            description = value
        elif (value := parse_directive(line, KEY_TAGS)) is not None:
            tags = split_tags(value)

    return UtilityRecord(
        id=record_id,
        title=title,
        file_path=file_path,
        description=description,
        tags=tags,
    )


def read_info(path: Path, max_lines: int = HEADER_LINES_TO_SCAN) -> UtilityRecord:
    """Read the header of ``path`` and return its metadata record.

    Bytes that are not valid UTF-8 are replaced. I/O errors propagate; the
    caller decides whether to skip the file.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8-sig", errors="replace") as handle:
        record = parse_header(islice(handle, max_lines), path.stem, path)
    LOGGER.debug("Read header of %s: id=%s title=%s", path, record.id, record.title)
    return record
