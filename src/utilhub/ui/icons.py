"""Keyword based icon selection."""

from __future__ import annotations

from utilhub.constants import ICON_CATEGORIES, ICON_DEFAULT, ICON_PLAIN
from utilhub.models import UtilityRecord


def pick_icon(record: UtilityRecord, no_icons: bool = False) -> str:
    """Return the category icon for ``record``.

    Keywords match as substrings of the id, title and file name, or as whole
    tags. Categories are tried in declaration order.
    """
    if no_icons:
        return ICON_PLAIN

    haystack = f"{record.id} {record.title} {record.file_name}".lower()
    tags = {tag.lower() for tag in record.tags}

    for icon, keywords in ICON_CATEGORIES:
        if any(keyword in haystack or keyword in tags for keyword in keywords):
            return icon
    return ICON_DEFAULT
