"""Text helpers for header values."""

from __future__ import annotations

from typing import Tuple


def split_tags(value: str) -> Tuple[str, ...]:
    """Split a comma separated tag list.

    Pieces are trimmed, empty pieces dropped and repeated tags kept only at
    their first position.
    """
    tags: list[str] = []
    for piece in value.split(","):
        tag = piece.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tuple(tags)
