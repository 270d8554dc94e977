"""Rotation ordering: case-insensitive first, then lowercase before uppercase.

compare_rotations() is the three-level rule stated character by
character.  rotation_sort_key() encodes the same rule as a key so the
index can be sorted with Python's stable sort.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from core.text import ascii_lower

logger = logging.getLogger(__name__)


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def compare_rotations(a: str, b: str) -> int:
    """Return -1, 0 or 1 as a sorts before, with, or after b.

    1. Folded characters differ: the earlier folded character wins.
    2. Same letter, different case: the lowercase one wins.
    3. Otherwise move on; if one string runs out, the shorter wins.
    """
    for ca, cb in zip(a, b):
        fa, fb = ascii_lower(ca), ascii_lower(cb)
        if fa != fb:
            return -1 if fa < fb else 1
        if ca != cb:
            return -1 if _is_upper(cb) else 1
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return 0


def rotation_sort_key(rotation: str) -> list[tuple[str, bool]]:
    # List comparison gives prefix-shorter-first, matching step 3.
    return [(ascii_lower(ch), _is_upper(ch)) for ch in rotation]


def sort_rotations(rotations: Iterable[str]) -> list[str]:
    """Order rotations for the index.  Duplicates are kept, adjacent, in input order."""
    ordered = sorted(rotations, key=rotation_sort_key)
    logger.debug("sorted %d rotations", len(ordered))
    return ordered
