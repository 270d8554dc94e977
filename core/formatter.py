"""Plain-text rendering of the index and of the timing line."""

from __future__ import annotations

from collections.abc import Iterable


def format_index(rotations: Iterable[str]) -> str:
    # Every entry is preceded by a blank line; trailing spaces are kept.
    return "".join(f"\n{rotation}\n" for rotation in rotations)


def format_elapsed(microseconds: int) -> str:
    return f"\n\n{microseconds} microseconds to complete."
