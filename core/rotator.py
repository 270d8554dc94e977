"""Circular shifts: every rotation of every line that is not led by a noise word.

Filtering is per rotation.  Each offset of a line is checked against the
word it would start with, so a line contributes anywhere from 0 to N
rotations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from core.noise import NoiseWordSet

logger = logging.getLogger(__name__)


@dataclass
class RotationStats:
    lines: int = 0
    empty_lines: int = 0
    considered: int = 0
    emitted: int = 0

    @property
    def suppressed(self) -> int:
        return self.considered - self.emitted

    def to_dict(self) -> dict:
        return {
            "lines": self.lines,
            "empty_lines": self.empty_lines,
            "considered": self.considered,
            "emitted": self.emitted,
            "suppressed": self.suppressed,
        }


def rotate(tokens: Sequence[str], k: int) -> list[str]:
    """Left-rotate by k: [t_k, ..., t_{N-1}, t_0, ..., t_{k-1}]."""
    if not tokens:
        return []
    k %= len(tokens)
    return list(tokens[k:]) + list(tokens[:k])


def render_rotation(tokens: Sequence[str]) -> str:
    """Join with single spaces and keep the trailing space of the legacy format."""
    return "".join(f"{t} " for t in tokens)


def generate_rotations(
    lines: Iterable[Sequence[str]],
    noise: NoiseWordSet,
    stats: RotationStats | None = None,
) -> list[str]:
    """Return the unordered rotations of all lines, in generation order.

    For a line of N tokens exactly N offsets are checked; offset k is
    emitted iff its leading token is not a noise word.
    """
    if stats is None:
        stats = RotationStats()

    rotations: list[str] = []
    for line in lines:
        stats.lines += 1
        tokens = list(line)
        if not tokens:
            stats.empty_lines += 1
            continue

        # Offset k leads with tokens[k].
        for k, leading in enumerate(tokens):
            stats.considered += 1
            if not noise.contains(leading):
                rotations.append(render_rotation(rotate(tokens, k)))
                stats.emitted += 1

    logger.debug(
        "generated %d rotations from %d lines (%d suppressed)",
        stats.emitted,
        stats.lines,
        stats.suppressed,
    )
    return rotations
