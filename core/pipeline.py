"""Pipeline: noise words + tokenized lines → rotations → ordered KWIC index.

Each stage returns a fresh list; nothing is shared between stages.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from core.noise import NoiseWordSet
from core.ordering import sort_rotations
from core.rotator import RotationStats, generate_rotations
from core.text import read_lines, read_noise_words

logger = logging.getLogger(__name__)


@dataclass
class KwicIndex:
    rotations: list[str]
    stats: RotationStats = field(default_factory=RotationStats)

    def __len__(self) -> int:
        return len(self.rotations)

    def __iter__(self):
        return iter(self.rotations)


def build_index(
    lines: Iterable[Sequence[str]],
    noise_words: Iterable[str] = (),
) -> KwicIndex:
    """Build the sorted index from already-tokenized lines and raw noise tokens."""
    noise = NoiseWordSet(noise_words)
    stats = RotationStats()
    rotations = generate_rotations(lines, noise, stats)
    return KwicIndex(rotations=sort_rotations(rotations), stats=stats)


def index_files(input_path: str | Path, noise_path: str | Path) -> KwicIndex:
    """Read both sources and build the index.

    The noise-word file is read first, so it is the one reported when
    both files are missing.
    """
    noise_words = read_noise_words(noise_path)
    lines = read_lines(input_path)
    index = build_index(lines, noise_words)
    logger.debug("indexed %s: %d entries", input_path, len(index))
    return index
