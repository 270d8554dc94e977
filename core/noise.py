"""Noise words: tokens that may not lead a rotation."""

from __future__ import annotations

from collections.abc import Iterable

from core.text import ascii_lower


class NoiseWordSet:
    """Case-insensitive, read-only set of noise words.

    Words are folded when loaded and again when queried, so "The",
    "THE" and "the" are the same noise word.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words = frozenset(ascii_lower(w) for w in words)

    def contains(self, word: str) -> bool:
        return ascii_lower(word) in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"NoiseWordSet({sorted(self._words)!r})"
