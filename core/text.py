"""Shared text handling for the noise list, the rotator and the comparator.

Case folding and word splitting are ASCII-only on purpose: neither the
order nor the tokens may depend on the locale or on Unicode tables.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from core.errors import FileOpenError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

ASCII_WHITESPACE = " \t\n\v\f\r"
_WORD_SEPARATOR = re.compile(r"[ \t\n\v\f\r]+")

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_lower(text: str) -> str:
    """Map A-Z to a-z; every other character is left alone."""
    return text.translate(_ASCII_FOLD)


def tokenize(line: str) -> list[str]:
    """Split a record on ASCII whitespace.  Blank records give []."""
    stripped = line.strip(ASCII_WHITESPACE)
    if not stripped:
        return []
    return _WORD_SEPARATOR.split(stripped)


def split_records(text: str) -> list[str]:
    """Split on "\\n" only; a final newline does not open an empty record."""
    records = text.split("\n")
    if records[-1] == "":
        records.pop()
    return records


# ── Readers ─────────────────────────────────────────────────────────


def _read_text(path: str | Path, source: str) -> str:
    # newline="" keeps a lone "\r" inside its record instead of ending it.
    try:
        with Path(path).open("r", encoding=ENCODING, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("cannot read %s file %s: %s", source, path, e)
        raise FileOpenError(source, str(path)) from e


def read_lines(path: str | Path) -> list[list[str]]:
    """Read the input file as one tokenized line per record."""
    text = _read_text(path, "input")
    lines = [tokenize(record) for record in split_records(text)]
    logger.debug("read %d lines from %s", len(lines), path)
    return lines


def read_noise_words(path: str | Path) -> list[str]:
    """Read every whitespace-separated token of the noise-word file."""
    text = _read_text(path, "noise words")
    words = tokenize(text)
    logger.debug("read %d noise words from %s", len(words), path)
    return words
