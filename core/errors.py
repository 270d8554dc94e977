"""Errors raised by the I/O layer and the CLI.

The indexing core itself never raises: empty lines, all-noise lines and
empty noise lists simply produce fewer rotations.
"""

from __future__ import annotations

USAGE = "kwic input_filename noise_words_filename"


class KwicError(Exception):
    """Base class for fatal errors that end the run with exit code 1."""


class ArgumentCountError(KwicError):
    def __init__(self, given: int, expected: int = 2):
        self.given = given
        self.expected = expected
        problem = "Not enough" if given < expected else "Too many"
        super().__init__(
            f"Error: {problem} arguments in command line.\n"
            "Please input arguments in the correct format:\n\n"
            f"{USAGE}"
        )


class FileOpenError(KwicError):
    def __init__(self, source: str, path: str):
        self.source = source
        self.path = path
        super().__init__(f"Error opening {source} file: {path}")
