from pathlib import Path

import pytest

from core.errors import FileOpenError
from core.text import (
    ascii_lower,
    read_lines,
    read_noise_words,
    split_records,
    tokenize,
)


def test_ascii_lower_only_folds_ascii_letters():
    assert ascii_lower("The Cat, 42!") == "the cat, 42!"
    assert ascii_lower("ÉCOLE") == "École"


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("  the\tCat   sat \n") == ["the", "Cat", "sat"]
    assert tokenize("   ") == []


def test_read_lines_keeps_blank_records(tmp_path: Path):
    src = tmp_path / "titles.txt"
    src.write_text("the Cat sat\n\nA  Tale\n", encoding="utf-8")

    assert read_lines(src) == [["the", "Cat", "sat"], [], ["A", "Tale"]]


def test_read_noise_words_flattens_all_lines(tmp_path: Path):
    src = tmp_path / "noise.txt"
    src.write_text("the a\nof\n\nAn\n", encoding="utf-8")

    assert read_noise_words(src) == ["the", "a", "of", "An"]


def test_missing_files_raise_file_open_error(tmp_path: Path):
    with pytest.raises(FileOpenError, match="Error opening input file"):
        read_lines(tmp_path / "nope.txt")
    with pytest.raises(FileOpenError, match="Error opening noise words file"):
        read_noise_words(tmp_path / "nope.txt")


def test_tokenize_only_splits_on_ascii_whitespace():
    assert tokenize("alpha\fbeta\vgamma\r") == ["alpha", "beta", "gamma"]
    assert tokenize("New\xa0York") == ["New\xa0York"]
    assert tokenize("\u2003") == ["\u2003"]


def test_split_records_uses_newline_only():
    assert split_records("alpha\fbeta\nNew York\n") == [
        "alpha\fbeta",
        "New York",
    ]
    assert split_records("no final newline") == ["no final newline"]
    assert split_records("a\n\n") == ["a", ""]
    assert split_records("") == []


def test_read_lines_keeps_lone_carriage_return_inside_record(tmp_path: Path):
    src = tmp_path / "titles.txt"
    src.write_bytes(b"one\rtwo\r\nthree\n")

    assert read_lines(src) == [["one", "two"], ["three"]]
