from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tagcards.errors import SourceReadError, TagcardsError
from tagcards.reader import new_reader


def test_read_returns_physical_lines(write_source: Callable[..., Path]) -> None:
    path = write_source("one\n\nthree\r\nfour")

    assert new_reader().read(path) == ["one", "", "three", "four"]


def test_undecodable_line_becomes_blank(write_source: Callable[..., Path]) -> None:
    path = write_source(b"ok\n\xc3\x28\nnext\n")

    assert new_reader().read(path) == ["ok", "", "next"]


def test_directory_is_not_readable(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError):
        new_reader().read(tmp_path)


def test_source_read_error_is_package_error(tmp_path: Path) -> None:
    with pytest.raises(TagcardsError, match="Cannot read file"):
        new_reader().read(tmp_path / "nope.txt")
