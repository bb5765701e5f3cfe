from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from tagcards.config import SEPARATOR_ENV
from tagcards.models import Languages


@pytest.fixture(autouse=True)
def _no_env_separator(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SEPARATOR_ENV, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger("tagcards")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def languages() -> Languages:
    return Languages(original="ru", translate="de")


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    def _write(content: str | bytes, name: str = "cards.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
