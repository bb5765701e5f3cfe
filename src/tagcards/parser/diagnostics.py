"""
Detection and collection of malformed lines.

Field tags and texts may later be used as file names, so characters that
are unsafe in paths are rejected line by line.
"""
from __future__ import annotations

import logging
import re
from typing import List

from ..models import ErrorLine

logger = logging.getLogger(__name__)

FORBIDDEN_CHARACTERS = '<>:"/\\|*'
_FORBIDDEN_RUN = re.compile(f"[{re.escape(FORBIDDEN_CHARACTERS)}]+")


def _mask_separator(line: str, separator: str) -> str:
    # Blank out the first separator occurrence without shifting offsets.
    if not separator:
        return line
    index = line.find(separator)
    if index == -1:
        return line
    return line[:index] + " " * len(separator) + line[index + len(separator):]


def find_forbidden_columns(line: str, separator: str = "") -> List[int]:
    """Return the 0-based start offset of every run of forbidden characters.

    The first occurrence of `separator` is exempt, so a separator such as
    `->` or `::` does not make a content line malformed.
    """
    masked = _mask_separator(line, separator)
    return [m.start() for m in _FORBIDDEN_RUN.finditer(masked)]


class ErrorCollector:
    """Accumulates ErrorLine records in the order they are found."""

    def __init__(self) -> None:
        self.errors: List[ErrorLine] = []

    def record(self, line_number: int, line: str, columns: List[int]) -> ErrorLine:
        error = ErrorLine(line=line_number, columns=list(columns), string=line)
        self.errors.append(error)
        logger.warning(
            "Malformed line",
            extra={"line": line_number, "columns": error.columns},
        )
        return error

    def __len__(self) -> int:
        return len(self.errors)


__all__ = [
    "FORBIDDEN_CHARACTERS",
    "find_forbidden_columns",
    "ErrorCollector",
]
