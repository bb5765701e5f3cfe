"""
Line classification for the flashcard text format.

Every trimmed line falls into exactly one category, checked in this order:
ignorable, malformed, tag directive, content. The malformed check runs
before directive matching so that forbidden characters are always reported,
even on a line that otherwise looks like a directive. The first occurrence
of the separator is exempt from that check on would-be content lines only.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Tuple

from .diagnostics import find_forbidden_columns

COMMENT_MARKER = "//"
SEPARATOR_MARKER = "@sep"

_TAG_DIRECTIVE = re.compile(r"^(?:#{1,2}\w|@{1,2}tags)")
_SINGLE_TAG = re.compile(r"^(#{1,2})(.*)$")
_BATCH_TAGS = re.compile(r"^(@{1,2}tags)(.*)$")


class LineKind(str, Enum):
    IGNORABLE = "ignorable"
    MALFORMED = "malformed"
    DIRECTIVE = "directive"
    CONTENT = "content"


@dataclass(frozen=True)
class TagDirective:
    """A parsed tag directive: which tags to open or close."""
    tags: FrozenSet[str]
    closing: bool = False


def is_ignorable(line: str) -> bool:
    return not line or line.startswith(COMMENT_MARKER) or line.startswith(SEPARATOR_MARKER)


def forbidden_columns(line: str, separator: str = "") -> List[int]:
    """Offsets of forbidden runs under the rule for this kind of line.

    Only a line that would be content splits on the separator, so only
    there is the separator exempt. Directive lines are checked in full.
    """
    if is_tag_directive(line):
        return find_forbidden_columns(line)
    return find_forbidden_columns(line, separator)


def is_malformed(line: str, separator: str = "") -> bool:
    return bool(forbidden_columns(line, separator))


def is_tag_directive(line: str) -> bool:
    return _TAG_DIRECTIVE.match(line) is not None


def is_closing_directive(line: str) -> bool:
    return line.startswith("##") or line.startswith("@@tags")


def classify(line: str, separator: str = "") -> Tuple[LineKind, List[int]]:
    """Classify a trimmed line and return the forbidden columns found on it.

    The column list is empty for every kind except MALFORMED.
    """
    if is_ignorable(line):
        return LineKind.IGNORABLE, []
    columns = forbidden_columns(line, separator)
    if columns:
        return LineKind.MALFORMED, columns
    if is_tag_directive(line):
        return LineKind.DIRECTIVE, []
    return LineKind.CONTENT, []


def classify_line(line: str, separator: str = "") -> LineKind:
    """Classify a trimmed line."""
    return classify(line, separator)[0]


def parse_directive(line: str) -> TagDirective:
    """Parse a line for which `is_tag_directive` holds.

    `#name` / `##name` carry a single tag. `@tags a, b` / `@@tags a, b`
    carry a comma-separated list read from after the matched keyword.
    Empty list entries are dropped.

    Raises:
        ValueError: If the line is not a tag directive.
    """
    match = _BATCH_TAGS.match(line)
    if match:
        keyword, rest = match.groups()
        names = (name.strip() for name in rest.split(","))
        return TagDirective(
            tags=frozenset(name for name in names if name),
            closing=is_closing_directive(keyword),
        )

    match = _SINGLE_TAG.match(line)
    if match and is_tag_directive(line):
        marker, rest = match.groups()
        return TagDirective(tags=frozenset([rest.strip()]), closing=is_closing_directive(marker))

    raise ValueError(f"Not a tag directive: {line!r}")


__all__ = [
    "LineKind",
    "TagDirective",
    "is_ignorable",
    "is_malformed",
    "is_tag_directive",
    "is_closing_directive",
    "classify",
    "classify_line",
    "forbidden_columns",
    "parse_directive",
]
