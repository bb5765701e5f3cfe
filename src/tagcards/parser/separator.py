"""
Field separator detection.

A source may pin its own separator with an `@sep <value>` directive on its
first non-blank line. Otherwise the configured default applies.
"""
from __future__ import annotations

from typing import Sequence, Tuple

SEPARATOR_DIRECTIVE = "@sep "


def detect_separator(lines: Sequence[str], default: str) -> Tuple[str, int]:
    """Determine the separator and the index at which the main pass starts.

    Args:
        lines: Physical source lines, untrimmed.
        default: Separator to use when the source does not override it.

    Returns:
        (separator, start_index). start_index is the line after the
        directive when one was found, otherwise 0.
    """
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(SEPARATOR_DIRECTIVE):
            value = line[len(SEPARATOR_DIRECTIVE):].strip()
            if value:
                return value, index + 1
        break

    return default, 0


__all__ = [
    "SEPARATOR_DIRECTIVE",
    "detect_separator",
]
