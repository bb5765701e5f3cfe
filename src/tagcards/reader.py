"""
Source reader for flashcard text files.

This module loads a source file in one read and splits it into physical
lines, so that separator detection and the main parse share the same
line positions.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .errors import SourceReadError

logger = logging.getLogger(__name__)


class Reader:
    """
    Reader for flashcard source files.

    Lines are decoded as UTF-8 one at a time. A line that is not valid
    UTF-8 is returned as an empty string so that it is skipped like a
    blank line, while the line numbering of everything after it stays
    intact.
    """

    ENCODING = "utf-8"

    def read(self, path) -> List[str]:
        """
        Read a source file into a list of lines.

        Args:
            path (str | Path): Path to the source file.

        Returns:
            List[str]: Physical lines without their line terminators.

        Raises:
            SourceReadError: If the file cannot be opened or read.
        """
        source = Path(path)
        try:
            raw = source.read_bytes()
        except OSError as e:
            raise SourceReadError(source, e.strerror or str(e)) from e

        lines = []
        for number, chunk in enumerate(raw.splitlines(), 1):
            try:
                lines.append(chunk.decode(self.ENCODING))
            except UnicodeDecodeError:
                logger.warning("Skipping undecodable line", extra={"file": str(source), "line": number})
                lines.append("")

        if lines and lines[0].startswith("\ufeff"):
            lines[0] = lines[0][1:]

        logger.debug("Read source file", extra={"file": str(source), "lines": len(lines)})
        return lines


def new_reader() -> Reader:
    """
    Create a new Reader instance.

    Returns:
        Reader: A new Reader instance.
    """
    return Reader()
