"""
Single-pass parser for the tagged flashcard text format.

The driver detects the separator, then walks the remaining lines once:
ignorable lines are skipped, malformed lines become ErrorLine records,
tag directives flush pending content and update the scope, everything
else is buffered as content. A final flush closes the last scope.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from ..models import Languages, ParseResult
from ..reader import Reader, new_reader
from .accumulator import ContentAccumulator, split_content
from .classifier import LineKind, classify, parse_directive
from .diagnostics import ErrorCollector
from .scope import TagScope
from .separator import detect_separator

logger = logging.getLogger(__name__)


def parse_lines(lines: Sequence[str], default_separator: str, languages: Languages) -> ParseResult:
    """Parse already-read source lines.

    Args:
        lines: Physical lines of the source, untrimmed, in file order.
        default_separator: Separator used when the source has no `@sep` line.
        languages: Language identifiers copied into the result.

    Returns:
        ParseResult with one field per distinct tag set and all line errors.
    """
    separator, start = detect_separator(lines, default_separator)

    scope = TagScope()
    accumulator = ContentAccumulator()
    collector = ErrorCollector()

    for number in range(start + 1, len(lines) + 1):
        line = lines[number - 1].strip()
        kind, columns = classify(line, separator)

        if kind is LineKind.IGNORABLE:
            continue
        if kind is LineKind.MALFORMED:
            collector.record(number, line, columns)
            continue
        if kind is LineKind.DIRECTIVE:
            accumulator.flush(scope.snapshot())
            scope.apply(parse_directive(line))
            continue

        accumulator.add(split_content(line, separator))

    accumulator.flush(scope.snapshot())

    result = ParseResult(languages=languages, fields=accumulator.fields(), errors=collector.errors)
    logger.debug(
        "Parsed source",
        extra={"separator": separator, "fields": len(result.fields), "errors": len(result.errors)},
    )
    return result


def parse_file(
    path: str | Path,
    default_separator: str,
    languages: Languages,
    reader: Optional[Reader] = None,
) -> ParseResult:
    """Read and parse a source file.

    Raises:
        SourceReadError: If the file cannot be read. No partial result is
            produced in that case.
    """
    lines = (reader or new_reader()).read(path)
    return parse_lines(lines, default_separator, languages)
