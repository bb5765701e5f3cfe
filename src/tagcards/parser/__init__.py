"""
Parser for the tagged flashcard text format.
"""
from .accumulator import ContentAccumulator, split_content
from .classifier import LineKind, TagDirective, classify, classify_line, forbidden_columns, parse_directive
from .diagnostics import ErrorCollector, find_forbidden_columns
from .driver import parse_file, parse_lines
from .scope import TagScope
from .separator import detect_separator

__all__ = [
    "ContentAccumulator",
    "split_content",
    "LineKind",
    "TagDirective",
    "classify",
    "classify_line",
    "forbidden_columns",
    "parse_directive",
    "ErrorCollector",
    "find_forbidden_columns",
    "parse_file",
    "parse_lines",
    "TagScope",
    "detect_separator",
]
