"""tagcards package.

Converts line-oriented flashcard text (original/translation pairs grouped
by nested tag scopes) into a JSON document:

- parse_file / parse_lines: the single-pass parser
- write_result / to_json: JSON output
- load_config: YAML + environment configuration
"""
from __future__ import annotations

from .config import load_config
from .errors import ConfigError, SourceReadError, TagcardsError
from .models import ErrorLine, Languages, ParseResult, TagField, Text
from .parser import parse_file, parse_lines
from .writer import to_json, write_result

__version__ = "0.1.0"

__all__ = [
    "load_config",
    "ConfigError",
    "SourceReadError",
    "TagcardsError",
    "ErrorLine",
    "Languages",
    "ParseResult",
    "TagField",
    "Text",
    "parse_file",
    "parse_lines",
    "to_json",
    "write_result",
]
