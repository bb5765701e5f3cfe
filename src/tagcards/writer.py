"""
JSON output for parse results.
"""
from __future__ import annotations

import json
from pathlib import Path

from .models import ParseResult


def to_json(result: ParseResult, indent: int | None = 2) -> str:
    """Serialize a result; tags are emitted as sorted lists."""
    return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=indent)


def write_result(result: ParseResult, path: str | Path) -> Path:
    """Write the JSON document, replacing any existing file.

    Parent directories are created as needed.

    Returns:
        The path written to.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(to_json(result) + "\n", encoding="utf-8")
    return output_path
