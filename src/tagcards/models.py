"""
Data models for parsed flashcard sources.
"""
from __future__ import annotations

from typing import FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Languages(BaseModel):
    """Language identifiers carried through to the output document."""
    model_config = ConfigDict(frozen=True)

    original: str = Field(..., description="Language of the original text")
    translate: str = Field(..., description="Language of the translation")


class Text(BaseModel):
    """A single original/translation pair."""
    model_config = ConfigDict(frozen=True)

    original: str = Field(..., description="Original text, trimmed")
    translate: str = Field(default="", description="Translation, trimmed; empty when the line had no separator")


class TagField(BaseModel):
    """All content collected under one distinct set of tags."""

    tags: FrozenSet[str] = Field(default_factory=frozenset, description="Tags active while the content was read")
    content: List[Text] = Field(default_factory=list, description="Pairs in file order")

    @field_serializer("tags")
    def serialize_tags(self, tags: FrozenSet[str]) -> List[str]:
        return sorted(tags)


class ErrorLine(BaseModel):
    """A source line rejected because it contains forbidden characters."""
    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="1-based physical line number")
    columns: List[int] = Field(default_factory=list, description="0-based offsets where each forbidden run starts")
    string: str = Field(..., description="The trimmed source line")


class ParseResult(BaseModel):
    """Top-level parse output: languages, fields and collected line errors."""

    languages: Languages
    fields: List[TagField] = Field(default_factory=list)
    errors: List[ErrorLine] = Field(default_factory=list)

    def content_count(self) -> int:
        return sum(len(f.content) for f in self.fields)


__all__ = [
    "Languages",
    "Text",
    "TagField",
    "ErrorLine",
    "ParseResult",
]
