from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class LanguagesConfig(BaseModel):
    """Language identifiers written into the output document."""
    original: str = Field(default="ru", description="Language of the original text")
    translate: str = Field(default="de", description="Language of the translation")


class TagcardsConfig(BaseModel):
    """Configuration for converting one flashcard source to JSON.

    - input_file: path to the tagged text source
    - output_file: where the JSON document is written
    - default_separator: separator used when the source has no `@sep` line
    - languages: identifiers carried into the output unchanged
    """

    input_file: Path = Field(..., description="Path to the flashcard text source")
    output_file: Path = Field(default=Path("result.json"), description="Path of the JSON document to write")
    default_separator: str = Field(default="::", description="Separator used when the source has no @sep directive")
    languages: LanguagesConfig = Field(default_factory=LanguagesConfig, description="Language identifiers")

    @field_validator("default_separator")
    @classmethod
    def separator_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_separator cannot be empty")
        return value
