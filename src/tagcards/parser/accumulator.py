"""
Content accumulation and merging of fields by tag set.

Content lines are buffered under the current tag scope. Whenever the scope
is about to change, and once more at the end of input, the buffer is
flushed into the field owning that exact tag set, so a scope that is
closed and later reopened with the same tags keeps extending one field.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, List

from ..models import TagField, Text


def split_content(line: str, separator: str) -> Text:
    """Split a content line on the first occurrence of the separator.

    Without a separator the whole line is the original text and the
    translation is empty.
    """
    original, found, translate = line.partition(separator) if separator else (line, "", "")
    if not found:
        return Text(original=line.strip(), translate="")
    return Text(original=original.strip(), translate=translate.strip())


class ContentAccumulator:
    """Pending content buffer plus the fields built from it so far."""

    def __init__(self) -> None:
        self._pending: List[Text] = []
        self._fields: List[TagField] = []
        self._by_tags: Dict[FrozenSet[str], TagField] = {}

    def add(self, text: Text) -> None:
        self._pending.append(text)

    @property
    def pending(self) -> List[Text]:
        return list(self._pending)

    def flush(self, tags: FrozenSet[str]) -> None:
        """Move buffered content into the field for `tags` and clear the buffer.

        Does nothing when the buffer is empty, so no field is ever created
        without content.
        """
        if not self._pending:
            return

        field = self._by_tags.get(tags)
        if field is None:
            field = TagField(tags=frozenset(tags), content=[])
            self._by_tags[field.tags] = field
            self._fields.append(field)

        field.content.extend(self._pending)
        self._pending.clear()

    def fields(self) -> List[TagField]:
        return list(self._fields)


__all__ = [
    "split_content",
    "ContentAccumulator",
]
