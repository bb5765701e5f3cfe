"""
Tracking of the active tag scope.
"""
from __future__ import annotations

from typing import FrozenSet, Iterable, Set

from .classifier import TagDirective


class TagScope:
    """The set of tags active while content lines are read.

    A tag is either active or not: opening an active tag and closing an
    inactive one leave the scope unchanged.
    """

    def __init__(self, tags: Iterable[str] = ()) -> None:
        self._tags: Set[str] = set(tags)

    def apply(self, directive: TagDirective) -> None:
        if directive.closing:
            self._tags.difference_update(directive.tags)
        else:
            self._tags.update(directive.tags)

    def snapshot(self) -> FrozenSet[str]:
        return frozenset(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __len__(self) -> int:
        return len(self._tags)


__all__ = ["TagScope"]
