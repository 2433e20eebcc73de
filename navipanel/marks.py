"""Marked items, kept across directories."""

from __future__ import annotations

import os
from collections.abc import Iterator
from os import PathLike

StrPath = str | PathLike[str]


def _normal(path: StrPath) -> str:
    return os.path.abspath(os.fspath(path))


class MarkSet:
    """Paths marked by the user.

    Marks in the directory being viewed are local; all marks are global.
    """

    def __init__(self) -> None:
        self._marks: set[str] = set()

    def mark(self, path: StrPath) -> bool:
        """Mark ``path``; True if it was not marked before."""
        key = _normal(path)
        if key in self._marks:
            return False
        self._marks.add(key)
        return True

    def unmark(self, path: StrPath) -> bool:
        """Unmark ``path``; True if it had been marked."""
        key = _normal(path)
        if key not in self._marks:
            return False
        self._marks.remove(key)
        return True

    def toggle(self, path: StrPath) -> bool:
        """Flip the mark on ``path`` and return whether it is now marked."""
        if self.unmark(path):
            return False
        self.mark(path)
        return True

    def is_marked(self, path: StrPath) -> bool:
        return _normal(path) in self._marks

    def local(self, directory: StrPath) -> list[str]:
        """Sorted marks whose parent is ``directory``."""
        parent = _normal(directory)
        return sorted(p for p in self._marks if os.path.dirname(p) == parent)

    def global_marks(self) -> list[str]:
        """All marks, sorted."""
        return sorted(self._marks)

    def clear_local(self, directory: StrPath) -> int:
        """Remove the marks in ``directory``; return how many were removed."""
        local = self.local(directory)
        self._marks.difference_update(local)
        return len(local)

    def clear(self) -> None:
        self._marks.clear()

    def count(self) -> int:
        return len(self._marks)

    def local_count(self, directory: StrPath) -> int:
        return len(self.local(directory))

    def __contains__(self, path: object) -> bool:
        if isinstance(path, (str, PathLike)):
            return self.is_marked(path)
        return False

    def __len__(self) -> int:
        return len(self._marks)

    def __iter__(self) -> Iterator[str]:
        return iter(self.global_marks())