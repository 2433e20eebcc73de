"""Filtered completion list for the input bar."""

from __future__ import annotations

from collections.abc import Iterable


def apply_completion(line_text: str, item: str) -> str:
    """Replace the last word of ``line_text`` with ``item`` and add a space."""
    last_space = line_text.rfind(" ")
    if last_space == -1:
        return item + " "
    return line_text[: last_space + 1] + item + " "


class CompletionList:
    """Completions filtered by a fixed substring, with a movable current row."""

    def __init__(self, case_sensitive: bool = True) -> None:
        self.case_sensitive = case_sensitive
        self._completions: list[str] = []
        self._filter_text = ""
        self._matches: list[str] = []
        self._row: int | None = None

    def _refilter(self) -> None:
        text = self._filter_text
        if not text:
            self._matches = list(self._completions)
        elif self.case_sensitive:
            self._matches = [c for c in self._completions if text in c]
        else:
            folded = text.casefold()
            self._matches = [c for c in self._completions if folded in c.casefold()]
        self._row = None

    def set_completions(self, completions: Iterable[str]) -> None:
        """Replace the completions, keeping the current filter text."""
        self._completions = list(completions)
        self._refilter()

    def completions(self) -> list[str]:
        return list(self._completions)

    @property
    def matches(self) -> list[str]:
        return list(self._matches)

    @property
    def total(self) -> int:
        return len(self._completions)

    def filter(self, text: str) -> list[str]:
        """Filter by ``text`` (all items if empty) and return the matches."""
        self._filter_text = text
        self._refilter()
        return list(self._matches)

    def move_up(self) -> None:
        if self._row is not None and self._row > 0:
            self._row -= 1

    def move_down(self) -> None:
        row = -1 if self._row is None else self._row
        if row < len(self._matches) - 1:
            self._row = row + 1

    def current(self) -> str | None:
        """The selected match, or None when nothing is selected."""
        if self._row is None:
            return None
        return self._matches[self._row]

    def accept(self, line_text: str) -> str:
        """Apply the selected match to ``line_text``; unchanged if none is selected."""
        item = self.current()
        if item is None:
            return line_text
        return apply_completion(line_text, item)