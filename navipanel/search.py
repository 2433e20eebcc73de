"""Searching the names shown in a directory and stepping through the matches."""

from __future__ import annotations

import re
from collections.abc import Sequence


def match_names(names: Sequence[str], text: str, regex: bool = False) -> list[int]:
    """Rows of ``names`` that match ``text``, in order.

    Matching ignores case. Without ``regex`` a name matches when it contains
    ``text``; with it, when the pattern is found anywhere in the name. An
    empty ``text`` matches every name. A malformed pattern raises re.error.
    """
    if regex:
        pattern = re.compile(text, re.IGNORECASE)
        return [row for row, name in enumerate(names) if pattern.search(name)]
    folded = text.casefold()
    return [row for row, name in enumerate(names) if folded in name.casefold()]


class SearchState:
    """The last search in a directory and the match currently selected.

    After :meth:`reset` (the directory changed) the state is stale: the text
    and mode are kept so the caller can search the new directory again.
    """

    def __init__(self) -> None:
        self.text = ""
        self.regex = False
        self.matches: list[int] = []
        self.index = -1
        self.stale = True
        self.wrapped = False

    @property
    def count(self) -> int:
        return len(self.matches)

    def search(self, names: Sequence[str], text: str, regex: bool = False) -> int | None:
        """Search ``names`` for ``text`` and select the first match.

        Returns the row of the first match, or None when nothing matches; in
        that case the previous search text is kept.
        """
        self.matches = match_names(names, text, regex)
        self.wrapped = False
        if not self.matches:
            self.index = -1
            return None
        self.index = 0
        self.stale = False
        self.text = text
        self.regex = regex
        return self.matches[0]

    def _require_matches(self) -> None:
        if not self.matches:
            raise LookupError("No search match found")

    def next(self) -> int:
        """Select the next match, wrapping to the first; return its row.

        ``wrapped`` tells whether the search went back to the top.
        Raises LookupError when there are no matches.
        """
        self._require_matches()
        self.index += 1
        self.wrapped = self.index > len(self.matches) - 1
        if self.wrapped:
            self.index = 0
        return self.matches[self.index]

    def prev(self) -> int:
        """Select the previous match, wrapping to the last; return its row.

        ``wrapped`` tells whether the search went round to the bottom.
        Raises LookupError when there are no matches.
        """
        self._require_matches()
        self.index -= 1
        self.wrapped = self.index < 0
        if self.wrapped:
            self.index = len(self.matches) - 1
        return self.matches[self.index]

    def reset(self) -> None:
        """Forget the matches after a directory change, keeping the search text."""
        self.matches = []
        self.index = -1
        self.stale = True
        self.wrapped = False