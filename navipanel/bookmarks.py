"""Named bookmarks pointing at files or directories."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

Listener = Callable[[], None]


@dataclass(frozen=True)
class Bookmark:
    """A bookmarked path and whether it should only be highlighted."""

    file_path: str = ""
    highlight_only: bool = False


class BookmarkManager:
    """Keeps bookmarks by name and tells subscribers when they change."""

    def __init__(self) -> None:
        self._bookmarks: dict[str, Bookmark] = {}
        self._unsaved = False
        self._listeners: list[Listener] = []

    def _changed(self) -> None:
        self._unsaved = True
        for listener in list(self._listeners):
            listener()

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """Call ``callback`` after every change; returns a function that unsubscribes."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def add(self, name: str, file_path: str, highlight_only: bool = False) -> None:
        """Add a bookmark; raises ValueError if the name is taken."""
        if name in self._bookmarks:
            raise ValueError(f"bookmark {name!r} already exists")
        self._bookmarks[name] = Bookmark(file_path, highlight_only)
        self._changed()

    def remove(self, name: str) -> None:
        """Remove a bookmark; raises KeyError if there is none by that name."""
        if name not in self._bookmarks:
            raise KeyError(name)
        del self._bookmarks[name]
        self._changed()

    def get(self, name: str) -> Bookmark:
        """The bookmark called ``name``, or an empty bookmark."""
        return self._bookmarks.get(name, Bookmark())

    def file_path(self, name: str) -> str:
        """The path of the bookmark called ``name``, or an empty string."""
        return self.get(name).file_path

    def set_file(self, name: str, new_path: str, highlight_only: bool = False) -> None:
        """Point an existing bookmark at a new path."""
        if name not in self._bookmarks:
            raise KeyError(name)
        self._bookmarks[name] = Bookmark(new_path, highlight_only)
        self._changed()

    def rename(self, old_name: str, new_name: str) -> None:
        """Give an existing bookmark a new name, replacing any bookmark already so named."""
        if old_name not in self._bookmarks:
            raise KeyError(old_name)
        bookmark = self._bookmarks.pop(old_name)
        self._bookmarks[new_name] = bookmark
        self._changed()

    def names(self) -> list[str]:
        return list(self._bookmarks)

    def bookmarks(self) -> dict[str, Bookmark]:
        return dict(self._bookmarks)

    def set_bookmarks(self, bookmarks: Mapping[str, Bookmark]) -> None:
        """Replace all bookmarks."""
        self._bookmarks = dict(bookmarks)
        self._changed()

    def clear(self) -> None:
        self._bookmarks.clear()
        self._changed()

    def has_unsaved_changes(self) -> bool:
        return self._unsaved

    def mark_saved(self, saved: bool = True) -> None:
        """Record whether the current bookmarks have been saved."""
        self._unsaved = not saved

    def __contains__(self, name: object) -> bool:
        return name in self._bookmarks

    def __len__(self) -> int:
        return len(self._bookmarks)