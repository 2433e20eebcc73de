"""Directory listings as the file panel shows them."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

DEFAULT_NAME_FILTERS = ("*",)


def expand_home(path: str) -> str:
    """Replace every ``~`` in ``path`` with the user's home directory."""
    if "~" in path:
        return path.replace("~", str(Path.home()))
    return path


@dataclass(frozen=True)
class Entry:
    """One item of a directory."""

    name: str
    path: str
    is_dir: bool
    is_symlink: bool = False
    target: str | None = None


def _link_target(path: str) -> str:
    target = os.readlink(path)
    return os.path.abspath(os.path.join(os.path.dirname(path), target))


def _patterns(name_filters: Iterable[str] | None) -> tuple[str, ...]:
    patterns = tuple(p for p in (name_filters or ()) if p)
    return patterns or DEFAULT_NAME_FILTERS


def list_directory(
    path: str | PathLike[str],
    show_hidden: bool = False,
    name_filters: Iterable[str] | None = None,
) -> list[Entry]:
    """Entries of ``path`` sorted by name.

    Dot files are left out unless ``show_hidden``; only names matching one of
    the glob ``name_filters`` are kept.
    """
    directory = expand_home(os.fspath(path))
    patterns = _patterns(name_filters)
    entries: list[Entry] = []
    with os.scandir(directory) as scanner:
        for item in scanner:
            if not show_hidden and item.name.startswith("."):
                continue
            if not any(fnmatch.fnmatchcase(item.name, p) for p in patterns):
                continue
            is_link = item.is_symlink()
            entries.append(
                Entry(
                    name=item.name,
                    path=item.path,
                    is_dir=item.is_dir(),
                    is_symlink=is_link,
                    target=_link_target(item.path) if is_link else None,
                )
            )
    entries.sort(key=lambda entry: entry.name)
    return entries


class DirectoryListing:
    """The current contents of one directory, reloaded on demand."""

    def __init__(
        self,
        path: str | PathLike[str],
        show_hidden: bool = False,
        name_filters: Iterable[str] | None = None,
    ) -> None:
        self.path = expand_home(os.fspath(path))
        self.show_hidden = show_hidden
        self.name_filters = _patterns(name_filters)
        self.entries: list[Entry] = []
        self.refresh()

    def refresh(self) -> list[Entry]:
        """Read the directory again and return its entries."""
        self.entries = list_directory(self.path, self.show_hidden, self.name_filters)
        return list(self.entries)

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def index_of(self, name: str) -> int | None:
        """Row of the entry called ``name``, or None if it is not listed."""
        for row, entry in enumerate(self.entries):
            if entry.name == name:
                return row
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, row: int) -> Entry:
        return self.entries[row]