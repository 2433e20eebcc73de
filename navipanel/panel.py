"""The file panel: a cursor over a directory listing with marks, search and file operations."""

from __future__ import annotations

import os
from collections import defaultdict
from collections.abc import Callable, Iterable
from os import PathLike

from .file_ops import (
    FileOperationError,
    OperationType,
    create_files,
    create_folders,
    delete_paths,
    rename_item,
    transfer,
)
from .listing import DEFAULT_NAME_FILTERS, DirectoryListing, Entry, expand_home
from .marks import MarkSet
from .permissions import permission_mode, set_permissions
from .search import SearchState, match_names

Hook = Callable[[], None]

INFO = "info"
WARNING = "warning"
ERROR = "error"


class FilePanel:
    """Keyboard-driven view of one directory.

    Status messages that the panel would show are collected and returned by
    :meth:`messages` as ``(level, text)`` pairs.
    """

    PAGE_SIZE = 10

    def __init__(self, path: str | PathLike[str] = "~", cycle: bool = True) -> None:
        self.cycle = cycle
        self._hooks: defaultdict[str, list[Hook]] = defaultdict(list)
        self._show_hidden = False
        self._name_filters: tuple[str, ...] = DEFAULT_NAME_FILTERS
        self._marks = MarkSet()
        self._search = SearchState()
        self._register: list[str] = []
        self._operation = OperationType.COPY
        self._visual = False
        self._visual_start: int | None = None
        self._selection: set[int] = set()
        self._messages: list[tuple[str, str]] = []
        self._previous_dir = ""
        self._listing = DirectoryListing(path, self._show_hidden, self._name_filters)
        self._row: int | None = 0 if self._listing.entries else None

    # -- state -----------------------------------------------------------

    @property
    def listing(self) -> DirectoryListing:
        return self._listing

    @property
    def names(self) -> list[str]:
        return self._listing.names

    @property
    def row(self) -> int | None:
        return self._row

    @property
    def marks(self) -> MarkSet:
        return self._marks

    @property
    def register(self) -> list[str]:
        return list(self._register)

    @property
    def operation(self) -> OperationType:
        return self._operation

    @property
    def visual_line_mode(self) -> bool:
        return self._visual

    @property
    def selection(self) -> list[int]:
        return sorted(self._selection)

    @property
    def hidden_files_visible(self) -> bool:
        return self._show_hidden

    def messages(self) -> list[tuple[str, str]]:
        """Status messages so far, oldest first, as ``(level, text)``."""
        return list(self._messages)

    def _message(self, text: str, level: str = INFO) -> None:
        self._messages.append((level, text))

    def add_hook(self, name: str, callback: Hook) -> None:
        """Run ``callback`` whenever the hook ``name`` fires."""
        self._hooks[name].append(callback)

    def _trigger(self, name: str) -> None:
        for callback in list(self._hooks.get(name, ())):
            callback()

    def current_dir(self) -> str:
        return self._listing.path

    def _current_entry(self) -> Entry | None:
        if self._row is None or not self._listing.entries:
            return None
        return self._listing[self._row]

    def current_item(self) -> str | None:
        """Path of the highlighted item, or None in an empty directory."""
        entry = self._current_entry()
        return entry.path if entry else None

    # -- movement --------------------------------------------------------

    def _set_row(self, row: int) -> None:
        self._row = row
        if self._visual and self._visual_start is not None:
            low, high = sorted((self._visual_start, row))
            self._selection = set(range(low, high + 1))

    def _move_to(self, row: int) -> str | None:
        if 0 <= row < len(self._listing):
            self._set_row(row)
        return self.current_item()

    def next_item(self) -> str | None:
        if self._row is None:
            return None
        row = self._row + 1
        if self.cycle and row >= len(self._listing):
            row = 0
        return self._move_to(row)

    def prev_item(self) -> str | None:
        if self._row is None:
            return None
        row = self._row - 1
        if self.cycle and row < 0:
            row = len(self._listing) - 1
        return self._move_to(row)

    def next_page(self) -> str | None:
        if self._row is None:
            return None
        return self._move_to(self._row + self.PAGE_SIZE)

    def prev_page(self) -> str | None:
        if self._row is None:
            return None
        return self._move_to(self._row - self.PAGE_SIZE)

    def goto_first(self) -> str | None:
        return self._move_to(0)

    def goto_last(self) -> str | None:
        return self._move_to(len(self._listing) - 1)

    def goto_item(self, number: int) -> str | None:
        return self._move_to(number)

    # -- directories -----------------------------------------------------

    def _leave_visual(self) -> None:
        self._visual = False
        self._visual_start = None
        self._selection.clear()

    def set_current_dir(self, path: str | PathLike[str]) -> str:
        """Show ``path`` (``~`` is expanded) with the first item highlighted."""
        target = expand_home(os.fspath(path))
        if not target:
            return self.current_dir()
        listing = DirectoryListing(target, self._show_hidden, self._name_filters)
        self._previous_dir = self._listing.path
        self._listing = listing
        self._search.reset()
        self._leave_visual()
        self._row = 0 if listing.entries else None
        self._trigger("directory_loaded")
        return listing.path

    def _reload(self, highlight: str | None = None) -> None:
        old_row = self._row
        self._listing = DirectoryListing(
            self._listing.path, self._show_hidden, self._name_filters
        )
        self._search.reset()
        count = len(self._listing)
        self._selection = {row for row in self._selection if row < count}
        found = self._listing.index_of(highlight) if highlight else None
        if count == 0:
            self._row = None
        elif found is not None:
            self._row = found
        elif old_row is None:
            self._row = 0
        else:
            self._row = min(old_row, count - 1)
        self._trigger("directory_loaded")

    def up_directory(self) -> str:
        """Go to the parent directory, highlighting the one just left."""
        old_dir = os.path.abspath(self.current_dir())
        parent = os.path.dirname(old_dir)
        if parent != old_dir:
            self.set_current_dir(parent)
            row = self._listing.index_of(os.path.basename(old_dir))
            if row is not None:
                self._row = row
        self._trigger("directory_up")
        return self.current_dir()

    def home_directory(self) -> str:
        return self.set_current_dir("~")

    def previous_directory(self) -> str:
        if not self._previous_dir:
            return self.current_dir()
        return self.set_current_dir(self._previous_dir)

    def toggle_hidden_files(self, state: bool | None = None) -> bool:
        """Show or hide dot files (flip when ``state`` is None), keeping the highlight."""
        entry = self._current_entry()
        self._show_hidden = (not self._show_hidden) if state is None else state
        self._reload(entry.name if entry else None)
        return self._show_hidden

    def filter(self, pattern: str) -> list[str]:
        """Show only names matching the space separated glob patterns."""
        patterns = tuple(p for p in pattern.split(" ") if p) or (pattern,)
        self._name_filters = patterns
        self._trigger("filter_mode_on")
        self._reload()
        return self.names

    def reset_filter(self) -> list[str]:
        self._name_filters = DEFAULT_NAME_FILTERS
        self._trigger("filter_mode_off")
        self._reload()
        return self.names

    # -- marks -----------------------------------------------------------

    def _targets_for_selection(self) -> list[str]:
        if self._selection:
            return [self._listing[row].path for row in sorted(self._selection)]
        current = self.current_item()
        return [current] if current else []

    def mark_item(self) -> int:
        """Mark the selected rows, or the highlighted item; return how many."""
        targets = self._targets_for_selection()
        for path in targets:
            self._marks.mark(path)
        self.toggle_visual_line(False)
        return len(targets)

    def unmark_item(self) -> int:
        """Unmark the selected rows, or the highlighted item; return how many."""
        targets = self._targets_for_selection()
        for path in targets:
            self._marks.unmark(path)
        self.toggle_visual_line(False)
        return len(targets)

    def toggle_mark_item(self) -> int:
        targets = self._targets_for_selection()
        for path in targets:
            self._marks.toggle(path)
        self.toggle_visual_line(False)
        return len(targets)

    def mark_all(self) -> int:
        for entry in self._listing:
            self._marks.mark(entry.path)
        return len(self._listing)

    def mark_inverse(self) -> int:
        """Flip every mark in this directory; nothing happens without local marks."""
        if not self._marks.local_count(self.current_dir()):
            return 0
        for entry in self._listing:
            self._marks.toggle(entry.path)
        return self._marks.local_count(self.current_dir())

    def mark_regex(self, pattern: str) -> int:
        rows = match_names(self.names, pattern, regex=True)
        for row in rows:
            self._marks.mark(self._listing[row].path)
        self.toggle_visual_line(False)
        return len(rows)

    def unmark_regex(self, pattern: str) -> int:
        rows = match_names(self.names, pattern, regex=True)
        for row in rows:
            self._marks.unmark(self._listing[row].path)
        self.toggle_visual_line(False)
        return len(rows)

    def local_marks(self) -> list[str]:
        return self._marks.local(self.current_dir())

    def global_marks(self) -> list[str]:
        return self._marks.global_marks()

    def toggle_visual_line(self, state: bool | None = None) -> bool:
        """Start or end selecting a range of rows (flip when ``state`` is None)."""
        on = (not self._visual) if state is None else state
        if on:
            self._visual = True
            self._visual_start = self._row
            self._selection = {self._row} if self._row is not None else set()
            self._trigger("visual_line_mode_on")
        else:
            was_on = self._visual
            self._leave_visual()
            if was_on:
                self._trigger("visual_line_mode_off")
        return self._visual

    # -- search ----------------------------------------------------------

    def search(self, text: str, regex: bool = False) -> int | None:
        """Highlight the first name matching ``text``; return its row or None."""
        row = self._search.search(self.names, text, regex)
        if row is not None:
            self._set_row(row)
        return row

    def _step_search(self, forward: bool) -> int | None:
        if self._search.stale and self._search.text:
            self.search(self._search.text, self._search.regex)
        if not self._search.matches:
            self._message("No search match found")
            return None
        if forward:
            row = self._search.next()
            if self._search.wrapped:
                self._message("Search reached TOP of the directory")
        else:
            row = self._search.prev()
            if self._search.wrapped:
                self._message("Search reached BOTTOM of the directory")
        self._set_row(row)
        return row

    def search_next(self) -> int | None:
        return self._step_search(True)

    def search_prev(self) -> int | None:
        return self._step_search(False)

    # -- file operations -------------------------------------------------

    def _dwim_targets(self) -> list[str]:
        local = self.local_marks()
        if local:
            return local
        current = self.current_item()
        return [current] if current else []

    def copy_dwim(self) -> list[str]:
        """Register the local marks, or the highlighted item, for copying."""
        self._operation = OperationType.COPY
        self._register = self._dwim_targets()
        return list(self._register)

    def cut_dwim(self) -> list[str]:
        """Register the local marks, or the highlighted item, for moving."""
        self._operation = OperationType.CUT
        self._register = self._dwim_targets()
        return list(self._register)

    def paste(self, dest_dir: str | PathLike[str] | None = None) -> list[str]:
        """Copy or move the registered files into ``dest_dir`` (this directory by default)."""
        if not self._register:
            self._message("No files in the register!")
            return []
        destination = os.fspath(dest_dir) if dest_dir else self.current_dir()
        files = list(self._register)
        try:
            done = transfer(files, destination, self._operation)
        except FileOperationError as exc:
            done = exc.completed
            for path, reason in exc.failures.items():
                self._message(f"Could not {self._operation.value} {path}: {reason}", ERROR)
        else:
            for path in files:
                self._marks.unmark(path)
        last = os.path.basename(files[-1].rstrip(os.sep))
        self._reload(last)
        return done

    def delete_dwim(self) -> list[str]:
        """Delete the local marks, or the highlighted item; return what was deleted."""
        targets = self._dwim_targets()
        if not targets:
            return []
        try:
            deleted = delete_paths(targets)
        except FileOperationError as exc:
            deleted = exc.completed
            for path in exc.failures:
                self._message(f"Unable to delete {path}", ERROR)
        for path in deleted:
            self._message(f"Deleted {path} successfully")
            self._marks.unmark(path)
        if len(targets) > 1:
            self._message(f"{len(deleted)}/{len(targets)} items deleted successfully")
        self._reload()
        return deleted

    def rename_item(self, new_name: str) -> str:
        """Rename the highlighted item and highlight it under its new name."""
        current = self.current_item()
        if current is None:
            raise LookupError("no item to rename")
        new_path = rename_item(current, new_name, self.current_dir())
        self._message("Rename successful")
        self._marks.unmark(current)
        self._reload(new_name)
        return new_path

    def chmod_dwim(self, permission: str) -> list[str]:
        """Apply an octal permission string to the local marks or the highlighted item."""
        try:
            permission_mode(permission)
        except ValueError:
            self._message("Invalid permission number", WARNING)
            raise
        changed: list[str] = []
        for path in self._dwim_targets():
            try:
                set_permissions(path, permission)
            except OSError:
                self._message(f"Error setting permission for {path}", ERROR)
            else:
                self._message(f"Permission changed for {path}")
                changed.append(path)
        return changed

    def _create(
        self,
        names: Iterable[str],
        action: Callable[[str, list[str]], list[str]],
        label: str,
    ) -> list[str]:
        names = list(names)
        if not names or any(not name for name in names):
            self._message(f"{label} name cannot be empty", WARNING)
            raise ValueError(f"{label.lower()} name cannot be empty")
        try:
            created = action(self.current_dir(), names)
        except FileOperationError as exc:
            created = exc.completed
            for path in exc.failures:
                self._message(f"Error creating {os.path.basename(path)}", ERROR)
        for path in created:
            self._message(f"{label} {os.path.basename(path)} created")
        self._reload(names[-1])
        return created

    def new_files(self, names: Iterable[str]) -> list[str]:
        """Create empty files in this directory and highlight the last one."""
        return self._create(names, create_files, "File")

    def new_folders(self, names: Iterable[str]) -> list[str]:
        """Create directories in this directory and highlight the last one."""
        return self._create(names, create_folders, "Directory")