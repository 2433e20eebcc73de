"""File operations of the file panel: create, delete, rename, link, copy, move, trash."""

from __future__ import annotations

import enum
import os
import shutil
from collections.abc import Callable, Iterable
from datetime import datetime
from os import PathLike
from pathlib import Path
from urllib.parse import quote

StrPath = str | PathLike[str]


class OperationType(enum.Enum):
    """What a paste does with the registered files."""

    COPY = "copy"
    CUT = "cut"


class FileOperationError(Exception):
    """Some items of a batch operation failed.

    ``failures`` maps each failed item to the reason; ``completed`` holds the
    results of the items that succeeded.
    """

    def __init__(
        self,
        message: str,
        failures: dict[str, str] | None = None,
        completed: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.failures: dict[str, str] = dict(failures or {})
        self.completed: list[str] = list(completed or [])


def _each(items: Iterable[StrPath], action: Callable[[str], str], verb: str) -> list[str]:
    paths = [os.fspath(item) for item in items]
    done: list[str] = []
    failures: dict[str, str] = {}
    for path in paths:
        try:
            done.append(action(path))
        except OSError as exc:
            failures[path] = exc.strerror or str(exc)
    if failures:
        raise FileOperationError(
            f"could not {verb} {len(failures)} of {len(paths)} items", failures, done
        )
    return done


def _base_name(path: str) -> str:
    return os.path.basename(path.rstrip(os.sep)) or path


def create_files(directory: StrPath, names: Iterable[str]) -> list[str]:
    """Create (or empty) a file for each name in ``directory``; return their paths."""
    base = os.fspath(directory)

    def create(name: str) -> str:
        if not name:
            raise ValueError("file name cannot be empty")
        path = os.path.join(base, name)
        with open(path, "wb"):
            pass
        return path

    names = list(names)
    if any(not name for name in names):
        raise ValueError("file name cannot be empty")
    return _each(names, create, "create")


def create_folders(directory: StrPath, names: Iterable[str]) -> list[str]:
    """Create each named directory (with parents) in ``directory``; return their paths."""
    base = os.fspath(directory)
    names = list(names)
    if any(not name for name in names):
        raise ValueError("directory name cannot be empty")

    def create(name: str) -> str:
        path = os.path.join(base, name)
        os.makedirs(path, exist_ok=True)
        return path

    return _each(names, create, "create")


def delete_paths(paths: Iterable[StrPath]) -> list[str]:
    """Delete files and whole directory trees; return the paths deleted."""

    def delete(path: str) -> str:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
        return path

    return _each(paths, delete, "delete")


def rename_item(path: StrPath, new_name: str, directory: StrPath | None = None) -> str:
    """Rename ``path`` to ``new_name`` inside ``directory`` (its own by default).

    Raises ValueError for an empty or unchanged name and FileExistsError when
    the new name is taken. Returns the new path.
    """
    source = os.fspath(path)
    if not new_name:
        raise ValueError("new name cannot be empty")
    if new_name == _base_name(source):
        raise ValueError("file names are the same")
    target_dir = os.fspath(directory) if directory is not None else os.path.dirname(source)
    destination = os.path.join(target_dir, new_name)
    if os.path.lexists(destination):
        raise FileExistsError(f"{destination} already exists")
    os.rename(source, destination)
    return destination


def link_items(paths: Iterable[StrPath], target_dir: StrPath) -> list[str]:
    """Create a symbolic link in ``target_dir`` to each path; return the links."""
    base = os.fspath(target_dir)

    def link(path: str) -> str:
        link_path = os.path.join(base, _base_name(path))
        os.symlink(os.path.abspath(path), link_path)
        return link_path

    return _each(paths, link, "link")


def transfer(paths: Iterable[StrPath], dest_dir: StrPath, operation: OperationType) -> list[str]:
    """Copy or move each path into ``dest_dir``; return the new paths.

    An item whose destination already exists is not touched and is reported
    as a failure.
    """
    base = os.fspath(dest_dir)

    def move_or_copy(path: str) -> str:
        destination = os.path.join(base, _base_name(path))
        if os.path.lexists(destination):
            raise FileExistsError(17, "destination already exists", destination)
        if operation is OperationType.CUT:
            shutil.move(path, destination)
        elif os.path.isdir(path) and not os.path.islink(path):
            shutil.copytree(path, destination, symlinks=True)
        else:
            shutil.copy2(path, destination, follow_symlinks=False)
        return destination

    return _each(paths, move_or_copy, operation.value)


def _default_trash() -> Path:
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(data_home) / "Trash"


def trash_item(path: StrPath, trash_root: StrPath | None = None) -> str:
    """Move ``path`` into a freedesktop trash directory; return where it went.

    A ``.trashinfo`` record holding the original path and deletion date is
    written next to it. Raises FileNotFoundError if ``path`` does not exist.
    """
    source = os.path.abspath(os.fspath(path))
    if not os.path.lexists(source):
        raise FileNotFoundError(2, "no such file or directory", source)
    root = Path(trash_root) if trash_root is not None else _default_trash()
    files_dir = root / "files"
    info_dir = root / "info"
    files_dir.mkdir(parents=True, exist_ok=True)
    info_dir.mkdir(parents=True, exist_ok=True)

    name = _base_name(source)
    candidate = name
    counter = 1
    while os.path.lexists(files_dir / candidate) or (info_dir / f"{candidate}.trashinfo").exists():
        counter += 1
        candidate = f"{name}.{counter}"

    info_path = info_dir / f"{candidate}.trashinfo"
    info_path.write_text(
        "[Trash Info]\n"
        f"Path={quote(source)}\n"
        f"DeletionDate={datetime.now():%Y-%m-%dT%H:%M:%S}\n",
        encoding="utf-8",
    )
    destination = files_dir / candidate
    try:
        shutil.move(source, destination)
    except OSError:
        info_path.unlink(missing_ok=True)
        raise
    return str(destination)