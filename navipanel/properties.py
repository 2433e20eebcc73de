"""File and folder properties as the property dialog presents them."""

from __future__ import annotations

import mimetypes
import os
import stat
from dataclasses import dataclass
from datetime import datetime
from os import PathLike

_IEC_UNITS = ("bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_data_size(size: int) -> str:
    """Human-readable size with binary units and two decimals."""
    power = (abs(size).bit_length() - 1) // 10 if size else 0
    power = min(power, len(_IEC_UNITS) - 1)
    if power == 0:
        return f"{size} {_IEC_UNITS[0]}"
    precision = min(2, 3 * power)
    return f"{size / 1024 ** power:.{precision}f} {_IEC_UNITS[power]}"


@dataclass(frozen=True)
class ItemProperty:
    name: str
    size: str
    mime_name: str


@dataclass(frozen=True)
class FolderInfo:
    count: int
    size: int


def _mime_name(path: str) -> str:
    if os.path.isdir(path):
        return "inode/directory"
    guessed, _ = mimetypes.guess_type(path)
    return guessed or "application/octet-stream"


def _modified(st: os.stat_result) -> str:
    moment = datetime.fromtimestamp(st.st_mtime)
    return f"{moment:%a %b} {moment.day} {moment:%H:%M:%S %Y}"


def item_property(path: str | PathLike[str]) -> ItemProperty:
    """Name, formatted size and MIME type of ``path``."""
    item = os.fspath(path)
    st = os.stat(item)
    return ItemProperty(
        name=os.path.basename(item.rstrip(os.sep)) or item,
        size=format_data_size(st.st_size),
        mime_name=_mime_name(item),
    )


def folder_info(path: str | PathLike[str]) -> FolderInfo:
    """Number of files below ``path`` and their total size."""
    count = 0
    total = 0
    for root, _dirs, files in os.walk(os.fspath(path)):
        for name in files:
            try:
                total += os.stat(os.path.join(root, name)).st_size
            except OSError:
                continue
            count += 1
    return FolderInfo(count, total)


def describe_item(path: str | PathLike[str]) -> dict[str, str]:
    """Labelled rows describing ``path``, in display order.

    A symlink whose target does not exist gives no rows.
    """
    item = os.fspath(path)
    target = item
    symbolic = os.path.islink(item)
    if symbolic:
        link = os.readlink(item)
        target = os.path.abspath(os.path.join(os.path.dirname(item), link))
        if not os.path.exists(target):
            return {}
    if not os.path.exists(target):
        return {}

    st = os.stat(target)
    is_dir = stat.S_ISDIR(st.st_mode)
    kind = "Directory" if is_dir else "File"
    rows: dict[str, str] = {}
    if symbolic:
        rows["Name"] = os.path.basename(item)
        rows["Symlink"] = item
        rows["Target"] = target
        rows["Type"] = f"Symbolic Link {kind}"
    else:
        rows["Name"] = os.path.basename(item.rstrip(os.sep)) or item
        rows["Type"] = kind

    if is_dir:
        info = folder_info(item)
        rows["Size"] = format_data_size(info.size)
        rows["Total files"] = str(info.count)
    else:
        rows["Size"] = format_data_size(st.st_size)
    rows["Last modified"] = _modified(st)
    if not symbolic:
        rows["Path"] = item
    rows["Permissions"] = stat.filemode(st.st_mode)
    rows["Mime Type"] = _mime_name(item)
    return rows