"""Reading freedesktop ``.desktop`` entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

DESKTOP_ENTRY_GROUP = "Desktop Entry"


def parse_desktop_entry(text: str, group: str = DESKTOP_ENTRY_GROUP) -> dict[str, str]:
    """Return the key/value pairs of ``group`` in a desktop file's text.

    An empty group name reads every assignment in the file.
    """
    values: dict[str, str] = {}
    in_group = not group
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if group and stripped.startswith("["):
            header = stripped.replace("[", "").replace("]", "")
            in_group = group.strip() == header
        if in_group and "=" in line:
            key, _, value = line.partition("=")
            values[key] = value
    return values


def _to_bool(value: str) -> bool:
    return value != "" and value.lower() not in ("0", "false")


def _to_list(value: str) -> list[str]:
    return [part for part in value.replace(" ", "").split(";") if part]


@dataclass
class DesktopFile:
    """The fields of a desktop entry that matter to a file manager."""

    file_name: str = ""
    name: str = ""
    generic_name: str = ""
    exec: str = ""
    icon: str = ""
    type: str = ""
    no_display: bool = False
    terminal: bool = False
    categories: list[str] = field(default_factory=list)
    mime_types: list[str] = field(default_factory=list)

    @classmethod
    def from_entry(cls, file_name: str, entry: dict[str, str]) -> DesktopFile:
        return cls(
            file_name=file_name,
            name=entry.get("Name", ""),
            generic_name=entry.get("GenericName", ""),
            exec=entry.get("Exec", ""),
            icon=entry.get("Icon", ""),
            type=entry.get("Type", ""),
            no_display=_to_bool(entry.get("NoDisplay", "")),
            terminal=_to_bool(entry.get("Terminal", "")),
            categories=_to_list(entry.get("Categories", "")),
            mime_types=_to_list(entry.get("MimeType", "")),
        )

    def pure_file_name(self) -> str:
        """The file's base name with ``.desktop`` removed."""
        return self.file_name.split("/")[-1].replace(".desktop", "")


def load_desktop_file(path: str | PathLike[str]) -> DesktopFile:
    """Read a desktop file; raises FileNotFoundError if it does not exist."""
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return DesktopFile.from_entry(str(file_path), parse_desktop_entry(text))