"""Renaming many files through an editable ``old -> new`` list."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

ARROW = "->"

HEADER_LINES = (
    "# This is a comment line",
    "# Add your new file names to the right of the -> symbol",
    "# Just add the file name without the path",
    "# Example: /path/to/file/filename.png -> new_filename.png",
    "# Once done, please save and quit the file",
    "# The files will hopefully be renamed",
)


@dataclass(frozen=True)
class RenameOutcome:
    """What happened to one requested rename."""

    source: str
    destination: str
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def write_rename_list(paths: Iterable[str], stream: TextIO) -> None:
    """Write the explanatory header and one ``path -> `` line per path."""
    stream.write("\n".join(HEADER_LINES))
    stream.write("\n\n")
    for path in paths:
        stream.write(f"{path} {ARROW} \n")


def parse_rename_list(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield ``(original_path, new_name)`` for every filled-in line.

    Comment lines, lines without exactly one arrow and lines whose new name
    is blank are skipped.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if line.startswith("#"):
            continue
        parts = [part for part in line.split(ARROW) if part]
        if len(parts) != 2:
            continue
        original = parts[0].strip()
        new_name = parts[1].strip()
        if new_name:
            yield original, new_name


def apply_renames(pairs: Iterable[tuple[str, str]]) -> list[RenameOutcome]:
    """Rename each original path to the new name in the same directory.

    A rename that would overwrite an existing file, or that the system
    refuses, is reported in its outcome rather than raised.
    """
    outcomes: list[RenameOutcome] = []
    for original, new_name in pairs:
        directory = os.path.dirname(os.path.abspath(original))
        destination = directory + "/" + new_name
        if os.path.lexists(destination):
            outcomes.append(
                RenameOutcome(original, destination, f"{destination} already exists")
            )
            continue
        try:
            os.rename(original, destination)
        except OSError as exc:
            outcomes.append(RenameOutcome(original, destination, str(exc)))
        else:
            outcomes.append(RenameOutcome(original, destination))
    return outcomes