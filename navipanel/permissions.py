"""Octal permission strings such as ``755`` and applying them to files."""

from __future__ import annotations

import os
import re
from os import PathLike

_PERMISSION_PATTERN = re.compile(r"[0-7]{3}")


def is_valid_permission_string(text: str) -> bool:
    """True when ``text`` is exactly three octal digits."""
    return _PERMISSION_PATTERN.fullmatch(text) is not None


def permission_mode(text: str) -> int:
    """The mode bits for owner, group and others given by ``text``.

    Raises ValueError unless ``text`` is exactly three octal digits.
    """
    if not is_valid_permission_string(text):
        raise ValueError(f"invalid permission number: {text!r}")
    owner, group, others = (int(digit) for digit in text)
    return (owner << 6) | (group << 3) | others


def set_permissions(path: str | PathLike[str], text: str) -> int:
    """Set the permissions of ``path`` from ``text`` and return the mode applied.

    Raises ValueError for a malformed permission string and OSError when the
    permissions cannot be changed.
    """
    mode = permission_mode(text)
    os.chmod(path, mode)
    return mode