"""Path normalization utilities.

Image sources are kept as absolute, OS-native path strings so that the
commands built from them do not depend on the working directory of the
child process.

Keep this module free of Qt dependencies.
"""

from __future__ import annotations

import os
from pathlib import Path

_DRIVE_PREFIX_LEN = 2


def _normalize_drive_letter(path_str: str) -> str:
    # Normalize drive letter casing on Windows ("c:\\" -> "C:\\").
    if len(path_str) >= _DRIVE_PREFIX_LEN and path_str[1] == ":":
        return path_str[0].upper() + path_str[1:]
    return path_str


def abs_path(path: str | Path) -> Path:
    """Return an absolute path without requiring that it exists.

    Symlinks are kept as given: the path ends up in commands and status text
    the user reads.
    """
    return Path(os.path.abspath(Path(path).expanduser()))


def abs_path_str(path: str | Path) -> str:
    """Absolute, OS-native path string (Windows uses backslashes)."""
    return _normalize_drive_letter(str(abs_path(path)))
