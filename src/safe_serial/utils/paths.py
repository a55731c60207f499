"""Filesystem path normalization helpers.

Pure string transforms: separators are canonicalized, dot segments of
absolute paths are collapsed and absolute paths are recognised for both
POSIX and Windows shapes. Nothing here touches the filesystem except the
resolved-path comparison in ``is_absolute_path``.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

_SEPARATOR_RUN_RE = re.compile(r"[/\\]+")
_WINDOWS_DRIVE_RE = re.compile(r"^[a-zA-Z]:[\\/]")


def fix_directory_separator(path: str, use_clean_prefix: bool = False, separator: str = os.sep) -> str:
    """Collapse every run of ``/`` or ``\\`` into a single ``separator``.

    Args:
        path: Path to clean. Surrounding whitespace is removed.
        use_clean_prefix: Force exactly one leading separator.
        separator: Separator to emit. Defaults to the platform separator.

    Returns:
        The cleaned path, or an empty string for a blank path.

    Examples:
        >>> fix_directory_separator("a//b\\\\c", separator="/")
        'a/b/c'
        >>> fix_directory_separator("a/b", use_clean_prefix=True, separator="/")
        '/a/b'
    """
    path = path.strip()
    if not path:
        return path

    path = _SEPARATOR_RUN_RE.sub(lambda _: separator, path)
    if use_clean_prefix:
        path = separator + path.lstrip(separator)
    return path


def is_absolute_path(path: str) -> bool:
    """Check whether ``path`` is absolute, e.g. ``/foo/bar`` or ``C:\\Windows``."""
    if not path or path.startswith("."):
        return False

    # Definitive when true; a missing path or one behind a symlink falls through.
    # Paths with NUL bytes cannot be resolved.
    if "\0" not in path and str(Path(path).resolve()) == path:
        return True

    if _WINDOWS_DRIVE_RE.match(path):
        return True

    return path[0] in ("/", "\\")


def normalize_path(path: str, separator: str = os.sep) -> str:
    """Normalize a filesystem path.

    Separators are canonicalized and a drive letter is upper-cased. For
    absolute paths, ``.`` segments are dropped and ``..`` removes the segment
    before it, never the root.
    """
    path = fix_directory_separator(path, separator=separator)
    if path[1:2] == ":":
        path = path[0].upper() + path[1:]

    if not (is_absolute_path(path) and path.find(".") > 0):
        return path

    parts = []
    for segment in path.split(separator):
        if segment == ".":
            continue
        if segment == "..":
            if len(parts) > 1:
                parts.pop()
        else:
            parts.append(segment)

    return separator.join(parts) or separator


__all__ = ["fix_directory_separator", "is_absolute_path", "normalize_path"]
