from __future__ import annotations

import re
from typing import Iterable

_ILLEGAL_PATH_CHARS = re.compile(r"[/\\:\x00]")


def sanitize_part(part: str) -> str:
    """
    Make one path segment safe to use on the local filesystem.

    `/`, `\\`, `:` and NUL become `_`; the special segments `.` and `..`
    become `_` and `__` so a remote name can never collapse or escape the
    destination directory.
    """
    if part == ".":
        return "_"
    if part == "..":
        return "__"
    return _ILLEGAL_PATH_CHARS.sub("_", part)


def build_relative_path(chain: Iterable[str], name: str, extension: str = "") -> str:
    """
    Join sanitized ancestor names and the file name with `/`.

    Only `name` is sanitized; `extension` comes from the export table and is
    appended as-is.
    """
    parts = [sanitize_part(part) for part in chain]
    parts.append(sanitize_part(name) + extension)
    return "/".join(parts)
