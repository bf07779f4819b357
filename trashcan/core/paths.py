"""Path string helpers shared by the codec, locator and safety gate.

All paths handled by the core are plain strings in a normalized,
`/`-separated absolute form. Drive-letter paths (``D:/...``) are recognized
on every platform so the codec stays testable without a Windows filesystem.
"""

from __future__ import annotations

import ntpath
import os
import re

SEP = "/"

_DRIVE_RE = re.compile(r"^([A-Za-z]):[/\\]")


def drive_root(path: str) -> str | None:
    """Return the drive prefix of `path` (e.g. ``D:/``), or None."""
    match = _DRIVE_RE.match(path)
    if not match:
        return None
    return f"{match.group(1).upper()}:/"


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Return the absolute, normalized, `/`-separated form of `path`.

    Expands ``~`` and collapses ``.``/``..`` but does not resolve symlinks, so a
    link is handled as the link itself.
    """
    raw = os.path.expanduser(os.fspath(path))
    if _DRIVE_RE.match(raw):
        norm = ntpath.normpath(raw).replace("\\", SEP)
        norm = norm[0].upper() + norm[1:]
    else:
        norm = os.path.normpath(os.path.abspath(raw))
        if os.sep != SEP:
            norm = norm.replace(os.sep, SEP)
    if len(norm) > 1 and norm.endswith(SEP) and norm != drive_root(norm):
        norm = norm.rstrip(SEP)
    return norm


def final_segment(path: str) -> str:
    """Return the last segment of a raw or normalized path."""
    stripped = path.rstrip("/\\")
    if not stripped:
        return ""
    return re.split(r"[/\\]", stripped)[-1]


def join_path(parent: str, name: str) -> str:
    return parent.rstrip(SEP) + SEP + name


def parent_path(path: str) -> str:
    """Return the directory component of a normalized path."""
    drive = drive_root(path)
    if path in (SEP, drive):
        return path
    head = path.rsplit(SEP, 1)[0]
    if not head:
        return SEP
    if drive and head + SEP == drive:
        return drive
    return head


def is_under(path: str, parent: str) -> bool:
    """True if `path` equals `parent` or lies beneath it."""
    return path == parent or path.startswith(parent.rstrip(SEP) + SEP)
