"""Bijective mapping between absolute paths and trash entry names.

An entry for ``/home/alice/notes.txt`` under a ``/home`` volume root is stored
as ``/home/.TRASHCAN/alice!notes.txt``: the remainder after the volume root
with every separator replaced by the escape character. Nothing here touches
the filesystem.
"""

from __future__ import annotations

from trashcan.core.errors import DecodeError, ValidationError
from trashcan.core.models import RootConvention, TrashConfig
from trashcan.core.paths import SEP, drive_root, is_under, join_path


class PathCodec:
    """Encode and decode trash entry names for one `TrashConfig`."""

    def __init__(self, config: TrashConfig) -> None:
        self._config = config

    @property
    def config(self) -> TrashConfig:
        return self._config

    @property
    def escape_char(self) -> str:
        return self._config.escape_char

    def volume_root(self, path: str) -> str:
        """Return the volume root anchoring `path` under the active convention.

        Raises:
            ValidationError: `path` has no volume root (no drive letter under the
                drive convention, or outside the home root).
        """
        if self._config.convention is RootConvention.DRIVE:
            drive = drive_root(path)
            if drive is None:
                raise ValidationError(f"No drive letter in path: {path}", [path])
            return drive
        home = self._config.home_root
        if not is_under(path, home):
            raise ValidationError(f"Path is outside the home root {home}: {path}", [path])
        return home

    def split(self, path: str) -> tuple[str, str]:
        """Split `path` into ``(volume_root, remainder)``."""
        root = self.volume_root(path)
        remainder = path[len(root) :].lstrip(SEP)
        if not remainder:
            raise ValidationError(f"A volume root cannot be trashed: {path}", [path])
        return root, remainder

    def trash_dir(self, root: str) -> str:
        return join_path(root, self._config.trash_dir_name)

    def encode(self, path: str) -> str:
        """Return the flat entry name for `path`."""
        _, remainder = self.split(path)
        return remainder.replace(SEP, self.escape_char)

    def trash_path_for(self, path: str) -> str:
        """Return the un-suffixed location of `path` inside its trash directory."""
        root, remainder = self.split(path)
        return join_path(self.trash_dir(root), remainder.replace(SEP, self.escape_char))

    def decode(self, trashed_path: str) -> str:
        """Reconstruct the original path of a trashed entry.

        Drive-style trash directories (``D:/TRASHCAN/``) are tried first, then the
        home-style one; the two prefixes differ in length. Paths nested inside a
        trashed directory decode to the matching path inside the original one.

        Raises:
            DecodeError: `trashed_path` is not below a recognized trash directory.
        """
        drive = drive_root(trashed_path)
        if drive is not None:
            suffix = self._strip_prefix(trashed_path, self.trash_dir(drive))
            if suffix:
                return self._rebuild(drive, suffix)
        home = self._config.home_root
        suffix = self._strip_prefix(trashed_path, self.trash_dir(home))
        if suffix:
            return self._rebuild(home, suffix)
        raise DecodeError(trashed_path)

    @staticmethod
    def _strip_prefix(path: str, trash_dir: str) -> str | None:
        prefix = trash_dir + SEP
        if path.startswith(prefix) and len(path) > len(prefix):
            return path[len(prefix) :]
        return None

    def _rebuild(self, root: str, suffix: str) -> str:
        return join_path(root, suffix.replace(self.escape_char, SEP))
