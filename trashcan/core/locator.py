"""Locate trash directories and decide trash membership from path strings.

There is no catalog on disk: a path is in the trash if and only if it lies
below a recognized trash directory.
"""

from __future__ import annotations

from trashcan.core.codec import PathCodec
from trashcan.core.paths import drive_root, is_under, join_path, parent_path


class TrashLocator:
    """Answers where a path's trash directory is and whether a path is trashed."""

    def __init__(self, codec: PathCodec) -> None:
        self._codec = codec

    def trash_dir_for(self, path: str) -> str:
        """Return ``VolumeRoot(path) + TrashDirectoryName``."""
        return self._codec.trash_dir(self._codec.volume_root(path))

    def candidate_trash_dirs(self, path: str) -> list[str]:
        """Trash directories `path` could belong to: drive-style first, then home-style."""
        name = self._codec.config.trash_dir_name
        dirs = []
        drive = drive_root(path)
        if drive is not None:
            dirs.append(join_path(drive, name))
        dirs.append(join_path(self._codec.config.home_root, name))
        return dirs

    def is_inside_trash(self, path: str, include_subdirectories: bool = False) -> str | None:
        """Return the trash directory containing `path`, or None.

        Only `path`'s directory component is compared, so a trash directory is not
        inside itself. With `include_subdirectories`, entries nested inside a
        trashed directory count as well.
        """
        directory = parent_path(path)
        for trash_dir in self.candidate_trash_dirs(path):
            if directory == trash_dir:
                return trash_dir
            if include_subdirectories and is_under(directory, trash_dir):
                return trash_dir
        return None

    def is_trash_directory(self, path: str) -> bool:
        return path in self.candidate_trash_dirs(path)
