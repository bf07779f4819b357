"""Filesystem side of trash operations.

The engine moves entries into trash directories, back out of them, and
deletes them for good. Batches run strictly in input order. Paths are expected
to have passed the safety gate already.
"""

from __future__ import annotations

import errno
import os
import shutil

from loguru import logger

from trashcan.core.codec import PathCodec
from trashcan.core.collision import resolve_free_name
from trashcan.core.errors import RestoreConflict
from trashcan.core.locator import TrashLocator
from trashcan.core.paths import final_segment, join_path, parent_path
from trashcan.core.services.interfaces import NullObserver, OperationResult, TrashObserver


def _is_real_dir(path: str) -> bool:
    return os.path.isdir(path) and not os.path.islink(path)


class MoveEngine:
    """Performs trash-in, purge, restore and move batches."""

    def __init__(
        self,
        codec: PathCodec,
        locator: TrashLocator,
        observer: TrashObserver | None = None,
    ) -> None:
        self._codec = codec
        self._locator = locator
        self._observer = observer or NullObserver()

    def trash_in(self, paths: list[str]) -> OperationResult:
        """Move each path into its trash directory.

        Stops at the first filesystem error; earlier moves are kept and the rest of
        the batch is reported as not attempted.
        """
        result = OperationResult()
        for index, path in enumerate(paths):
            try:
                target = self._trash_one(path, self._locator.trash_dir_for(path))
            except OSError as ex:
                logger.error("Move to trash failed for {}: {}", path, ex)
                result.failed.append((path, str(ex)))
                result.not_attempted.extend(paths[index + 1 :])
                break
            result.moved.append((path, target))
            self._observer.on_moved(path, target)
        return result

    def purge(self, paths: list[str]) -> OperationResult:
        """Permanently delete each path; directories are removed recursively."""
        result = OperationResult()
        for path in paths:
            if not os.path.lexists(path):
                logger.warning("Purge skipped, path no longer exists: {}", path)
                result.skipped.append((path, "no longer exists"))
                continue
            try:
                self._remove(path)
            except OSError as ex:
                logger.error("Purge failed for {}: {}", path, ex)
                result.failed.append((path, str(ex)))
                continue
            logger.info("Purged {}", path)
            result.removed.append(path)
            self._observer.on_removed(path)
        return result

    def restore_out(self, trashed_paths: list[str], overwrite: bool = False) -> OperationResult:
        """Move trashed entries back to their decoded locations.

        Every path is decoded before anything moves, so a `DecodeError` leaves the
        filesystem untouched. An existing destination is a per-file conflict unless
        `overwrite` is set. Stops at the first filesystem error.
        """
        plan = [(src, self._codec.decode(src)) for src in trashed_paths]
        result = OperationResult()
        for index, (src, dest) in enumerate(plan):
            if not os.path.lexists(src):
                logger.warning("Restore skipped, not in trash: {}", src)
                result.skipped.append((src, "not in trash"))
                continue
            if os.path.lexists(dest) and not overwrite:
                conflict = RestoreConflict(src, dest)
                logger.warning("Restore conflict for {}: {}", src, conflict)
                result.conflicts.append((src, str(conflict)))
                continue
            try:
                self._ensure_dir(parent_path(dest))
                if _is_real_dir(src):
                    self._restore_tree(src, dest)
                else:
                    if os.path.lexists(dest):
                        self._remove(dest)
                    shutil.move(src, dest)
            except OSError as ex:
                logger.error("Restore failed for {}: {}", src, ex)
                result.failed.append((src, str(ex)))
                result.not_attempted.extend(s for s, _ in plan[index + 1 :])
                break
            logger.info("Restored {} -> {}", src, dest)
            result.moved.append((src, dest))
            self._observer.on_moved(src, dest)
        return result

    def relocate(self, paths: list[str], destination_dir: str) -> OperationResult:
        """Move each path into `destination_dir`.

        A trash directory as destination gets encoded, collision-free names just like
        `trash_in`. Elsewhere an existing name is never overwritten. Stops at the
        first filesystem error.
        """
        into_trash = self._locator.is_trash_directory(destination_dir)
        result = OperationResult()
        for index, path in enumerate(paths):
            try:
                if into_trash:
                    target = self._trash_one(path, destination_dir)
                else:
                    target = join_path(destination_dir, final_segment(path))
                    if os.path.lexists(target):
                        raise FileExistsError(errno.EEXIST, "Destination already exists", target)
                    self._ensure_dir(destination_dir)
                    self._move(path, target)
            except OSError as ex:
                logger.error("Move failed for {}: {}", path, ex)
                result.failed.append((path, str(ex)))
                result.not_attempted.extend(paths[index + 1 :])
                break
            result.moved.append((path, target))
            self._observer.on_moved(path, target)
        return result

    def wipe(self, trash_dir: str) -> OperationResult:
        """Purge every entry of `trash_dir`, keeping the directory itself."""
        if not os.path.isdir(trash_dir):
            logger.info("Nothing to empty, no trash directory at {}", trash_dir)
            return OperationResult()
        entries = [join_path(trash_dir, name) for name in sorted(os.listdir(trash_dir))]
        return self.purge(entries)

    def _trash_one(self, path: str, trash_dir: str) -> str:
        self._ensure_dir(trash_dir)
        target = resolve_free_name(join_path(trash_dir, self._codec.encode(path)))
        self._move(path, target)
        return target

    def _restore_tree(self, src: str, dest: str) -> None:
        # Children move one at a time so a directory can be merged into an existing one.
        if os.path.lexists(dest) and not _is_real_dir(dest):
            self._remove(dest)
        os.makedirs(dest, exist_ok=True)
        for name in sorted(os.listdir(src)):
            child_src = join_path(src, name)
            child_dest = join_path(dest, name)
            if os.path.lexists(child_dest):
                if _is_real_dir(child_src) and _is_real_dir(child_dest):
                    self._restore_tree(child_src, child_dest)
                    continue
                self._remove(child_dest)
            shutil.move(child_src, child_dest)
        os.rmdir(src)

    @staticmethod
    def _ensure_dir(path: str) -> None:
        os.makedirs(path, exist_ok=True)

    @staticmethod
    def _move(src: str, dest: str) -> None:
        if not os.path.lexists(src):
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", src)
        shutil.move(src, dest)
        logger.info("Moved {} -> {}", src, dest)

    @staticmethod
    def _remove(path: str) -> None:
        if _is_real_dir(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
