"""Request-level trash operations.

Provides the API a host application calls: validate the batch, ask for
confirmation before anything irreversible, then hand the work to the move
engine. ``delete`` is the two-stage entry point: untrashed paths go to the
trash, paths already in a trash directory are purged.
"""

from __future__ import annotations

from collections.abc import Iterable
import os

from loguru import logger

from trashcan.core.codec import PathCodec
from trashcan.core.locator import TrashLocator
from trashcan.core.models import RootConvention, TrashConfig, TrashedFile
from trashcan.core.paths import join_path, normalize_path
from trashcan.core.safety import SafetyGate
from trashcan.core.services.interfaces import (
    Confirmer,
    OperationResult,
    RefusingConfirmer,
    TrashObserver,
)
from trashcan.infrastructure.move_engine import MoveEngine


class TrashService:
    """Coordinates validation, confirmation and the move engine."""

    def __init__(
        self,
        config: TrashConfig,
        observer: TrashObserver | None = None,
        confirmer: Confirmer | None = None,
    ) -> None:
        """Create a TrashService.

        Args:
            config: Process-wide trash configuration.
            observer: Receives move/remove notifications (defaults to none).
            confirmer: Asked before purges and wipes; without one, every
                irreversible request is declined.
        """
        self.config = config
        self.codec = PathCodec(config)
        self.locator = TrashLocator(self.codec)
        self.gate = SafetyGate(self.codec, self.locator)
        self.engine = MoveEngine(self.codec, self.locator, observer)
        self._confirmer = confirmer or RefusingConfirmer()

    def delete(self, paths: Iterable[str]) -> OperationResult:
        """Trash untrashed paths and purge already-trashed ones.

        The purge part needs confirmation; declining aborts the whole request. If
        the trash-in part stops on an error, the purge part is not attempted.
        """
        raw_paths = [str(p) for p in paths]
        self.gate.check_segments(raw_paths)
        normalized = [normalize_path(p) for p in raw_paths]
        doomed = [p for p in normalized if self.locator.is_inside_trash(p, True)]
        fresh = [p for p in normalized if p not in doomed]
        if fresh:
            self.gate.validate(fresh, trash_in=True)
        if doomed:
            self.gate.validate(doomed, check_escape=False)
            if not self._confirm_purge(doomed):
                return OperationResult(aborted=True)

        result = self.engine.trash_in(fresh) if fresh else OperationResult()
        if not doomed:
            return result
        if not result.ok:
            result.not_attempted.extend(doomed)
            return result
        return result.merge(self.engine.purge(doomed))

    def trash(self, paths: Iterable[str]) -> OperationResult:
        """Move paths into their trash directories."""
        validated = self.gate.validate(paths, trash_in=True)
        return self.engine.trash_in(validated)

    def purge(self, paths: Iterable[str]) -> OperationResult:
        """Permanently delete paths after confirmation."""
        validated = self.gate.validate(paths, check_escape=False)
        if not validated:
            return OperationResult()
        if not self._confirm_purge(validated):
            return OperationResult(aborted=True)
        return self.engine.purge(validated)

    def restore(self, paths: Iterable[str], overwrite: bool = False) -> OperationResult:
        """Move trashed entries back to where they came from.

        Raises:
            DecodeError: A path is not inside a trash directory; nothing was moved.
        """
        validated = self.gate.validate(paths, check_escape=False)
        return self.engine.restore_out(validated, overwrite=overwrite)

    def move(self, paths: Iterable[str], destination_dir: str) -> OperationResult:
        """Move paths into `destination_dir`, encoding names if it is a trash directory."""
        destination = normalize_path(destination_dir)
        validated = self.gate.validate(paths, destination=destination)
        return self.engine.relocate(validated, destination)

    def trash_dir(self, path: str | None = None) -> str:
        """Return the trash directory for `path`, or the default one.

        The default is the home root's trash directory under the home convention and
        the current drive's otherwise.
        """
        if path is None:
            if self.config.convention is RootConvention.HOME:
                path = self.config.home_root
            else:
                path = os.getcwd()
        return self.locator.trash_dir_for(normalize_path(path))

    def empty_trash(self, path: str | None = None) -> OperationResult:
        """Purge everything in a trash directory after confirmation."""
        trash_dir = self.trash_dir(path)
        if not self._confirmer.confirm(f"Permanently delete everything in {trash_dir}?"):
            logger.info("Emptying {} declined", trash_dir)
            return OperationResult(aborted=True)
        return self.engine.wipe(trash_dir)

    def list_trash(self, path: str | None = None) -> list[TrashedFile]:
        """Return the entries of a trash directory with their original paths."""
        trash_dir = self.trash_dir(path)
        if not os.path.isdir(trash_dir):
            return []
        entries: list[TrashedFile] = []
        for name in sorted(os.listdir(trash_dir)):
            trashed = join_path(trash_dir, name)
            entries.append(
                TrashedFile(
                    trashed_path=trashed,
                    original_path=self.codec.decode(trashed),
                    is_dir=os.path.isdir(trashed) and not os.path.islink(trashed),
                )
            )
        return entries

    def _confirm_purge(self, paths: list[str]) -> bool:
        listing = "\n".join(f"  {p}" for p in paths)
        message = f"Permanently delete {len(paths)} item(s)?\n{listing}"
        if self._confirmer.confirm(message):
            return True
        logger.info("Purge of {} item(s) declined", len(paths))
        return False
