"""Core service interfaces and shared data structures.

This module defines the result dataclass returned by every trash operation
and the protocols through which the host application is notified of moves
and asked for confirmation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class OperationResult:
    """Outcome of a trash, purge, restore or move batch.

    Attributes:
        moved: Tuples of (source, destination) for completed moves.
        removed: Paths permanently deleted.
        failed: Tuples of (path, reason) for filesystem errors.
        conflicts: Tuples of (path, reason) for restores blocked by an existing
            destination.
        skipped: Tuples of (path, reason) for paths that vanished before use.
        not_attempted: Paths left untouched after the batch stopped early.
        aborted: The user declined confirmation; nothing was done.
    """

    moved: list[tuple[str, str]] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    conflicts: list[tuple[str, str]] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)
    not_attempted: list[str] = field(default_factory=list)
    aborted: bool = False

    @property
    def ok(self) -> bool:
        return not (self.failed or self.conflicts or self.not_attempted or self.aborted)

    def merge(self, other: OperationResult) -> OperationResult:
        """Append `other` into this result and return self."""
        self.moved.extend(other.moved)
        self.removed.extend(other.removed)
        self.failed.extend(other.failed)
        self.conflicts.extend(other.conflicts)
        self.skipped.extend(other.skipped)
        self.not_attempted.extend(other.not_attempted)
        self.aborted = self.aborted or other.aborted
        return self


class TrashObserver(Protocol):
    """Receives notifications so the host can refresh listings and open views."""

    def on_moved(self, original: str, destination: str) -> None:
        """`original` now lives at `destination` (trash-in, restore or move)."""
        ...

    def on_removed(self, path: str) -> None:
        """`path` was permanently deleted."""
        ...


class Confirmer(Protocol):
    """Yes/no prompt shown before irreversible operations."""

    def confirm(self, message: str) -> bool:
        """Return True to proceed."""
        ...


class NullObserver:
    """Observer that ignores all notifications."""

    def on_moved(self, original: str, destination: str) -> None:
        pass

    def on_removed(self, path: str) -> None:
        pass


class RefusingConfirmer:
    """Confirmer that declines everything; used when the host supplies none."""

    def confirm(self, message: str) -> bool:
        return False
