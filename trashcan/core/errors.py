"""Error taxonomy for trash operations.

Structural errors (`ValidationError`, `DecodeError`) are raised before any
filesystem mutation and abort the whole batch. `RestoreConflict` is recorded
per file by the move engine; per-file `OSError`s are recorded the same way.
"""

from __future__ import annotations


class TrashError(Exception):
    """Base class for all trash errors."""


class ValidationError(TrashError):
    """A batch was rejected by the safety gate.

    Attributes:
        paths: Offending paths, in input order.
    """

    def __init__(self, message: str, paths: list[str] | None = None) -> None:
        super().__init__(message)
        self.paths = list(paths or [])


class DecodeError(TrashError):
    """A path does not lie under any recognized trash directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not inside a trash directory: {path}")
        self.path = path


class RestoreConflict(TrashError):
    """The restore destination already exists and overwriting is disabled."""

    def __init__(self, source: str, destination: str) -> None:
        super().__init__(f"Destination already exists: {destination}")
        self.source = source
        self.destination = destination
