"""Batch validation run before any trash, purge, restore or move.

Every rule is checked for every path and all problems are reported together;
a single offending path rejects the whole batch.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from trashcan.core.codec import PathCodec
from trashcan.core.errors import ValidationError
from trashcan.core.locator import TrashLocator
from trashcan.core.paths import final_segment, normalize_path


class SafetyGate:
    """Rejects unsafe batches before the move engine sees them."""

    def __init__(self, codec: PathCodec, locator: TrashLocator) -> None:
        self._codec = codec
        self._locator = locator

    def check_segments(self, raw_paths: Iterable[str]) -> None:
        """Reject raw paths ending in ``.`` or ``..``.

        Runs on the paths as given since normalization would erase these segments.
        """
        problems = []
        for raw in raw_paths:
            segment = final_segment(str(raw))
            if segment in {".", ".."}:
                problems.append((str(raw), f"refusing to operate on '{segment}'"))
        self._raise_if(problems)

    def validate(
        self,
        paths: Iterable[str],
        destination: str | None = None,
        *,
        check_escape: bool = True,
        trash_in: bool = False,
    ) -> list[str]:
        """Validate a batch and return its normalized paths.

        Args:
            paths: Source paths, raw or normalized.
            destination: Target directory of a move, if any.
            check_escape: Reject paths containing the escape character. Disabled for
                paths that are already trash entries.
            trash_in: The batch is headed into trash directories.

        Raises:
            ValidationError: Any path breaks a rule; nothing has been touched.
        """
        raw_paths = [str(p) for p in paths]
        self.check_segments(raw_paths)

        esc = self._codec.escape_char
        problems: list[tuple[str, str]] = []
        into_trash = trash_in
        if destination is not None:
            target = normalize_path(destination)
            if self._locator.is_trash_directory(target):
                into_trash = True
            elif check_escape and esc in self._encoded_part(target):
                problems.append((target, f"destination contains the reserved character '{esc}'"))

        normalized: list[str] = []
        for raw in raw_paths:
            path = normalize_path(raw)
            normalized.append(path)
            if check_escape and esc in self._encoded_part(path):
                problems.append((path, f"name contains the reserved character '{esc}'"))
            if self._locator.is_trash_directory(path):
                if into_trash:
                    problems.append(
                        (
                            path,
                            f"{path} is a trash directory and cannot be moved into a "
                            "trash directory; delete it recursively instead",
                        )
                    )
                continue
            if not into_trash:
                continue
            if self._locator.is_inside_trash(path, include_subdirectories=True):
                problems.append((path, "already in the trash; purge it instead"))
                continue
            try:
                trash_dir = self._locator.trash_dir_for(path)
            except ValidationError as ex:
                problems.append((path, str(ex)))
                continue
            if destination is not None and normalize_path(destination) != trash_dir:
                problems.append((path, f"belongs to trash directory {trash_dir}"))
        self._raise_if(problems)
        return normalized

    def _encoded_part(self, path: str) -> str:
        # Only the part below the volume root ends up in an entry name.
        try:
            return self._codec.split(path)[1]
        except ValidationError:
            return path

    @staticmethod
    def _raise_if(problems: list[tuple[str, str]]) -> None:
        if not problems:
            return
        message = "Batch rejected: " + "; ".join(f"{path}: {reason}" for path, reason in problems)
        logger.warning("{}", message)
        raise ValidationError(message, [path for path, _ in problems])
