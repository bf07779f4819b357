"""Console collaborators: confirmation prompt, move notifications, reporting."""

from __future__ import annotations

import sys
from typing import TextIO

from trashcan.core.models import TrashedFile
from trashcan.core.services.interfaces import OperationResult


class ConsoleConfirmer:
    """Asks yes/no on the terminal; `assume_yes` answers yes without asking."""

    def __init__(self, assume_yes: bool = False, stream: TextIO | None = None) -> None:
        self._assume_yes = assume_yes
        self._stream = stream or sys.stderr

    def confirm(self, message: str) -> bool:
        if self._assume_yes:
            return True
        self._stream.write(f"{message}\n[y/N] ")
        self._stream.flush()
        try:
            answer = input()
        except EOFError:
            return False
        return answer.strip().lower() in {"y", "yes"}


class ConsoleObserver:
    """Prints one line per moved or removed entry."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def on_moved(self, original: str, destination: str) -> None:
        print(f"moved    {original} -> {destination}", file=self._stream)

    def on_removed(self, path: str) -> None:
        print(f"removed  {path}", file=self._stream)


def report(result: OperationResult, stream: TextIO | None = None) -> None:
    """Print the parts of `result` that observers never see."""
    out = stream or sys.stderr
    if result.aborted:
        print("aborted, nothing changed", file=out)
    for path, reason in result.failed:
        print(f"failed   {path}: {reason}", file=out)
    for path, reason in result.conflicts:
        print(f"conflict {path}: {reason}", file=out)
    for path, reason in result.skipped:
        print(f"skipped  {path}: {reason}", file=out)
    for path in result.not_attempted:
        print(f"untouched {path}", file=out)


def print_listing(entries: list[TrashedFile], stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    for entry in entries:
        marker = "/" if entry.is_dir else ""
        print(f"{entry.name}{marker}\t{entry.original_path}{marker}", file=out)
