from __future__ import annotations

from pathlib import Path


def write_file(path: Path, text: str = "data") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def p(path: Path) -> str:
    """Normalized string form used by the core."""
    return path.as_posix()


class RecordingObserver:
    """Collects notifications the way a host editor would receive them."""

    def __init__(self) -> None:
        self.moved: list[tuple[str, str]] = []
        self.removed: list[str] = []

    def on_moved(self, original: str, destination: str) -> None:
        self.moved.append((original, destination))

    def on_removed(self, path: str) -> None:
        self.removed.append(path)


class ScriptedConfirmer:
    """Answers confirmations with a fixed value and remembers the prompts."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer
