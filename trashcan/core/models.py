"""Core domain models for trash configuration and trashed entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import os

from trashcan.core.paths import SEP, normalize_path


class RootConvention(str, Enum):
    """How the volume root of a path is determined."""

    DRIVE = "drive"
    HOME = "home"


def default_convention() -> RootConvention:
    return RootConvention.DRIVE if os.name == "nt" else RootConvention.HOME


def default_trash_dir_name(convention: RootConvention) -> str:
    return "TRASHCAN" if convention is RootConvention.DRIVE else ".TRASHCAN"


@dataclass(frozen=True)
class TrashConfig:
    """Process-wide trash settings, fixed at startup.

    Attributes:
        trash_dir_name: Single path segment appended to a volume root.
        escape_char: Character standing in for the separator in entry names.
        convention: Root convention used to place new trash entries.
        home_root: Volume root under the home convention.
    """

    trash_dir_name: str = ""
    escape_char: str = "!"
    convention: RootConvention = field(default_factory=default_convention)
    home_root: str = ""

    def __post_init__(self) -> None:
        # frozen: defaults are filled through object.__setattr__
        object.__setattr__(self, "convention", RootConvention(self.convention))
        if not self.trash_dir_name:
            object.__setattr__(self, "trash_dir_name", default_trash_dir_name(self.convention))
        object.__setattr__(self, "home_root", normalize_path(self.home_root or "~"))
        if len(self.escape_char) != 1 or self.escape_char in "/\\.":
            raise ValueError(f"Invalid escape character: {self.escape_char!r}")
        if any(ch in self.trash_dir_name for ch in "/\\") or self.trash_dir_name in {".", ".."}:
            raise ValueError(f"Invalid trash directory name: {self.trash_dir_name!r}")
        if self.escape_char in self.trash_dir_name:
            raise ValueError("Trash directory name must not contain the escape character")


@dataclass
class TrashedFile:
    """A live entry inside a trash directory and the path it decodes to."""

    trashed_path: str
    original_path: str
    is_dir: bool = False

    @property
    def name(self) -> str:
        return self.trashed_path.rsplit(SEP, 1)[-1]
