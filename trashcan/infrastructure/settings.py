"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from trashcan.core.models import RootConvention, TrashConfig, default_convention


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node


def get_default_settings_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/trashcan/settings.json`` (``~/.config`` fallback)."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "trashcan" / "settings.json"


def load_settings(settings_path: str | Path | None = None) -> JsonSettings | None:
    """Load settings from `settings_path` or the default location.

    A missing default file means built-in defaults; a missing explicit file is an
    error.
    """
    if settings_path is not None:
        return JsonSettings(settings_path)
    default_path = get_default_settings_path()
    if not default_path.exists():
        logger.debug("No settings file at {}; using defaults", default_path)
        return None
    return JsonSettings(default_path)


def load_config(settings: JsonSettings | None = None) -> TrashConfig:
    """Build the process-wide `TrashConfig` from `settings`.

    Keys: ``trash.dir_name``, ``trash.escape_char``, ``trash.convention``
    (``"drive"`` or ``"home"``) and ``trash.home_root``.

    Raises:
        ValueError: A setting has an invalid value.
    """
    if settings is None:
        return TrashConfig()
    raw_convention = settings.get("trash.convention")
    convention = (
        RootConvention(str(raw_convention).lower()) if raw_convention else default_convention()
    )
    config = TrashConfig(
        trash_dir_name=str(settings.get("trash.dir_name", "") or ""),
        escape_char=str(settings.get("trash.escape_char", "!")),
        convention=convention,
        home_root=str(settings.get("trash.home_root", "") or ""),
    )
    logger.info(
        "Trash config: name={} escape={} convention={} home_root={}",
        config.trash_dir_name,
        config.escape_char,
        config.convention.value,
        config.home_root,
    )
    return config
