from __future__ import annotations

from pathlib import Path

import pytest

from helpers import RecordingObserver, ScriptedConfirmer
from trashcan.core.models import RootConvention, TrashConfig
from trashcan.infrastructure.trash_service import TrashService


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """A home-style volume root laid out as ``<tmp>/home/alice``."""
    root = tmp_path / "home"
    (root / "alice").mkdir(parents=True)
    return root


@pytest.fixture
def config(home: Path) -> TrashConfig:
    return TrashConfig(
        trash_dir_name=".TRASHCAN",
        convention=RootConvention.HOME,
        home_root=str(home),
    )


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def confirmer() -> ScriptedConfirmer:
    return ScriptedConfirmer(answer=True)


@pytest.fixture
def service(config, observer, confirmer) -> TrashService:
    return TrashService(config, observer=observer, confirmer=confirmer)
