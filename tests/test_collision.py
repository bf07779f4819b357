import os
from pathlib import Path

import pytest

from helpers import p, write_file
from trashcan.core.collision import resolve_free_name


def test_free_name_is_returned_unchanged(tmp_path: Path):
    assert resolve_free_name(p(tmp_path / "a!b.txt")) == p(tmp_path / "a!b.txt")


@pytest.mark.parametrize("existing", [1, 2, 5])
def test_nth_collision_gets_nth_suffix(tmp_path: Path, existing: int):
    candidate = tmp_path / "a!b.txt"
    write_file(candidate)
    for n in range(1, existing):
        write_file(tmp_path / f"a!b.txt.{n}")

    resolved = resolve_free_name(p(candidate))

    assert resolved == f"{p(candidate)}.{existing}"
    assert not os.path.lexists(resolved)


def test_directories_count_as_taken(tmp_path: Path):
    (tmp_path / "proj").mkdir()
    assert resolve_free_name(p(tmp_path / "proj")) == p(tmp_path / "proj") + ".1"


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="needs symlinks")
def test_dangling_symlink_counts_as_taken(tmp_path: Path):
    os.symlink(tmp_path / "missing", tmp_path / "link")
    assert resolve_free_name(p(tmp_path / "link")) == p(tmp_path / "link") + ".1"
