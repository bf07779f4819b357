import pytest

from trashcan.core.codec import PathCodec
from trashcan.core.locator import TrashLocator
from trashcan.core.models import RootConvention, TrashConfig


@pytest.fixture
def locator() -> TrashLocator:
    config = TrashConfig(trash_dir_name="TRASHCAN", convention=RootConvention.HOME, home_root="/home")
    return TrashLocator(PathCodec(config))


def test_trash_dir_for(locator):
    assert locator.trash_dir_for("/home/alice/notes.txt") == "/home/TRASHCAN"


def test_direct_child_of_trash(locator):
    assert locator.is_inside_trash("/home/TRASHCAN/alice!notes.txt") == "/home/TRASHCAN"


def test_nested_entry_needs_subdirectory_flag(locator):
    nested = "/home/TRASHCAN/alice!proj/a.txt"
    assert locator.is_inside_trash(nested) is None
    assert locator.is_inside_trash(nested, include_subdirectories=True) == "/home/TRASHCAN"


def test_regular_paths_are_not_in_trash(locator):
    assert locator.is_inside_trash("/home/alice/notes.txt", True) is None
    assert locator.is_inside_trash("/home/TRASHCANX/a", True) is None


def test_trash_directory_is_not_inside_itself(locator):
    assert locator.is_inside_trash("/home/TRASHCAN", True) is None
    assert locator.is_trash_directory("/home/TRASHCAN")
    assert not locator.is_trash_directory("/home/alice")


def test_drive_style_recognized_under_home_convention(locator):
    assert locator.is_inside_trash("D:/TRASHCAN/work!a.txt") == "D:/TRASHCAN"
    assert locator.is_trash_directory("D:/TRASHCAN")
    assert locator.is_inside_trash("D:/work/a.txt") is None
