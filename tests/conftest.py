"""Shared test fixtures for DummyFiles."""

from pathlib import Path

import pytest

from dummyfiles_core.config.models import DummyFilesConfig

# Relative paths of the sample files. Append only: tests index into this list.
STANDARD_FILES = [
    "dir1/file1.txt",
    "dir1/file2.txt",
    "dir3/srcfile1.c",
    "dir3/srcfile2.c",
    "backup/dir1/file1.txt",
    "backup/dir1/file1~2.txt",
    "backup/dir1/out_2018_08_12.txt",
    "My Files/file1~2.txt",
    "My Files/Music/The Title of the Song.mp3",
    "My Files/Music/The Oneders - That Other Thing.mp3",
    "My Files/Videos/An Interesting Movie.mkv",
]

# Directories that hold nothing; an easy thing for a tree comparison to miss.
EMPTY_DIRS = [
    "dir2",
    "My Files/Videos/TV",
]


def create_sample_tree(root: Path, include_empty: bool = True) -> Path:
    """Create the standard sample tree under *root*.

    Each file's content is its own relative path, so the tree is also a
    valid mirror.
    """
    for rel in STANDARD_FILES:
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(str(Path(rel)).encode("latin-1"))
    if include_empty:
        for rel in EMPTY_DIRS:
            (root / rel).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def sample_trees(tmp_path):
    """Two identical sample trees, ``one`` and ``two``."""
    one = create_sample_tree(tmp_path / "one")
    two = create_sample_tree(tmp_path / "two")
    return one, two


@pytest.fixture
def sample_tree(tmp_path):
    return create_sample_tree(tmp_path / "sample")


@pytest.fixture
def sample_config():
    return DummyFilesConfig()


@pytest.fixture
def failing_iterdir(monkeypatch):
    """Make listing any directory with the given name raise PermissionError."""

    def _install(name: str) -> None:
        original = Path.iterdir

        def fake_iterdir(self):
            if self.name == name:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self)

        monkeypatch.setattr(Path, "iterdir", fake_iterdir)

    return _install
