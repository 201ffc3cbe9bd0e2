"""Tests for expanding hashing inputs into file references."""

import os
from pathlib import Path

import pytest

from asset_hasher.core.file_reference import BufferReference, PathReference
from asset_hasher.services.file_discovery import iter_file_references, walk_directory


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "b" / "d").mkdir(parents=True)
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b" / "c.txt").write_text("c")
    (tmp_path / "b" / "d" / "e.txt").write_text("e")
    (tmp_path / "f.txt").write_text("f")
    return tmp_path


def _relative(refs, root: Path) -> list[str]:
    return [ref.path.relative_to(root).as_posix() for ref in refs]


class TestWalkDirectory:
    def test_depth_first_sorted_order(self, tree: Path):
        assert _relative(walk_directory(tree), tree) == [
            "a.txt",
            "b/c.txt",
            "b/d/e.txt",
            "f.txt",
        ]

    def test_deep_nesting(self, tmp_path: Path):
        current = tmp_path
        for i in range(60):
            current = current / f"level{i}"
        current.mkdir(parents=True)
        (current / "deep.txt").write_text("deep")

        refs = list(walk_directory(tmp_path))

        assert len(refs) == 1
        assert refs[0].path.name == "deep.txt"

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlinks_are_skipped(self, tree: Path):
        (tree / "link.txt").symlink_to(tree / "a.txt")
        assert "link.txt" not in _relative(walk_directory(tree), tree)


class TestIterFileReferences:
    def test_single_file(self, tree: Path):
        refs = list(iter_file_references(str(tree / "a.txt")))
        assert refs == [PathReference(tree / "a.txt")]

    def test_glob_pattern(self, tree: Path):
        refs = list(iter_file_references(str(tree / "*.txt")))
        assert _relative(refs, tree) == ["a.txt", "f.txt"]

    def test_recursive_glob(self, tree: Path):
        refs = list(iter_file_references(str(tree / "**" / "e.txt")))
        assert _relative(refs, tree) == ["b/d/e.txt"]

    def test_existing_path_with_glob_characters_is_literal(self, tree: Path):
        (tree / "a[1].txt").write_text("bracketed")

        refs = list(iter_file_references(str(tree / "a[1].txt")))

        assert refs == [PathReference(tree / "a[1].txt")]

    def test_missing_path_yields_nothing(self, tree: Path):
        assert list(iter_file_references(str(tree / "missing.txt"))) == []

    def test_mixed_inputs_preserve_order(self, tree: Path):
        buffer = BufferReference(tree / "virtual.txt", b"in memory")
        refs = list(
            iter_file_references([tree / "f.txt", buffer, str(tree / "b")])
        )

        assert refs[0] == PathReference(tree / "f.txt")
        assert refs[1] is buffer
        assert _relative(refs[2:], tree) == ["b/c.txt", "b/d/e.txt"]
