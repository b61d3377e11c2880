from __future__ import annotations

from pathlib import Path

import pytest

from reco.errors import RootMissing, RootUnreadable
from reco.patterns import PatternMatcher
from reco.scanner import FileScanner, check_root


@pytest.fixture()
def source_tree(tmp_path: Path) -> Path:
    root = tmp_path / "in"
    (root / "2011" / "deep").mkdir(parents=True)
    (root / "b.jpg").write_bytes(b"b")
    (root / "a.jpg").write_bytes(b"a")
    (root / "notes.txt").write_text("n", encoding="utf-8")
    (root / "2011" / "c.jpg").write_bytes(b"c")
    (root / "2011" / "deep" / "d.mov").write_bytes(b"d")
    (root / "folder.jpg").mkdir()
    return root


def names(paths: list[Path]) -> list[str]:
    return [p.name for p in paths]


def test_flat_scan_lists_only_children(source_tree: Path) -> None:
    scanner = FileScanner(PatternMatcher.from_string("*.jpg,*.mov"), recursive=False)
    found = list(scanner.scan(source_tree))
    assert names(found) == ["a.jpg", "b.jpg"]
    assert all(p.parent == source_tree for p in found)


def test_recursive_scan_walks_subtree_in_lexical_order(source_tree: Path) -> None:
    scanner = FileScanner(PatternMatcher.from_string("*.jpg,*.mov"), recursive=True)
    found = list(scanner.scan(source_tree))
    assert names(found) == ["c.jpg", "d.mov", "a.jpg", "b.jpg"]


def test_path_matching_several_patterns_is_yielded_once(source_tree: Path) -> None:
    scanner = FileScanner(PatternMatcher.from_string("*.jpg,*a.jpg,*"), recursive=True)
    found = list(scanner.scan(source_tree))
    assert len(found) == len(set(found))
    assert names(found).count("a.jpg") == 1


def test_recursive_mode_matches_full_path(source_tree: Path) -> None:
    scanner = FileScanner(PatternMatcher.from_string("*/2011/*.jpg"), recursive=True)
    assert names(list(scanner.scan(source_tree))) == ["c.jpg"]


def test_directories_are_never_candidates(source_tree: Path) -> None:
    scanner = FileScanner(PatternMatcher.from_string("*.jpg"), recursive=False)
    assert "folder.jpg" not in names(list(scanner.scan(source_tree)))


def test_unlistable_root_is_fatal(tmp_path: Path) -> None:
    not_a_dir = tmp_path / "file.bin"
    not_a_dir.write_bytes(b"x")
    scanner = FileScanner(PatternMatcher.from_string("*"))
    with pytest.raises(RootUnreadable):
        list(scanner.scan(not_a_dir))


def test_check_root(tmp_path: Path) -> None:
    assert check_root(tmp_path) == tmp_path
    with pytest.raises(RootMissing):
        check_root(tmp_path / "missing")
    regular = tmp_path / "regular.txt"
    regular.write_text("x", encoding="utf-8")
    with pytest.raises(RootMissing):
        check_root(regular)
