from __future__ import annotations

import stat
from pathlib import Path

import pytest

from reco.utils.fs import ensure_directory, format_bytes, unique_path


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 B"),
        (999, "999 B"),
        (1000, "1.0 kB"),
        (1500, "1.5 kB"),
        (1_500_000, "1.5 MB"),
        (2_000_000_000, "2.0 GB"),
        (3 * 10**18, "3.0 EB"),
    ],
)
def test_format_bytes(size: int, expected: str) -> None:
    assert format_bytes(size) == expected


def test_ensure_directory_is_idempotent_and_traversable(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"
    assert ensure_directory(target) == target
    assert ensure_directory(target) == target
    mode = target.stat().st_mode
    assert mode & stat.S_IRWXU == stat.S_IRWXU


def test_unique_path(tmp_path: Path) -> None:
    base = tmp_path / "a.jpg"
    assert unique_path(base) == base
    base.write_bytes(b"x")
    assert unique_path(base) == tmp_path / "a_1.jpg"
