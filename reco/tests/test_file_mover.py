from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest

from reco.config import DuplicateStrategy
from reco.errors import AlreadyExists, MoveFailed
from reco.journal import ActionJournal, load_manifest
from reco.mover import FileMover


@pytest.fixture()
def journal(tmp_path: Path):
    journal = ActionJournal(tmp_path / "reco.csv").open()
    yield journal
    journal.close()


def make_source(tmp_path: Path, name: str = "a.jpg", payload: bytes = b"pixels") -> Path:
    source_dir = tmp_path / "in"
    source_dir.mkdir(exist_ok=True)
    source = source_dir / name
    source.write_bytes(payload)
    return source


def test_move_creates_directories_and_records(tmp_path: Path, journal: ActionJournal) -> None:
    source = make_source(tmp_path)
    destination_dir = tmp_path / "out" / "photos" / "2011"
    result = FileMover(journal).move(source, destination_dir, size=6)

    assert result.performed
    assert result.destination == destination_dir / "a.jpg"
    assert result.destination.read_bytes() == b"pixels"
    assert not source.exists()
    journal.close()
    assert load_manifest(journal.path)[0].new == destination_dir / "a.jpg"


def test_dry_run_touches_nothing(tmp_path: Path) -> None:
    source = make_source(tmp_path)
    destination_dir = tmp_path / "out" / "photos"
    result = FileMover(None, dry_run=True).move(source, destination_dir)

    assert not result.performed
    assert source.exists()
    assert not destination_dir.exists()


def test_wet_run_requires_journal() -> None:
    with pytest.raises(ValueError):
        FileMover(None)


def test_existing_destination_is_not_clobbered(tmp_path: Path, journal: ActionJournal) -> None:
    source = make_source(tmp_path, payload=b"new")
    destination_dir = tmp_path / "out"
    destination_dir.mkdir()
    (destination_dir / "a.jpg").write_bytes(b"old")

    with pytest.raises(AlreadyExists):
        FileMover(journal).move(source, destination_dir)
    assert source.read_bytes() == b"new"
    assert (destination_dir / "a.jpg").read_bytes() == b"old"
    assert journal.entries == 0


def test_rename_strategy_adds_counter(tmp_path: Path, journal: ActionJournal) -> None:
    source = make_source(tmp_path, payload=b"new")
    destination_dir = tmp_path / "out"
    destination_dir.mkdir()
    (destination_dir / "a.jpg").write_bytes(b"old")
    (destination_dir / "a_1.jpg").write_bytes(b"older")

    result = FileMover(journal, strategy=DuplicateStrategy.RENAME).move(source, destination_dir)
    assert result.destination == destination_dir / "a_2.jpg"
    assert result.destination.read_bytes() == b"new"


def test_overwrite_strategy_replaces(tmp_path: Path, journal: ActionJournal) -> None:
    source = make_source(tmp_path, payload=b"new")
    destination_dir = tmp_path / "out"
    destination_dir.mkdir()
    (destination_dir / "a.jpg").write_bytes(b"old")

    FileMover(journal, strategy=DuplicateStrategy.OVERWRITE).move(source, destination_dir)
    assert (destination_dir / "a.jpg").read_bytes() == b"new"


def test_cross_device_rename_is_surfaced(tmp_path: Path, journal: ActionJournal, monkeypatch) -> None:
    source = make_source(tmp_path)

    def fail_rename(src, dst):
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    monkeypatch.setattr(os, "rename", fail_rename)
    with pytest.raises(MoveFailed, match="cross-device"):
        FileMover(journal).move(source, tmp_path / "out")
    assert source.exists()
    assert journal.entries == 0


def test_file_already_in_place_is_left_alone(tmp_path: Path, journal: ActionJournal) -> None:
    source = make_source(tmp_path)
    result = FileMover(journal).move(source, source.parent)
    assert not result.performed
    assert source.exists()
    assert journal.entries == 0
