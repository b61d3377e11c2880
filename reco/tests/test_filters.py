from __future__ import annotations

from reco.filters import SizeGate, accepts_dimensions
from reco.models import ImageMetadata


def test_dimension_minimum_applies_to_each_axis() -> None:
    assert accepts_dimensions(ImageMetadata(300, 400), dimension_min=300, size_min=100000)
    assert not accepts_dimensions(ImageMetadata(299, 4000), dimension_min=300, size_min=100000)
    assert not accepts_dimensions(ImageMetadata(4000, 299), dimension_min=300, size_min=100000)


def test_pixel_count_minimum() -> None:
    assert accepts_dimensions(ImageMetadata(400, 250), dimension_min=0, size_min=100000)
    assert not accepts_dimensions(ImageMetadata(400, 249), dimension_min=0, size_min=100000)


def test_size_gate_uses_base_1000() -> None:
    gate = SizeGate(1)
    assert gate.min_bytes == 1_000_000
    assert not gate.accepts(999_999)
    assert gate.accepts(1_000_000)


def test_size_gate_zero_accepts_empty_files() -> None:
    assert SizeGate(0).accepts(0)
