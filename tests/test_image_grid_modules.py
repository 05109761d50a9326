"""Smoke tests covering the public image_grid naming helpers."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from color_sort_grid.image_grid import naming


def test_default_grid_name_is_timestamped(tmp_path: Path) -> None:
    path = naming.default_grid_name(tmp_path, datetime(2024, 3, 5, 7, 8, 9))
    assert path == tmp_path / "sorted_20240305-070809.png"


def test_resolve_grid_path_prefers_explicit_name() -> None:
    assert naming.resolve_grid_path("out/grid.png") == Path("out/grid.png")


def test_resolve_grid_path_generates_default() -> None:
    path = naming.resolve_grid_path(None)
    assert path.parent == Path("output")
    assert path.name.startswith("sorted_")
    assert path.suffix == ".png"


def test_is_sequence_output() -> None:
    assert naming.is_sequence_output("files") is True
    assert naming.is_sequence_output("files.png") is False
    assert naming.is_sequence_output(None) is False


def test_sequence_names_pad_to_total_width() -> None:
    names = naming.sequence_names([".png"] * 12)
    assert names[0] == "01.png"
    assert names[-1] == "12.png"


def test_sequence_names_keep_per_image_suffix() -> None:
    assert naming.sequence_names([".JPG", ".png"]) == ["1.jpg", "2.png"]
