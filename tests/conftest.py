"""
Test configuration and shared fixtures for color_sort_grid.

This module defines reusable pytest fixtures for building solid-color
images, populated input directories, and configuration objects. These
fixtures support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from color_sort_grid.config import GridSortConfig
from color_sort_grid.constants import COLOR_MODE_RGB

# name -> color, chosen so hue, luma and filename orders all differ
SAMPLE_COLORS: dict[str, tuple[int, int, int]] = {
    "c_blue.png": (0, 0, 255),
    "a_green.png": (0, 255, 0),
    "b_red.png": (255, 0, 0),
    "d_grey.jpg": (128, 128, 128),
}


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new(COLOR_MODE_RGB, (100, 100), color="red")


@pytest.fixture
def make_image_file(
    tmp_path: Path,
) -> Callable[..., Path]:
    """Write a solid-color image of the given size and return its path."""

    def _make(
        name: str,
        color: tuple[int, int, int] = (255, 0, 0),
        size: tuple[int, int] = (32, 32),
        directory: Path | None = None,
    ) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        Image.new(COLOR_MODE_RGB, size, color).save(path)
        return path

    return _make


@pytest.fixture
def image_dir(
    tmp_path: Path,
    make_image_file: Callable[..., Path],
) -> Path:
    """Provide a directory holding the SAMPLE_COLORS images."""
    directory = tmp_path / "images"
    for name, color in SAMPLE_COLORS.items():
        make_image_file(name, color, directory=directory)
    (directory / "README.md").write_text("not an image", encoding="utf-8")
    return directory


@pytest.fixture
def make_grid_config(
    tmp_path: Path,
    image_dir: Path,
) -> Callable[..., GridSortConfig]:
    """
    Build GridSortConfig instances with optional section overrides.

    Defaults point input at ``image_dir``, output into tmp_path, and
    disable the console table to keep test output quiet.
    """

    def _build(
        *,
        input: dict[str, Any] | None = None,  # noqa: A002
        layout: dict[str, Any] | None = None,
        sort: dict[str, Any] | None = None,
        output: dict[str, Any] | None = None,
    ) -> GridSortConfig:
        effective_input = {"directory": str(image_dir), **(input or {})}
        effective_output = {
            "filename": str(tmp_path / "out" / "grid.png"),
            "files_directory": str(tmp_path / "out" / "sorted"),
            "show_table": False,
            **(output or {}),
        }
        return GridSortConfig.model_validate({
            "input": effective_input,
            "layout": dict(layout or {}),
            "sort": dict(sort or {}),
            "output": effective_output,
        })

    return _build
