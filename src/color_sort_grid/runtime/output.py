"""Helpers for managing output locations and persisted artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from color_sort_grid.constants import (
    ALPHA_UNSUPPORTED_SUFFIXES,
    COLOR_MODE_RGB,
    SUPPORTED_EXTENSIONS,
)
from color_sort_grid.errors import OutputWriteError
from color_sort_grid.image_grid.naming import sequence_names
from color_sort_grid.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image


def setup_output_directory(output_path: str | Path) -> Path:
    """Create the output directory if needed and return it."""
    resolved_path = Path(output_path)
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Failed to create output directory '{resolved_path}': {exc}"
        raise OutputWriteError(msg) from exc
    return resolved_path


def save_image(img: Image.Image, path: Path) -> Path:
    """
    Write an image, creating parent directories as needed.

    Images with an alpha channel are flattened to RGB for formats that
    cannot store one.
    """
    setup_output_directory(path.parent)
    to_write = img
    if (
        path.suffix.lower() in ALPHA_UNSUPPORTED_SUFFIXES
        and img.mode != COLOR_MODE_RGB
    ):
        to_write = img.convert(COLOR_MODE_RGB)
    try:
        to_write.save(path)
    except (OSError, ValueError) as exc:
        msg = f"Failed to write image '{path}': {exc}"
        raise OutputWriteError(msg) from exc
    return path


def save_grid(canvas: Image.Image, path: Path) -> Path:
    """Persist the composite canvas."""
    save_image(canvas, path)
    logger.info("Grid image saved to: %s", path)
    return path


def clear_sequence_files(output_dir: Path) -> list[Path]:
    """
    Remove numbered images left in output_dir by an earlier sequence run.

    Only files named by digits with a supported image suffix are removed.
    """
    stale = sorted(
        p for p in output_dir.iterdir()
        if p.is_file()
        and p.stem.isdigit()
        and p.suffix.lower() in SUPPORTED_EXTENSIONS
    )
    for path in stale:
        try:
            path.unlink()
        except OSError as exc:
            msg = f"Failed to remove previous output '{path}': {exc}"
            raise OutputWriteError(msg) from exc
    if stale:
        logger.warning("Removed %d numbered image(s) from a previous run "
                       "in %s", len(stale), output_dir)
    return stale


def save_sequence(
    images: Sequence[Image.Image],
    suffixes: list[str],
    output_dir: Path,
) -> list[Path]:
    """
    Write each image to a sequentially numbered file in output_dir.

    Numbered images from an earlier run are cleared first so the folder
    holds exactly this run's sequence.
    """
    out_dir = setup_output_directory(output_dir)
    clear_sequence_files(out_dir)
    paths = [out_dir / name for name in sequence_names(suffixes)]
    for img, path in zip(images, paths, strict=True):
        save_image(img, path)
    logger.info("Wrote %d images to: %s", len(paths), out_dir)
    return paths
