"""Image discovery, loading, and greyscale preprocessing."""
from __future__ import annotations

from pathlib import Path

from PIL import Image

from color_sort_grid.constants import (
    COLOR_MODE_GREY,
    COLOR_MODE_RGB,
    SUPPORTED_EXTENSIONS,
)
from color_sort_grid.errors import ImageDecodeError, NoImagesFoundError


def is_supported_image(path: Path) -> bool:
    """Return True for regular files with a supported image extension."""
    return path.is_file() and path.suffix.lower() in SUPPORTED_EXTENSIONS


def list_image_files(directory: str | Path) -> list[Path]:
    """
    List supported image files directly inside a directory.

    The scan is not recursive. Results are ordered by filename so a run
    over an unchanged directory always sees the same input order.

    Raises:
        NoImagesFoundError: If the directory is missing or holds no
            supported images.

    """
    input_dir = Path(directory)
    if not input_dir.is_dir():
        msg = f"Input directory not found: '{input_dir}'"
        raise NoImagesFoundError(msg)

    paths = sorted(
        (p for p in input_dir.iterdir() if is_supported_image(p)),
        key=lambda p: p.name,
    )
    if not paths:
        msg = (f"No images found in '{input_dir}'. Supported extensions: "
               f"{', '.join(SUPPORTED_EXTENSIONS)}")
        raise NoImagesFoundError(msg)
    return paths


def load_image(path: str | Path) -> Image.Image:
    """
    Load an image from a file path and convert to RGB.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGB mode, fully loaded into memory

    Raises:
        ImageDecodeError: If the file is missing or cannot be decoded

    """
    image_path = Path(path)
    try:
        with Image.open(image_path) as img:
            return img.convert(COLOR_MODE_RGB)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{image_path}'"
        raise ImageDecodeError(image_path.name, msg) from e
    except (OSError, Image.DecompressionBombError, ValueError) as e:
        msg = f"Error loading image '{image_path}': {e!s}"
        raise ImageDecodeError(image_path.name, msg) from e


def apply_greyscale(img: Image.Image) -> Image.Image:
    """Return a greyscale copy of the image, kept in RGB mode."""
    return img.convert(COLOR_MODE_GREY).convert(COLOR_MODE_RGB)
