"""Per-cell rendering primitives for the sorted image grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from PIL import Image, ImageOps

from color_sort_grid.constants import COLOR_MODE_RGB, MOSAIC_GRID_SIZE
from color_sort_grid.type_defs import VisualizationMode

if TYPE_CHECKING:  # pragma: no cover
    from color_sort_grid.color import ColorInfo


def to_rgb(img: Image.Image) -> Image.Image:
    """Convert PIL image to RGB unless it already is."""
    if img.mode == COLOR_MODE_RGB:
        return img
    return img.convert(COLOR_MODE_RGB)


def cover_crop(img: Image.Image, cell_size: int) -> Image.Image:
    """
    Scale and center-crop an image to an exact square.

    The image is scaled so it covers the whole cell and any excess along
    the longer side is trimmed equally from both ends, so the result never
    has empty borders.
    """
    return ImageOps.fit(
        to_rgb(img),
        (cell_size, cell_size),
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )


def mosaic(
    img: Image.Image,
    cell_size: int,
    grid_size: int = MOSAIC_GRID_SIZE,
) -> Image.Image:
    """Average the image into grid_size blocks and enlarge them unblended."""
    blocks = to_rgb(img).resize((grid_size, grid_size), Image.Resampling.BOX)
    return blocks.resize((cell_size, cell_size), Image.Resampling.NEAREST)


def swatch(color_info: ColorInfo | None, cell_size: int) -> Image.Image:
    """Return a cell filled uniformly with the dominant color."""
    if color_info is None:
        msg = "Dominant visualization requires extracted color info"
        raise ValueError(msg)
    return Image.new(COLOR_MODE_RGB, (cell_size, cell_size), color_info.rgb)


def normalize_image(
    img: Image.Image,
    color_info: ColorInfo | None,
    mode: VisualizationMode,
    cell_size: int,
) -> Image.Image:
    """
    Render one image as a cell_size square for the given mode.

    Args:
        img: Decoded source image.
        color_info: Dominant color; only required by the dominant mode.
        mode: Visualization mode.
        cell_size: Side length of the output square in pixels.

    Returns:
        A new RGB image of size (cell_size, cell_size).

    """
    if cell_size < 1:
        msg = f"Cell size must be positive, got {cell_size}"
        raise ValueError(msg)

    match mode:
        case VisualizationMode.NORMAL:
            return cover_crop(img, cell_size)
        case VisualizationMode.MOSAIC:
            return mosaic(img, cell_size)
        case VisualizationMode.DOMINANT:
            return swatch(color_info, cell_size)
        case _:  # pragma: no cover
            assert_never(mode)
