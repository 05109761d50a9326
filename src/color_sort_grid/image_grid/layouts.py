"""Placement of sorted cells onto the output canvas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

from color_sort_grid.constants import COLOR_MODE_RGBA, COLOR_TRANSPARENT
from color_sort_grid.image_grid.core import to_rgb

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator, Sequence

    from color_sort_grid.layout import GridLayout
    from color_sort_grid.type_defs import CellPosition, SortOrder


def cell_position(
    index: int,
    layout: GridLayout,
    sort_order: SortOrder,
) -> CellPosition:
    """
    Return the (row, column) cell for the image at a sorted index.

    Row-major fills each row left to right before moving down.
    Column-major fills each column top to bottom before moving right.
    """
    if sort_order == "row-major":
        return divmod(index, layout.columns)
    col, row = divmod(index, layout.rows)
    return row, col


def iter_cell_origins(
    count: int,
    layout: GridLayout,
    sort_order: SortOrder,
) -> Iterator[tuple[int, int]]:
    """Yield the pixel origin (x, y) of each filled cell in sorted order."""
    for index in range(min(count, layout.capacity)):
        row, col = cell_position(index, layout, sort_order)
        yield col * layout.cell_size, row * layout.cell_size


def new_canvas(layout: GridLayout) -> Image.Image:
    """Allocate a fully transparent canvas for the layout."""
    return Image.new(COLOR_MODE_RGBA, layout.canvas_size, COLOR_TRANSPARENT)


def composite(
    images: Sequence[Image.Image],
    layout: GridLayout,
    sort_order: SortOrder,
) -> Image.Image:
    """
    Paste sorted cell images onto a new canvas.

    Each image is written opaquely at its cell origin. Cells beyond the
    number of images stay transparent and images beyond the grid
    capacity are never placed.
    """
    canvas = new_canvas(layout)
    cell = (layout.cell_size, layout.cell_size)
    for img, origin in zip(
        images,
        iter_cell_origins(len(images), layout, sort_order),
        strict=False,
    ):
        if img.size != cell:
            msg = (f"Cell image is {img.size[0]}x{img.size[1]}, expected "
                   f"{cell[0]}x{cell[1]}")
            raise ValueError(msg)
        canvas.paste(to_rgb(img), origin)
    return canvas
