"""Resolve grid rows, columns and cell size for a sorting run."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from color_sort_grid.config_defaults import DEFAULT_OVERFLOW, DEFAULT_SORT_ORDER
from color_sort_grid.errors import GridOverflowError
from color_sort_grid.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from color_sort_grid.type_defs import ImageSize, OverflowPolicy, SortOrder


@dataclass(frozen=True, slots=True)
class GridLayout:
    """Final grid dimensions; resolved once and never changed."""

    rows: int
    columns: int
    cell_size: int

    @property
    def capacity(self) -> int:
        """Return the number of cells in the grid."""
        return self.rows * self.columns

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Return the output canvas size as (width, height) in pixels."""
        return self.columns * self.cell_size, self.rows * self.cell_size


def _require_positive(name: str, value: int | None) -> None:
    if value is not None and value < 1:
        msg = f"{name} must be a positive integer, got {value}"
        raise ValueError(msg)


def grid_shape(
    num_images: int,
    rows: int | None = None,
    columns: int | None = None,
) -> tuple[int, int]:
    """
    Return (rows, columns) for the given image count and optional hints.

    Both hints are used as given. A single hint fixes that axis and the
    other is derived by ceiling division. Without hints the grid is the
    smallest square that holds every image.
    """
    if rows is not None and columns is not None:
        return rows, columns
    if rows is not None:
        return rows, math.ceil(num_images / rows)
    if columns is not None:
        return math.ceil(num_images / columns), columns
    side = math.ceil(math.sqrt(num_images))
    return side, side


def auto_cell_size(image_sizes: Sequence[ImageSize]) -> int:
    """Return the largest square side that fits inside every image."""
    if not image_sizes:
        msg = "Cannot detect a cell size without any image dimensions"
        raise ValueError(msg)
    return min(min(width, height) for width, height in image_sizes)


def _apply_overflow(
    num_images: int,
    rows: int,
    columns: int,
    *,
    sort_order: SortOrder,
    overflow: OverflowPolicy,
) -> tuple[int, int]:
    """Handle an explicit grid that is too small for every image."""
    capacity = rows * columns
    if capacity >= num_images:
        return rows, columns

    dropped = num_images - capacity
    match overflow:
        case "truncate":
            return rows, columns
        case "warn":
            logger.warning(
                "Grid %dx%d holds %d cells; %d trailing image(s) will be "
                "left out.",
                rows, columns, capacity, dropped,
            )
            return rows, columns
        case "fail":
            msg = (
                f"Grid {rows}x{columns} holds {capacity} cells but "
                f"{num_images} images were found"
            )
            raise GridOverflowError(msg)
        case "grow":
            if sort_order == "row-major":
                rows = math.ceil(num_images / columns)
            else:
                columns = math.ceil(num_images / rows)
            logger.info("Grid grown to %dx%d to fit %d images.",
                        rows, columns, num_images)
            return rows, columns
        case _:
            msg = f"Unknown overflow policy: {overflow!r}"
            raise ValueError(msg)


def resolve_layout(  # noqa: PLR0913
    num_images: int,
    *,
    rows: int | None = None,
    columns: int | None = None,
    cell_size: int | None = None,
    image_sizes: Sequence[ImageSize] = (),
    sort_order: SortOrder = DEFAULT_SORT_ORDER,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW,
) -> GridLayout:
    """
    Compute the grid layout for a run.

    Must be called after every image is decoded, because the automatic
    cell size depends on the dimensions of all inputs.

    Args:
        num_images: Number of images that will be placed.
        rows: Optional requested row count.
        columns: Optional requested column count.
        cell_size: Optional cell side in pixels, used verbatim.
        image_sizes: (width, height) of every input image.
        sort_order: Traversal order, used when growing an overfull grid.
        overflow: What to do when explicit rows and columns are too few.

    Returns:
        The immutable grid layout.

    Raises:
        ValueError: If a count or hint is not positive.
        GridOverflowError: If the grid is too small and overflow is "fail".

    """
    _require_positive("Image count", num_images)
    _require_positive("Rows", rows)
    _require_positive("Columns", columns)
    _require_positive("Cell size", cell_size)

    final_rows, final_columns = grid_shape(num_images, rows, columns)
    if rows is not None and columns is not None:
        final_rows, final_columns = _apply_overflow(
            num_images,
            final_rows,
            final_columns,
            sort_order=sort_order,
            overflow=overflow,
        )

    if cell_size is None:
        cell_size = auto_cell_size(image_sizes)
        logger.info("Auto-detected cell size: %dpx", cell_size)

    return GridLayout(rows=final_rows, columns=final_columns,
                      cell_size=cell_size)
