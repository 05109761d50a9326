"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from color_sort_grid.image_grid.naming import is_sequence_output
from color_sort_grid.type_defs import VisualizationMode

if TYPE_CHECKING:  # pragma: no cover
    from color_sort_grid.config import GridSortConfig


def needs_color_info(config: GridSortConfig) -> bool:
    """
    Return True when the run must extract a dominant color per image.

    Filename sorting skips extraction, except in the dominant mode where
    the color is what gets drawn.
    """
    return (
        config.sort.parameter != "filename"
        or config.output.visualization_mode is VisualizationMode.DOMINANT
    )


def validate_output_filename(output_filename: str | None) -> None:
    """Ensure an explicit grid filename has an extension Pillow can write."""
    if not output_filename or is_sequence_output(output_filename):
        return
    suffix = Path(output_filename).suffix.lower()
    if suffix not in Image.registered_extensions():
        msg = (f"Unsupported output image extension '{suffix}' "
               f"for '{output_filename}'")
        raise ValueError(msg)
