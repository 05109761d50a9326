"""
Grid utilities split into cell primitives, layouts, and naming helpers.

The package exposes the most commonly used entry points directly.
"""

from __future__ import annotations

from . import core, layouts, naming
from .core import (
    cover_crop,
    mosaic,
    normalize_image,
    swatch,
    to_rgb,
)
from .layouts import (
    cell_position,
    composite,
    iter_cell_origins,
    new_canvas,
)
from .naming import (
    default_grid_name,
    is_sequence_output,
    resolve_grid_path,
    sequence_names,
)

__all__ = [
    "cell_position",
    "composite",
    "core",
    "cover_crop",
    "default_grid_name",
    "is_sequence_output",
    "iter_cell_origins",
    "layouts",
    "mosaic",
    "naming",
    "new_canvas",
    "normalize_image",
    "resolve_grid_path",
    "sequence_names",
    "swatch",
    "to_rgb",
]
