"""Public package exports for the color sort grid tool."""

from __future__ import annotations

from .color import ColorInfo, extract_color_info
from .config import GridSortConfig
from .layout import GridLayout, resolve_layout
from .main import build_grid, sort_images
from .sorting import sort_records
from .type_defs import ImageRecord, VisualizationMode

__all__ = [
    "ColorInfo",
    "GridLayout",
    "GridSortConfig",
    "ImageRecord",
    "VisualizationMode",
    "build_grid",
    "extract_color_info",
    "resolve_layout",
    "sort_images",
    "sort_records",
]
