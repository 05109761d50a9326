"""
Defines shared type aliases, enums and records for the color sort grid.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

    from color_sort_grid.color import ColorInfo

SortOrder = Literal["row-major", "column-major"]
SortParameter = Literal["filename", "hue", "saturation", "value", "luma"]
OverflowPolicy = Literal["truncate", "warn", "fail", "grow"]
ImageSize = tuple[int, int]
CellPosition = tuple[int, int]

COLOR_SORT_PARAMETERS: tuple[SortParameter, ...] = (
    "hue",
    "saturation",
    "value",
    "luma",
)


class VisualizationMode(StrEnum):
    """How each image is rendered inside its grid cell."""

    NORMAL = "normal"
    MOSAIC = "4x4"
    DOMINANT = "dominant"


@dataclass(frozen=True, slots=True)
class ImageRecord:
    """One input file, its color description and its grid-ready form."""

    filename: str
    image: Image.Image
    color_info: ColorInfo | None = None
    normalized: Image.Image | None = None
