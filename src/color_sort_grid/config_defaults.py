"""Shared default values for user-facing configuration settings."""
from color_sort_grid.type_defs import (
    OverflowPolicy,
    SortOrder,
    SortParameter,
    VisualizationMode,
)

# Input
DEFAULT_INPUT_DIR = "./images"
DEFAULT_GREYSCALE = False

# Layout
DEFAULT_SORT_ORDER: SortOrder = "column-major"
DEFAULT_OVERFLOW: OverflowPolicy = "warn"

# Sorting
DEFAULT_SORT_PARAMETER: SortParameter = "hue"

# Output
DEFAULT_VISUALIZATION_MODE = VisualizationMode.NORMAL
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_FILES_DIR = "output/sorted"
DEFAULT_SHOW_TABLE = True
