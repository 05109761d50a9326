"""
Constants used internally by the color sort grid tool.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Input discovery (compared case-insensitively)
SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png")

# Luma weights applied to 0-255 RGB channels
LUMA_WEIGHTS = (0.3, 0.59, 0.11)

# Hue wheel
HUE_DEGREES = 360
HUE_SECTOR_DEGREES = 60
HUE_SECTORS = 6

# Side length of the block grid used by the mosaic visualization
MOSAIC_GRID_SIZE = 4

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_MODE_RGBA = "RGBA"
COLOR_MODE_GREY = "L"
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Output
OUTPUT_FILES_SENTINEL = "files"
OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
OUTPUT_DEFAULT_PREFIX = "sorted"
OUTPUT_DEFAULT_SUFFIX = ".png"
# Formats Pillow cannot write with an alpha channel
ALPHA_UNSUPPORTED_SUFFIXES = (".jpg", ".jpeg")

# Display precision for the console report
DISPLAY_PERCENT_DECIMALS = 1
DISPLAY_LUMA_DECIMALS = 2
