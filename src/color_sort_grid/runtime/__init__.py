"""Runtime utilities for output, validation, and version helpers."""

from .output import (
    save_grid,
    save_image,
    save_sequence,
    setup_output_directory,
)
from .validation import needs_color_info, validate_output_filename
from .version import resolve_project_version

__all__ = [
    "needs_color_info",
    "resolve_project_version",
    "save_grid",
    "save_image",
    "save_sequence",
    "setup_output_directory",
    "validate_output_filename",
]
