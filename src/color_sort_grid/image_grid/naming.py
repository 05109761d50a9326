"""Path helpers for grid and image-sequence outputs."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from color_sort_grid.config_defaults import DEFAULT_OUTPUT_DIR
from color_sort_grid.constants import (
    OUTPUT_DEFAULT_PREFIX,
    OUTPUT_DEFAULT_SUFFIX,
    OUTPUT_FILES_SENTINEL,
    OUTPUT_TIMESTAMP_FORMAT,
)


def is_sequence_output(output_filename: str | None) -> bool:
    """Return True when the output name requests one file per image."""
    return output_filename == OUTPUT_FILES_SENTINEL


def default_grid_name(
    out_dir: Path = Path(DEFAULT_OUTPUT_DIR),
    now: datetime | None = None,
) -> Path:
    """Build a timestamped filename for a composite grid."""
    stamp = (now or datetime.now()).strftime(OUTPUT_TIMESTAMP_FORMAT)
    return out_dir / f"{OUTPUT_DEFAULT_PREFIX}_{stamp}{OUTPUT_DEFAULT_SUFFIX}"


def resolve_grid_path(output_filename: str | None) -> Path:
    """Return the composite output path, generating one when unset."""
    if output_filename:
        return Path(output_filename)
    return default_grid_name()


def sequence_names(suffixes: list[str]) -> list[str]:
    """
    Return 1-indexed, zero-padded names for an ordered image sequence.

    The padding width is the number of digits in the total count, so
    names sort lexicographically in sequence order. Each name keeps the
    suffix given for its position.
    """
    width = len(str(len(suffixes)))
    return [
        f"{index:0{width}d}{suffix.lower()}"
        for index, suffix in enumerate(suffixes, start=1)
    ]
