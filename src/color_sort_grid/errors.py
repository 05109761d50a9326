"""
Exception types raised by the color sort grid pipeline.

Each error derives from the built-in exception callers would otherwise
expect (``FileNotFoundError``, ``OSError``, ``ValueError``) and from a
shared marker base so the CLI can report every pipeline failure the same
way. None of them are recovered internally; every one ends the run.
"""

from __future__ import annotations


class ColorSortGridError(Exception):
    """Marker base for failures that abort a sorting run."""


class NoImagesFoundError(ColorSortGridError, FileNotFoundError):
    """The input directory holds no supported image files."""


class ImageDecodeError(ColorSortGridError, OSError):
    """A single input file could not be read or decoded."""

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(message)
        self.filename = filename


class OutputWriteError(ColorSortGridError, OSError):
    """The composite canvas or a sequence file could not be written."""


class GridOverflowError(ColorSortGridError, ValueError):
    """More images were supplied than the requested grid can hold."""
