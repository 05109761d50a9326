"""Console table summarizing sorted images and their colors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from color_sort_grid.constants import (
    DISPLAY_LUMA_DECIMALS,
    DISPLAY_PERCENT_DECIMALS,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from color_sort_grid.type_defs import ImageRecord, SortParameter

SORT_MARKER = " ▲"

_COLUMNS: tuple[tuple[str, SortParameter], ...] = (
    ("Hue", "hue"),
    ("Saturation", "saturation"),
    ("Value", "value"),
    ("Luma", "luma"),
)


def _header(title: str, key: SortParameter, active: SortParameter) -> str:
    return f"{title}{SORT_MARKER}" if key == active else title


def build_report_table(
    records: Sequence[ImageRecord],
    parameter: SortParameter,
) -> Table:
    """
    Build a table listing each record in order.

    Color columns are only included when at least one record has color
    info. The column matching the active sort parameter is marked.
    """
    show_colors = any(r.color_info is not None for r in records)
    table = Table(title=f"Images sorted by {parameter}")

    table.add_column("#", justify="right")
    table.add_column(_header("Filename", "filename", parameter))
    if show_colors:
        for title, key in _COLUMNS:
            table.add_column(_header(title, key, parameter), justify="right")
        table.add_column("Color")

    for position, record in enumerate(records, start=1):
        row: list[str | Text] = [str(position), record.filename]
        info = record.color_info
        if show_colors and info is None:
            row.extend(["", "", "", "", ""])
        elif show_colors and info is not None:
            row.extend([
                f"{info.hue}°",
                f"{info.saturation:.{DISPLAY_PERCENT_DECIMALS}f}%",
                f"{info.value:.{DISPLAY_PERCENT_DECIMALS}f}%",
                f"{info.luma:.{DISPLAY_LUMA_DECIMALS}f}",
                Text(f"  #{info.color_hex}",
                     style=Style(bgcolor=f"#{info.color_hex}")),
            ])
        table.add_row(*row)
    return table


def print_report(
    records: Sequence[ImageRecord],
    parameter: SortParameter,
    console: Console | None = None,
) -> None:
    """Print the sorted-image table to the terminal."""
    (console or Console()).print(build_report_table(records, parameter))
