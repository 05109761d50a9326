"""Ordering of image records by filename or color attribute."""

from __future__ import annotations

import locale
from typing import TYPE_CHECKING, Any

from color_sort_grid.type_defs import COLOR_SORT_PARAMETERS

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from color_sort_grid.type_defs import ImageRecord, SortParameter


def sort_key(parameter: SortParameter) -> Callable[[ImageRecord], Any]:
    """Return the key function used to sort records by a parameter."""
    if parameter == "filename":
        return lambda record: locale.strxfrm(record.filename)
    if parameter not in COLOR_SORT_PARAMETERS:
        msg = f"Unknown sort parameter: {parameter!r}"
        raise ValueError(msg)

    def color_key(record: ImageRecord) -> float:
        if record.color_info is None:
            msg = (f"Cannot sort '{record.filename}' by {parameter}: "
                   "no color info was extracted")
            raise ValueError(msg)
        return getattr(record.color_info, parameter)

    return color_key


def sort_records(
    records: Sequence[ImageRecord],
    parameter: SortParameter,
) -> list[ImageRecord]:
    """
    Return records sorted ascending by the given parameter.

    The sort is stable: records with equal keys keep their input order.
    """
    return sorted(records, key=sort_key(parameter))
