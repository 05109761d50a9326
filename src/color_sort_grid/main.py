"""Top-level orchestration for reading, sorting and compositing images."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from tqdm import tqdm

import color_sort_grid.image_io as csg_image_io
import color_sort_grid.runtime as csg_runtime
from color_sort_grid.color import extract_color_info
from color_sort_grid.image_grid import (
    composite,
    is_sequence_output,
    normalize_image,
    resolve_grid_path,
)
from color_sort_grid.layout import GridLayout, resolve_layout
from color_sort_grid.logging_utils import logger
from color_sort_grid.report import print_report
from color_sort_grid.sorting import sort_records
from color_sort_grid.type_defs import ImageRecord

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image

    from color_sort_grid.config import GridSortConfig
    from color_sort_grid.type_defs import SortOrder, VisualizationMode


def read_image_record(
    path: Path,
    *,
    greyscale: bool,
    extract_colors: bool,
) -> ImageRecord:
    """Decode one file and, if requested, extract its dominant color."""
    img = csg_image_io.load_image(path)
    if greyscale:
        img = csg_image_io.apply_greyscale(img)
    color_info = extract_color_info(img) if extract_colors else None
    return ImageRecord(filename=path.name, image=img, color_info=color_info)


def read_image_records(
    paths: Sequence[Path],
    *,
    greyscale: bool = False,
    extract_colors: bool = True,
) -> list[ImageRecord]:
    """
    Read every input file before any later stage runs.

    Files are processed one after another; the first decode failure
    aborts the whole run. The returned list always holds one record per
    input path.
    """
    records: list[ImageRecord] = []
    for path in tqdm(paths, desc="Reading images", unit="img", leave=False):
        logger.info("Processing '%s'...", path.name)
        records.append(
            read_image_record(
                path,
                greyscale=greyscale,
                extract_colors=extract_colors,
            ),
        )

    if len(records) != len(paths):  # pragma: no cover
        msg = f"Read {len(records)} of {len(paths)} images"
        raise RuntimeError(msg)
    return records


def normalize_records(
    records: Sequence[ImageRecord],
    mode: VisualizationMode,
    cell_size: int,
) -> list[ImageRecord]:
    """Attach a cell-sized rendering to every record."""
    return [
        replace(
            record,
            normalized=normalize_image(
                record.image,
                record.color_info,
                mode,
                cell_size,
            ),
        )
        for record in records
    ]


def _cells(records: Sequence[ImageRecord]) -> list[Image.Image]:
    cells: list[Image.Image] = []
    for record in records:
        if record.normalized is None:
            msg = f"Record '{record.filename}' has not been normalized"
            raise ValueError(msg)
        cells.append(record.normalized)
    return cells


def build_grid(
    records: Sequence[ImageRecord],
    layout: GridLayout,
    sort_order: SortOrder,
) -> Image.Image:
    """Composite normalized, already sorted records into one canvas."""
    return composite(_cells(records), layout, sort_order)


def prepare_records(
    config: GridSortConfig,
) -> tuple[list[ImageRecord], GridLayout]:
    """
    Run every stage up to and including sorting.

    Returns the sorted, normalized records and the resolved layout.
    """
    paths = csg_image_io.list_image_files(config.input.directory)
    logger.info("Found %d images in %s", len(paths), config.input.directory)

    records = read_image_records(
        paths,
        greyscale=config.input.greyscale,
        extract_colors=csg_runtime.needs_color_info(config),
    )

    layout = resolve_layout(
        len(records),
        rows=config.layout.rows,
        columns=config.layout.columns,
        cell_size=config.layout.px_per_image,
        image_sizes=[record.image.size for record in records],
        sort_order=config.layout.sort_order,
        overflow=config.layout.overflow,
    )
    logger.info("Grid: %d rows x %d columns, %dpx cells",
                layout.rows, layout.columns, layout.cell_size)

    records = normalize_records(
        records,
        config.output.visualization_mode,
        layout.cell_size,
    )
    return sort_records(records, config.sort.parameter), layout


def sort_images(config: GridSortConfig) -> list[Path]:
    """
    Top level entry point: sort a directory of images into a grid.

    Returns the path of the composite image, or the paths of every file
    written when sequence output is selected.
    """
    csg_runtime.validate_output_filename(config.output.filename)

    ordered, layout = prepare_records(config)

    if config.output.show_table:
        print_report(ordered, config.sort.parameter)

    if is_sequence_output(config.output.filename):
        return csg_runtime.save_sequence(
            _cells(ordered),
            [Path(record.filename).suffix for record in ordered],
            Path(config.output.files_directory),
        )

    canvas = build_grid(ordered, layout, config.layout.sort_order)
    return [
        csg_runtime.save_grid(
            canvas,
            resolve_grid_path(config.output.filename),
        ),
    ]
