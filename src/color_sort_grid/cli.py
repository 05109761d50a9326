"""CLI argument parsing and main entry point."""

import argparse
import locale
import sys
from pathlib import Path

from pydantic import ValidationError

import color_sort_grid.config as csg_config
import color_sort_grid.main as csg_main
from color_sort_grid.config_defaults import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OVERFLOW,
    DEFAULT_SORT_ORDER,
    DEFAULT_SORT_PARAMETER,
    DEFAULT_VISUALIZATION_MODE,
)
from color_sort_grid.constants import OUTPUT_FILES_SENTINEL
from color_sort_grid.errors import ColorSortGridError
from color_sort_grid.logging_utils import logger
from color_sort_grid.runtime.version import resolve_project_version
from color_sort_grid.type_defs import VisualizationMode

SORT_ORDER_CHOICES = ("row-major", "column-major")
SORT_PARAMETER_CHOICES = ("filename", "hue", "saturation", "value", "luma")
OVERFLOW_CHOICES = ("truncate", "warn", "fail", "grow")


def positive_int(text: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = f"expected an integer, got {text!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    if value < 1:
        msg = f"expected a positive integer, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description=(
            "Sort a directory of images by their dominant color and "
            "arrange them in a grid"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Examples:\n"
            f"python {Path(__file__).name} -i ./images\n"
            f"python {Path(__file__).name} -i ./images -r 4 -s row-major "
            f"-p luma -o grid.png\n"
            f"python {Path(__file__).name} -i ./images -v dominant "
            f"-o {OUTPUT_FILES_SENTINEL}\n\n"
            "Note:\n"
            f"  Use -o {OUTPUT_FILES_SENTINEL} to write every sorted image "
            "to its own numbered file instead of a grid"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    inputs = p.add_argument_group("input")
    inputs.add_argument(
        "--inputDirectory", "-i", dest="input_directory", type=str,
        help=f"Directory of .jpg/.png images (default: {DEFAULT_INPUT_DIR})",
        default=argparse.SUPPRESS)
    inputs.add_argument(
        "--greyscale", "-g", dest="greyscale", action="store_true",
        help="Convert images to greyscale before analysis and rendering",
        default=argparse.SUPPRESS)

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--numRows", "-r", dest="rows", type=positive_int,
        help="Number of rows in the output grid",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--numColumns", "-c", dest="columns", type=positive_int,
        help="Number of columns in the output grid",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--pxPerImage", "-px", dest="px_per_image", type=positive_int,
        help=(
            "Side length in pixels of each grid cell. Defaults to the "
            "smallest width or height among the input images"
        ),
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--sortOrder", "-s", dest="sort_order", choices=SORT_ORDER_CHOICES,
        help=f"Grid traversal order (default: {DEFAULT_SORT_ORDER})",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--overflow", dest="overflow", choices=OVERFLOW_CHOICES,
        help=(
            "What to do when --numRows and --numColumns leave too few cells "
            f"(default: {DEFAULT_OVERFLOW})"
        ),
        default=argparse.SUPPRESS)

    sorting = p.add_argument_group("sorting")
    sorting.add_argument(
        "--sortParameter", "-p", dest="sort_parameter",
        choices=SORT_PARAMETER_CHOICES,
        help=f"Attribute to sort by (default: {DEFAULT_SORT_PARAMETER})",
        default=argparse.SUPPRESS)

    output = p.add_argument_group("output")
    output.add_argument(
        "--outputFilename", "-o", dest="output_filename", type=str,
        help=(
            "Output image path, or 'files' for one numbered file per image. "
            "Defaults to a timestamped name under ./output"
        ),
        default=argparse.SUPPRESS)
    output.add_argument(
        "--visualizationMode", "-v", dest="visualization_mode",
        choices=[mode.value for mode in VisualizationMode],
        help=(
            "How each image is drawn in its cell "
            f"(default: {DEFAULT_VISUALIZATION_MODE.value})"
        ),
        default=argparse.SUPPRESS)
    output.add_argument(
        "--no-table", dest="show_table", action="store_false",
        help="Do not print the sorted image table",
        default=argparse.SUPPRESS)

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without processing images")

    return p


def log_parameters(
    cfg: csg_config.GridSortConfig,
    args: argparse.Namespace,
) -> None:
    """Log the effective run parameters."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Input Directory: %s", cfg.input.directory)
    logger.info("Greyscale: %s",
                "Enabled" if cfg.input.greyscale else "Disabled")
    logger.info("Rows: %s", cfg.layout.rows or "auto")
    logger.info("Columns: %s", cfg.layout.columns or "auto")
    logger.info("Pixels Per Image: %s", cfg.layout.px_per_image or "auto")
    logger.info("Sort Order: %s", cfg.layout.sort_order)
    logger.info("Sort Parameter: %s", cfg.sort.parameter)
    logger.info("Visualization Mode: %s", cfg.output.visualization_mode.value)
    logger.info("Output: %s", cfg.output.filename or "(timestamped)")


def run_from_args(args: argparse.Namespace) -> list[Path]:
    """Run a sorting job from command-line arguments."""
    base_cfg: csg_config.GridSortConfig | None = None
    if args.config:
        base_cfg = csg_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = csg_config.build_config_from_cli(vars(args), base_config=base_cfg)
    log_parameters(cfg, args)
    return csg_main.sort_images(cfg)


def setup_collation_locale() -> None:
    """Use the user's locale for filename collation."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("Falling back to default collation: %s", exc)


def main() -> None:
    """Run the command-line interface and report failures."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args()
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")

    setup_collation_locale()
    try:
        run_from_args(args)
    except (ColorSortGridError, ValidationError, FileNotFoundError,
            ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
