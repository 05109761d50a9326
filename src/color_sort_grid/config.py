"""
Configuration schema and loader for the color sort grid tool.

Defines frozen Pydantic models representing structured configuration
sections, a TOML-based config loader with validation support, and the
merge of command-line overrides on top of a loaded configuration.
"""

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field

from color_sort_grid.config_defaults import (
    DEFAULT_FILES_DIR,
    DEFAULT_GREYSCALE,
    DEFAULT_INPUT_DIR,
    DEFAULT_OVERFLOW,
    DEFAULT_SHOW_TABLE,
    DEFAULT_SORT_ORDER,
    DEFAULT_SORT_PARAMETER,
    DEFAULT_VISUALIZATION_MODE,
)
from color_sort_grid.type_defs import (
    OverflowPolicy,
    SortOrder,
    SortParameter,
    VisualizationMode,
)

_FROZEN = ConfigDict(frozen=True, extra="forbid")


class InputConfig(BaseModel):
    """Select where images are read from and how they are preprocessed."""

    model_config = _FROZEN

    directory: str = Field(DEFAULT_INPUT_DIR)
    greyscale: bool = DEFAULT_GREYSCALE


class LayoutConfig(BaseModel):
    """Control grid dimensions and traversal order."""

    model_config = _FROZEN

    rows: int | None = Field(None, ge=1)
    columns: int | None = Field(None, ge=1)
    px_per_image: int | None = Field(None, ge=1)
    sort_order: SortOrder = Field(DEFAULT_SORT_ORDER)
    overflow: OverflowPolicy = Field(DEFAULT_OVERFLOW)


class SortConfig(BaseModel):
    """Choose the attribute images are sorted by."""

    model_config = _FROZEN

    parameter: SortParameter = Field(DEFAULT_SORT_PARAMETER)


class OutputConfig(BaseModel):
    """Configure output destination, rendering mode and console report."""

    model_config = _FROZEN

    filename: str | None = None
    visualization_mode: VisualizationMode = Field(DEFAULT_VISUALIZATION_MODE)
    files_directory: str = Field(DEFAULT_FILES_DIR)
    show_table: bool = DEFAULT_SHOW_TABLE


class GridSortConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml. Instances are immutable once
    validated; overrides produce a new object.
    """

    model_config = _FROZEN

    input: InputConfig = Field(
        default_factory=lambda: InputConfig.model_validate({}),
    )
    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    sort: SortConfig = Field(
        default_factory=lambda: SortConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> GridSortConfig:
        """
        Load a configuration from a TOML file.

        Returns a validated GridSortConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return GridSortConfig.model_validate(doc.unwrap())


# CLI argument name -> (config section, field)
CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "input_directory": ("input", "directory"),
    "greyscale": ("input", "greyscale"),
    "rows": ("layout", "rows"),
    "columns": ("layout", "columns"),
    "px_per_image": ("layout", "px_per_image"),
    "sort_order": ("layout", "sort_order"),
    "overflow": ("layout", "overflow"),
    "sort_parameter": ("sort", "parameter"),
    "output_filename": ("output", "filename"),
    "visualization_mode": ("output", "visualization_mode"),
    "show_table": ("output", "show_table"),
}


def build_config_from_cli(
    cli_args: dict[str, Any],
    base_config: GridSortConfig | None = None,
) -> GridSortConfig:
    """
    Merge command-line values over a base configuration.

    Only keys present in ``cli_args`` (and not None) override the base;
    unknown keys such as ``config`` are ignored.
    """
    base = base_config or GridSortConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, field) in CLI_FIELD_MAP.items():
        value = cli_args.get(arg_name)
        if value is not None:
            data[section][field] = value
    return GridSortConfig.model_validate(data)
