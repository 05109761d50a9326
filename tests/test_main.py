"""
End-to-end tests for the sorting pipeline in color_sort_grid.main.

Runs the full read → resolve → normalize → sort → composite flow on small
generated image directories and checks the written artifacts.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

import color_sort_grid.main as csg_main
from color_sort_grid.config import GridSortConfig
from color_sort_grid.errors import (
    GridOverflowError,
    ImageDecodeError,
    NoImagesFoundError,
)

RED, GREEN, BLUE = (255, 0, 0), (0, 255, 0), (0, 0, 255)

ConfigFactory = Callable[..., GridSortConfig]


def _cell(canvas: Image.Image, row: int, col: int, size: int = 32) -> tuple:
    return canvas.getpixel((col * size + size // 2, row * size + size // 2))


class TestReadImageRecords:
    """Sequential read stage."""

    def test_reads_every_file_with_colors(self, image_dir: Path) -> None:
        paths = sorted(image_dir.glob("*.png"))
        records = csg_main.read_image_records(paths)
        assert [r.filename for r in records] == [p.name for p in paths]
        assert all(r.color_info is not None for r in records)
        assert all(r.normalized is None for r in records)

    def test_skips_colors_when_not_requested(self, image_dir: Path) -> None:
        records = csg_main.read_image_records(
            sorted(image_dir.glob("*.png")), extract_colors=False)
        assert all(r.color_info is None for r in records)

    def test_greyscale_changes_extracted_color(self, image_dir: Path) -> None:
        [record] = csg_main.read_image_records(
            [image_dir / "b_red.png"], greyscale=True)
        assert record.color_info is not None
        assert record.color_info.saturation == 0
        assert record.color_info.hue == 0

    def test_first_failure_aborts(self, image_dir: Path) -> None:
        broken = image_dir / "e_broken.png"
        broken.write_bytes(b"garbage")
        paths = [image_dir / "a_green.png", broken, image_dir / "b_red.png"]
        with pytest.raises(ImageDecodeError) as exc:
            csg_main.read_image_records(paths)
        assert exc.value.filename == "e_broken.png"


class TestSortImages:
    """Whole pipeline runs."""

    def test_hue_column_major_grid(
        self,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(layout={"sort_order": "column-major"})
        [out] = csg_main.sort_images(cfg)

        with Image.open(out) as canvas:
            assert canvas.size == (64, 64)
            # red and grey tie at hue 0 and keep their input order
            rgb = canvas.convert("RGB")
            assert _cell(rgb, 0, 0) == RED
            r, g, b = _cell(rgb, 1, 0)
            assert r == g == b
            assert _cell(rgb, 0, 1) == GREEN
            assert _cell(rgb, 1, 1) == BLUE

    def test_filename_row_major_grid(
        self,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(
            layout={"sort_order": "row-major"},
            sort={"parameter": "filename"},
        )
        [out] = csg_main.sort_images(cfg)
        with Image.open(out) as canvas:
            rgb = canvas.convert("RGB")
            assert _cell(rgb, 0, 0) == GREEN
            assert _cell(rgb, 0, 1) == RED
            assert _cell(rgb, 1, 0) == BLUE

    def test_filename_sort_skips_color_extraction(
        self,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(sort={"parameter": "filename"})
        records, _ = csg_main.prepare_records(cfg)
        assert all(r.color_info is None for r in records)

    @pytest.mark.parametrize("mode", ["normal", "4x4", "dominant"])
    def test_greyscale_changes_rendered_cells(
        self,
        mode: str,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(
            input={"greyscale": True},
            output={"visualization_mode": mode},
        )
        records, _ = csg_main.prepare_records(cfg)

        for record in records:
            assert record.normalized is not None
            for img in (record.image, record.normalized):
                pixels = np.asarray(img.convert("RGB"))
                assert (pixels[..., 0] == pixels[..., 1]).all()
                assert (pixels[..., 1] == pixels[..., 2]).all()

    def test_dominant_mode_extracts_colors_for_filename_sort(
        self,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(
            sort={"parameter": "filename"},
            output={"visualization_mode": "dominant"},
        )
        records, _ = csg_main.prepare_records(cfg)
        assert all(r.color_info is not None for r in records)

    def test_explicit_cell_size_and_rows(
        self,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(layout={"rows": 1, "px_per_image": 10})
        [out] = csg_main.sort_images(cfg)
        with Image.open(out) as canvas:
            assert canvas.size == (40, 10)

    def test_sequence_output(
        self,
        tmp_path: Path,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(
            sort={"parameter": "luma"},
            output={"filename": "files"},
        )
        paths = csg_main.sort_images(cfg)

        assert [p.name for p in paths] == ["1.png", "2.png", "3.jpg", "4.png"]
        assert all(p.parent == tmp_path / "out" / "sorted" for p in paths)
        with Image.open(paths[0]) as first:
            assert first.convert("RGB").getpixel((0, 0)) == BLUE

    def test_overflow_fail_policy(
        self,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(
            layout={"rows": 1, "columns": 2, "overflow": "fail"})
        with pytest.raises(GridOverflowError):
            csg_main.sort_images(cfg)

    def test_single_image_grid(
        self,
        tmp_path: Path,
        make_image_file: Callable[..., Path],
        make_grid_config: ConfigFactory,
    ) -> None:
        solo_dir = tmp_path / "solo"
        make_image_file("only.png", (12, 34, 56), size=(40, 20),
                        directory=solo_dir)
        cfg = make_grid_config(input={"directory": str(solo_dir)})
        [out] = csg_main.sort_images(cfg)
        with Image.open(out) as canvas:
            assert canvas.size == (20, 20)
            assert canvas.convert("RGB").getcolors() == [(400, (12, 34, 56))]

    def test_empty_directory_produces_no_output(
        self,
        tmp_path: Path,
        make_grid_config: ConfigFactory,
    ) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        cfg = make_grid_config(input={"directory": str(empty)})
        with pytest.raises(NoImagesFoundError):
            csg_main.sort_images(cfg)
        assert not (tmp_path / "out").exists()

    def test_unsupported_output_extension_fails_early(
        self,
        tmp_path: Path,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(
            output={"filename": str(tmp_path / "grid.notanimage")})
        with pytest.raises(ValueError, match="Unsupported output"):
            csg_main.sort_images(cfg)

    def test_jpeg_output_is_flattened(
        self,
        tmp_path: Path,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(output={"filename": str(tmp_path / "g.jpg")})
        [out] = csg_main.sort_images(cfg)
        with Image.open(out) as canvas:
            assert canvas.mode == "RGB"

    def test_rerun_is_pixel_identical(
        self,
        make_grid_config: ConfigFactory,
    ) -> None:
        cfg = make_grid_config(output={"visualization_mode": "4x4"})
        first, layout = csg_main.prepare_records(cfg)
        second, _ = csg_main.prepare_records(cfg)
        a = csg_main.build_grid(first, layout, cfg.layout.sort_order)
        b = csg_main.build_grid(second, layout, cfg.layout.sort_order)
        assert np.array_equal(np.asarray(a), np.asarray(b))


def test_build_grid_requires_normalized_records(image_dir: Path) -> None:
    records = csg_main.read_image_records([image_dir / "a_green.png"])
    layout = csg_main.GridLayout(rows=1, columns=1, cell_size=4)
    with pytest.raises(ValueError, match="has not been normalized"):
        csg_main.build_grid(records, layout, "row-major")
