"""Tests for CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image

from swadgics.cli import (
    DEFAULT_GRAVITY,
    ProcessOptions,
    build_parser,
    geometry_argument,
    gravity_argument,
    main,
    options_from_args,
    process_image,
    run,
    scale_argument,
    shield_argument,
)
from swadgics.colors import NamedColor
from swadgics.content import parse_content
from swadgics.errors import OutputFileOnlyWhenOneInput, UnknownFileFormat
from swadgics.gravity import Gravity, Percent, Pixels


@pytest.fixture
def image_path(tmp_path) -> Path:
    path = tmp_path / "icon.png"
    Image.new("RGB", (200, 100), (10, 120, 200)).save(path)
    return path


# ── Argument Parsing ──────────────────────────────────────────────────────────


class TestArgumentTypes:
    def test_shield_valid(self):
        content = shield_argument("build-passing-green")
        assert content.message == "passing"

    def test_shield_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            shield_argument("build-")

    def test_gravity_valid(self):
        assert gravity_argument("SouthWest") is Gravity.SOUTH_WEST

    def test_gravity_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            gravity_argument("southwest")

    def test_geometry_valid(self):
        geometry = geometry_argument("-5%+0")
        assert geometry.x == Percent(-5)
        assert geometry.y == Pixels(0)

    def test_geometry_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            geometry_argument("5,5")

    def test_scale_valid(self):
        assert scale_argument("0.5") == 0.5

    def test_scale_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            scale_argument("half")
        with pytest.raises(argparse.ArgumentTypeError):
            scale_argument("0")


class TestArgumentParsing:
    def test_requires_input(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_defaults(self):
        args = build_parser().parse_args(["a.png"])
        assert args.input_files == [Path("a.png")]
        assert args.output_file is None
        assert args.shield is None
        assert args.shield_gravity is None
        assert not args.grayscale

    def test_all_options(self):
        args = build_parser().parse_args(
            [
                "a.png", "-o", "b.png", "--grayscale",
                "--shield", "beta-orange", "--shield-scale", "0.5",
                "--shield-gravity", "South", "--shield-geometry", "+0-10",
                "--badge", "corner.png",
            ]
        )
        assert args.output_file == Path("b.png")
        assert args.shield.color is NamedColor.ORANGE
        assert args.shield_scale == 0.5
        assert args.shield_gravity is Gravity.SOUTH
        assert args.shield_geometry.y == Pixels(-10)
        assert args.badge == Path("corner.png")

    def test_invalid_shield_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["a.png", "--shield", "build-passing-purple"])

    def test_invalid_geometry_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["a.png", "--shield-geometry", "10x10"])

    def test_badge_and_no_badge_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["a.png", "--badge", "x.png", "--no-badge"])


class TestOptionsFromArgs:
    def test_defaults_without_config(self):
        options = options_from_args(build_parser().parse_args(["a.png"]), {})
        assert options.shield_gravity is DEFAULT_GRAVITY
        assert options.shield_scale is None
        assert options.badge is None
        assert options.font is None

    def test_config_fills_defaults(self):
        config = {"shield_gravity": "East", "shield_scale": 0.25, "font": "/f.ttf", "badge": "/b.png"}
        options = options_from_args(build_parser().parse_args(["a.png"]), config)
        assert options.shield_gravity is Gravity.EAST
        assert options.shield_scale == 0.25
        assert options.font == Path("/f.ttf")
        assert options.badge == Path("/b.png")

    def test_flags_override_config(self):
        args = build_parser().parse_args(["a.png", "--shield-gravity", "West", "--shield-scale", "2"])
        options = options_from_args(args, {"shield_gravity": "East", "shield_scale": 0.25})
        assert options.shield_gravity is Gravity.WEST
        assert options.shield_scale == 2.0

    def test_no_badge_suppresses_config_badge(self):
        args = build_parser().parse_args(["a.png", "--no-badge"])
        assert options_from_args(args, {"badge": "/b.png"}).badge is None

    def test_invalid_config_paths_ignored(self):
        options = options_from_args(build_parser().parse_args(["a.png"]), {"font": 123, "badge": ["x"]})
        assert options.font is None
        assert options.badge is None


# ── Processing ────────────────────────────────────────────────────────────────


class TestProcessImage:
    def test_copy_without_changes(self, image_path, tmp_path):
        output = tmp_path / "out.png"
        result = process_image(image_path, output, ProcessOptions())
        assert result["width"] == 200
        assert result["height"] == 100
        assert "shield" not in result
        with Image.open(output) as written:
            assert written.size == (200, 100)
            assert written.mode == "RGB"
            assert written.getpixel((5, 5)) == (10, 120, 200)

    def test_grayscale(self, image_path, tmp_path):
        output = tmp_path / "out.png"
        process_image(image_path, output, ProcessOptions(grayscale=True))
        with Image.open(output) as written:
            r, g, b = written.getpixel((5, 5))
            assert r == g == b

    def test_alpha_kept(self, tmp_path):
        source = tmp_path / "alpha.png"
        Image.new("RGBA", (20, 20), (0, 0, 0, 0)).save(source)
        output = tmp_path / "out.png"
        process_image(source, output, ProcessOptions())
        with Image.open(output) as written:
            assert written.mode == "RGBA"

    def test_shield_full_width_at_north(self, image_path, tmp_path):
        output = tmp_path / "out.png"
        options = ProcessOptions(shield=parse_content("build-passing-green"))
        result = process_image(image_path, output, options)
        shield = result["shield"]
        assert shield["width"] == 200
        assert shield["position"] == (0, 0)
        assert shield["gravity"] == "North"
        assert shield["color"] == "green"

    def test_shield_scaled_at_south_east(self, image_path, tmp_path):
        output = tmp_path / "out.png"
        options = ProcessOptions(
            shield=parse_content("beta-orange"),
            shield_scale=0.5,
            shield_gravity=Gravity.SOUTH_EAST,
        )
        shield = process_image(image_path, output, options)["shield"]
        assert shield["width"] == 100
        left, top = shield["position"]
        assert left == 100
        assert top + shield["height"] == 100

    def test_shield_is_drawn(self, image_path, tmp_path):
        output = tmp_path / "out.png"
        options = ProcessOptions(shield=parse_content("beta-red"), shield_scale=0.5, shield_gravity=Gravity.CENTER)
        process_image(image_path, output, options)
        with Image.open(output) as written:
            r, g, b = written.getpixel((52, 50))
            assert r > 150 and b < 120

    def test_badge(self, image_path, tmp_path):
        badge = tmp_path / "badge.png"
        Image.new("RGBA", (200, 100), (255, 255, 0, 255)).save(badge)
        output = tmp_path / "out.png"
        result = process_image(image_path, output, ProcessOptions(badge=badge))
        assert result["badge"] == str(badge)
        with Image.open(output) as written:
            assert written.getpixel((0, 0)) == (255, 255, 0)

    def test_unreadable_input(self, tmp_path):
        path = tmp_path / "bad.png"
        path.write_bytes(b"\x00\x01garbage")
        with pytest.raises(UnknownFileFormat):
            process_image(path, path, ProcessOptions())


class TestRun:
    def test_single_input_in_place(self, image_path):
        results = run([image_path], None, ProcessOptions())
        assert results[0]["output"] == str(image_path)

    def test_single_input_with_output(self, image_path, tmp_path):
        output = tmp_path / "other.png"
        run([image_path], output, ProcessOptions())
        assert output.exists()

    def test_output_with_many_inputs_rejected(self, image_path, tmp_path):
        with pytest.raises(OutputFileOnlyWhenOneInput):
            run([image_path, image_path], tmp_path / "out.png", ProcessOptions())

    def test_many_inputs(self, tmp_path):
        paths = []
        for name in ("a.png", "b.png"):
            path = tmp_path / name
            Image.new("RGB", (4, 4)).save(path)
            paths.append(path)
        results = run(paths, None, ProcessOptions())
        assert [r["output"] for r in results] == [str(p) for p in paths]


class TestMain:
    def test_success_prints_result(self, image_path, tmp_path):
        config = tmp_path / "config.json"
        with patch("swadgics.cli.print_process_result") as printer:
            main([str(image_path), "--shield", "beta-orange", "--config", str(config)])
        assert printer.call_count == 1

    def test_error_exits_with_status_1(self, tmp_path):
        config = tmp_path / "config.json"
        with patch("swadgics.cli.print_error") as printer, pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.png"), "--config", str(config)])
        assert excinfo.value.code == 1
        assert "Could not read file" in printer.call_args[0][0]

    def test_bad_shield_is_usage_error(self, image_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(image_path), "--shield", "nope"])
        assert excinfo.value.code == 2
