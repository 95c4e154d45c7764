"""CLI for swadgics: decorate images with a shield and a corner badge."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from swadgics.config import (
    get_badge_path,
    get_default_gravity,
    get_default_scale,
    get_font_path,
    load_config,
)
from swadgics.content import Content, parse_content
from swadgics.display import print_error, print_process_result
from swadgics.errors import CouldNotRead, OutputFileOnlyWhenOneInput, SwadgicsError
from swadgics.gravity import Geometry, Gravity, parse_geometry, parse_gravity
from swadgics.render import (
    grayscale,
    has_alpha,
    open_image,
    overlay,
    overlay_badge,
    paste_position,
    render_shield,
    save_png,
    shield_dimensions,
)
from swadgics.text import load_font

logger = logging.getLogger(__name__)

DEFAULT_GRAVITY = Gravity.NORTH


@dataclass
class ProcessOptions:
    grayscale: bool = False
    shield: Content | None = None
    shield_scale: float | None = None
    shield_gravity: Gravity = DEFAULT_GRAVITY
    shield_geometry: Geometry | None = None
    badge: Path | None = None
    font: Path | None = None


# ── Argument types ────────────────────────────────────────────────────────────


def shield_argument(raw: str) -> Content:
    content = parse_content(raw)
    if content is None:
        raise argparse.ArgumentTypeError(
            f"invalid badge spec {raw!r} (expected label-color or label-message-color)"
        )
    return content


def gravity_argument(raw: str) -> Gravity:
    gravity = parse_gravity(raw)
    if gravity is None:
        choices = ", ".join(g.value for g in Gravity)
        raise argparse.ArgumentTypeError(f"invalid gravity {raw!r} (choose from {choices})")
    return gravity


def geometry_argument(raw: str) -> Geometry:
    geometry = parse_geometry(raw)
    if geometry is None:
        raise argparse.ArgumentTypeError(f"invalid geometry {raw!r} (expected ±N[%]±N[%], e.g. +10+5)")
    return geometry


def scale_argument(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid scale {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"scale must be positive, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="swadgics",
        description="Add a shield and a corner badge to images",
    )
    parser.add_argument("input_files", nargs="+", type=Path, metavar="INPUT", help="Images to process")
    parser.add_argument("--output-file", "-o", type=Path, default=None, help="Output path (single input only)")
    parser.add_argument("--grayscale", action="store_true", help="Convert the image to grayscale")
    parser.add_argument("--shield", type=shield_argument, default=None, help="Shield spec, e.g. build-passing-green")
    parser.add_argument("--shield-scale", type=scale_argument, default=None, help="Shield width relative to the image width")
    parser.add_argument("--shield-gravity", type=gravity_argument, default=None, help="Where to anchor the shield")
    parser.add_argument("--shield-geometry", type=geometry_argument, default=None, help="Offset from the anchor, e.g. +10+5 or -5%%+0")
    badge_group = parser.add_mutually_exclusive_group()
    badge_group.add_argument("--badge", type=Path, default=None, help="Corner badge image drawn over the whole image")
    badge_group.add_argument("--no-badge", action="store_true", help="Don't draw the configured badge")
    parser.add_argument("--font", type=Path, default=None, help="TrueType font for the shield text")
    parser.add_argument("--config", type=Path, default=None, help="Config file (default ~/.swadgics/config.json)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")
    return parser


def options_from_args(args: argparse.Namespace, config: dict) -> ProcessOptions:
    """Merge command-line arguments over config file defaults."""
    badge = args.badge
    if badge is None and not args.no_badge:
        badge = get_badge_path(config)
    return ProcessOptions(
        grayscale=args.grayscale,
        shield=args.shield,
        shield_scale=args.shield_scale if args.shield_scale is not None else get_default_scale(config),
        shield_gravity=args.shield_gravity or get_default_gravity(config) or DEFAULT_GRAVITY,
        shield_geometry=args.shield_geometry,
        badge=None if args.no_badge else badge,
        font=args.font or get_font_path(config),
    )


def process_image(input_path: Path, output_path: Path, options: ProcessOptions) -> dict:
    """Decorate one image and write it as PNG.

    Returns a dict describing what was done (useful for testing).
    """
    source = open_image(input_path)
    keep_alpha = has_alpha(source)
    image = source.convert("RGBA")
    width, height = image.size
    result: dict = {
        "input": str(input_path),
        "output": str(output_path),
        "width": width,
        "height": height,
        "grayscale": options.grayscale,
    }

    if options.grayscale:
        image = grayscale(image)

    if options.shield is not None:
        try:
            font = load_font(options.font)
        except OSError as exc:
            raise CouldNotRead(options.font) from exc
        dimensions = shield_dimensions(options.shield, font)
        scale = (options.shield_scale or 1.0) * width / dimensions.width
        scaled_size = (dimensions.width * scale, dimensions.height * scale)
        center = options.shield_gravity.object_center(scaled_size, (width, height), options.shield_geometry)
        shield_image = render_shield(options.shield, dimensions, scale, options.font)
        position = paste_position(center, shield_image.size, height)
        logger.debug("Shield center %s, pasted at %s", center, position)
        image = overlay(image, shield_image, position)
        result["shield"] = {
            "label": options.shield.label,
            "message": options.shield.message,
            "color": options.shield.color.spec_name,
            "width": shield_image.width,
            "height": shield_image.height,
            "position": position,
            "gravity": options.shield_gravity.value,
        }

    if options.badge is not None:
        image = overlay_badge(image, options.badge)
        result["badge"] = str(options.badge)

    save_png(image, output_path, keep_alpha=keep_alpha)
    return result


def run(input_files: list[Path], output_file: Path | None, options: ProcessOptions) -> list[dict]:
    """Process every input; a single input may be written elsewhere."""
    if len(input_files) == 1:
        target = output_file or input_files[0]
        return [process_image(input_files[0], target, options)]
    if output_file is not None:
        raise OutputFileOnlyWhenOneInput()
    return [process_image(path, path, options) for path in input_files]


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    options = options_from_args(args, load_config(args.config))
    try:
        results = run(args.input_files, args.output_file, options)
    except SwadgicsError as exc:
        print_error(str(exc))
        sys.exit(1)
    for result in results:
        print_process_result(result)


if __name__ == "__main__":
    main()
