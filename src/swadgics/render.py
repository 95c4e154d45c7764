"""Raster drawing with Pillow: shields, grayscale conversion, corner badges.

Geometry from swadgics.gravity uses a bottom-left origin; everything in
this module converts to Pillow's top-left origin at the last moment.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from PIL import Image, ImageDraw, UnidentifiedImageError

from swadgics.content import Content
from swadgics.errors import CouldNotRead, CouldNotWrite, UnknownFileFormat
from swadgics.gravity import PlacementResult
from swadgics.shield import ROUNDED_RECT_RADIUS, VERTICAL_MARGIN, ShieldDimensions, layout
from swadgics.text import FONT_SIZE, Font, font_metrics, load_font, measure_text

logger = logging.getLogger(__name__)

# Shields are drawn at least this many times their base size, then resized.
SUPERSAMPLE = 4

_GRADIENT_ALPHA = 26  # 0.1 opacity
_GRADIENT_TOP = (0xBB, 0xBB, 0xBB, _GRADIENT_ALPHA)
_GRADIENT_BOTTOM = (0x00, 0x00, 0x00, _GRADIENT_ALPHA)
_SHADOW = (0, 0, 0, 85)
_TEXT = (255, 255, 255, 255)


def open_image(path: Path) -> Image.Image:
    """Open and fully decode an image file."""
    try:
        image = Image.open(path)
        image.load()
    except UnidentifiedImageError as exc:
        raise UnknownFileFormat(path) from exc
    except OSError as exc:
        raise CouldNotRead(path) from exc
    return image


def has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA", "PA", "RGBa", "La") or "transparency" in image.info


def save_png(image: Image.Image, path: Path, keep_alpha: bool = True) -> None:
    output = image if keep_alpha else image.convert("RGB")
    try:
        output.save(path, "PNG")
    except OSError as exc:
        raise CouldNotWrite(path) from exc


def grayscale(image: Image.Image) -> Image.Image:
    """Convert to grey, keeping the original alpha channel."""
    rgba = image.convert("RGBA")
    gray = rgba.convert("L")
    return Image.merge("RGBA", (gray, gray, gray, rgba.getchannel("A")))


def shield_dimensions(content: Content, font: Font) -> ShieldDimensions:
    ascent, _ = font_metrics(font)
    return layout(content, lambda text: measure_text(text, font), ascent)


def _draw_text(size: tuple[int, int], text: str, position: tuple[float, float], font: Font, fill) -> Image.Image:
    text_layer = Image.new("RGBA", size, (0, 0, 0, 0))
    ImageDraw.Draw(text_layer).text(position, text, font=font, fill=fill)
    return text_layer


def render_shield(
    content: Content,
    dimensions: ShieldDimensions,
    scale: float = 1.0,
    font_path: Path | str | None = None,
) -> Image.Image:
    """Draw the shield as an RGBA image of the scaled shield size."""
    factor = max(scale, float(SUPERSAMPLE))
    size = (
        max(1, math.ceil(dimensions.width * factor)),
        max(1, math.ceil(dimensions.height * factor)),
    )
    width, height = size

    bands = Image.new("RGBA", size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(bands)
    label_right = max(1, round(dimensions.label_band_width * factor))
    draw.rectangle((0, 0, label_right - 1, height - 1), fill=content.label_background.rgb)
    if content.message is not None:
        message_left = round(dimensions.message_band_x * factor)
        message_right = max(message_left + 1, round((dimensions.message_band_x + dimensions.message_band_width) * factor))
        draw.rectangle((message_left, 0, message_right - 1, height - 1), fill=content.message_background.rgb)

    # Top to bottom: light grey fading to black, both at 10%
    ramp = Image.linear_gradient("L").resize(size)
    gradient = Image.composite(
        Image.new("RGBA", size, _GRADIENT_BOTTOM),
        Image.new("RGBA", size, _GRADIENT_TOP),
        ramp,
    )
    bands = Image.alpha_composite(bands, gradient)

    clip = Image.new("L", size, 0)
    ImageDraw.Draw(clip).rounded_rectangle(
        (0, 0, width - 1, height - 1), radius=ROUNDED_RECT_RADIUS * factor, fill=255
    )
    shield = Image.new("RGBA", size, (0, 0, 0, 0))
    shield.paste(bands, (0, 0), clip)

    font = load_font(font_path, FONT_SIZE * factor)
    ascent, descent = font_metrics(font)
    # The baseline sits VERTICAL_MARGIN + descent above the bottom edge.
    text_top = height - (VERTICAL_MARGIN * factor + descent) - ascent
    runs = [(content.label, dimensions.label_text_x)]
    if content.message is not None:
        runs.append((content.message, dimensions.message_text_x))
    for text, x in runs:
        shield = Image.alpha_composite(shield, _draw_text(size, text, (x * factor, text_top + factor), font, _SHADOW))
        shield = Image.alpha_composite(shield, _draw_text(size, text, (x * factor, text_top), font, _TEXT))

    target = (
        max(1, round(dimensions.width * scale)),
        max(1, round(dimensions.height * scale)),
    )
    logger.debug("Rendered shield at %sx%s, downsampled to %sx%s", width, height, *target)
    return shield.resize(target, Image.LANCZOS)


def paste_position(center: PlacementResult, size: tuple[int, int], canvas_height: int) -> tuple[int, int]:
    """Top-left corner, in Pillow coordinates, of an object centered at center."""
    width, height = size
    left = round(center.center_x - width / 2)
    bottom = round(center.center_y - height / 2)
    return left, canvas_height - bottom - height


def overlay(image: Image.Image, overlay_image: Image.Image, position: tuple[int, int] = (0, 0)) -> Image.Image:
    """Alpha-composite overlay_image onto image at position (top-left)."""
    layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    layer.paste(overlay_image.convert("RGBA"), position)
    return Image.alpha_composite(image.convert("RGBA"), layer)


def overlay_badge(image: Image.Image, badge_path: Path) -> Image.Image:
    """Draw a badge image stretched over the whole image."""
    badge = open_image(badge_path).convert("RGBA")
    if badge.size != image.size:
        logger.debug("Resizing badge from %sx%s to %sx%s", *badge.size, *image.size)
        badge = badge.resize(image.size, Image.LANCZOS)
    return overlay(image, badge)
