"""Single-line text metrics on top of Pillow's ImageFont."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import ImageFont

logger = logging.getLogger(__name__)

FONT_SIZE = 11
# Tried in order when no font is configured
FALLBACK_FONTS: tuple[str, ...] = ("Verdana.ttf", "verdana.ttf", "DejaVuSans.ttf")

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def load_font(path: Path | str | None = None, size: float = FONT_SIZE) -> Font:
    """Load a TrueType font.

    An explicit path must load; errors propagate. Without one, the
    fallback fonts are tried before Pillow's bundled default.
    """
    if path is not None:
        return ImageFont.truetype(str(path), size)
    for name in FALLBACK_FONTS:
        try:
            font = ImageFont.truetype(name, size)
        except OSError:
            continue
        logger.debug("Using font %s at size %s", name, size)
        return font
    logger.debug("No fallback font found, using Pillow's default at size %s", size)
    return ImageFont.load_default(size)


def font_metrics(font: Font) -> tuple[float, float]:
    """Return (ascent, descent), both as positive distances from the baseline."""
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        return float(ascent), float(descent)
    # Bitmap fonts have no metrics; use the ink of a tall glyph pair.
    _, top, _, bottom = font.getbbox("Ag")
    return float(bottom - top), 0.0


def measure_text(text: str, font: Font) -> tuple[float, float]:
    """Return (width, height) of a line of text.

    Width is the advance width; height is the font's ascent, so it does
    not depend on which glyphs the text contains.
    """
    ascent, _ = font_metrics(font)
    return float(font.getlength(text)), ascent
