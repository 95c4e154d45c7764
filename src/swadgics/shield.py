"""Shield layout, after shields.io's flat badge style.

Pure functions: text measurement is passed in, so layout can be
computed and tested without a font.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from swadgics.content import Content

HORIZONTAL_MARGIN = 5.5
HORIZONTAL_SPACING = 7.0
VERTICAL_MARGIN = 5.0
ROUNDED_RECT_RADIUS = 3.0

Measure = Callable[[str], tuple[float, float]]


@dataclass(frozen=True)
class ShieldDimensions:
    width: float
    height: float
    label_width: float
    message_width: float | None

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def label_band_width(self) -> float:
        """Width of the label's background band, starting at x = 0."""
        if self.message_width is None:
            return HORIZONTAL_MARGIN + self.label_width + HORIZONTAL_MARGIN
        return HORIZONTAL_MARGIN + self.label_width + HORIZONTAL_SPACING / 2

    @property
    def message_band_x(self) -> float:
        return HORIZONTAL_MARGIN + self.label_width + HORIZONTAL_SPACING / 2

    @property
    def message_band_width(self) -> float:
        if self.message_width is None:
            return 0.0
        return HORIZONTAL_MARGIN + self.message_width + HORIZONTAL_SPACING / 2

    @property
    def label_text_x(self) -> float:
        return HORIZONTAL_MARGIN

    @property
    def message_text_x(self) -> float:
        return HORIZONTAL_MARGIN + HORIZONTAL_SPACING + self.label_width


def layout(content: Content, measure: Measure, ascent: float) -> ShieldDimensions:
    """Compute shield dimensions for content.

    measure(text) returns the (width, height) of a line of text.
    The height comes from the font's ascent, not from the measured text.
    """
    label_width, _ = measure(content.label)
    message_width: float | None = None
    if content.message is not None:
        message_width, _ = measure(content.message)

    if message_width is None:
        width = 2 * HORIZONTAL_MARGIN + label_width
    else:
        width = 2 * HORIZONTAL_MARGIN + HORIZONTAL_SPACING + label_width + message_width
    height = ascent + 2 * VERTICAL_MARGIN

    return ShieldDimensions(
        width=width,
        height=height,
        label_width=label_width,
        message_width=message_width,
    )
