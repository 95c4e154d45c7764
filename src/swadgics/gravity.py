"""Gravity and geometry placement, after ImageMagick's -gravity / -geometry.

Coordinates here have their origin at the bottom-left of the canvas with
Y increasing upward. Geometry offsets use ImageMagick's top-down Y axis,
so their Y component is negated when applied.

Pure functions, no side effects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union


@dataclass(frozen=True)
class Pixels:
    value: float


@dataclass(frozen=True)
class Percent:
    value: float


OffsetComponent = Union[Pixels, Percent]


@dataclass(frozen=True)
class Geometry:
    """A relative offset such as "+10+5" or "-5%+0"."""

    x: OffsetComponent
    y: OffsetComponent


_GEOMETRY_RE = re.compile(r"([+\-]\d+)(%?)([+\-]\d+)(%?)")


def _component(number: str, percent: str) -> OffsetComponent:
    if percent:
        return Percent(float(number))
    return Pixels(float(number))


def parse_geometry(text: str) -> Geometry | None:
    """Parse "±N[%]±N[%]" into a Geometry. Returns None if it doesn't match."""
    match = _GEOMETRY_RE.fullmatch(text)
    if match is None:
        return None
    x, percent_x, y, percent_y = match.groups()
    return Geometry(x=_component(x, percent_x), y=_component(y, percent_y))


class Size(NamedTuple):
    width: float
    height: float


class PlacementResult(NamedTuple):
    center_x: float
    center_y: float


class Gravity(Enum):
    NORTH_WEST = "NorthWest"
    NORTH = "North"
    NORTH_EAST = "NorthEast"
    WEST = "West"
    CENTER = "Center"
    EAST = "East"
    SOUTH_WEST = "SouthWest"
    SOUTH = "South"
    SOUTH_EAST = "SouthEast"

    @property
    def horizontal(self) -> int:
        """-1 west-aligned, 0 centered, 1 east-aligned."""
        if self in (Gravity.NORTH_WEST, Gravity.WEST, Gravity.SOUTH_WEST):
            return -1
        if self in (Gravity.NORTH_EAST, Gravity.EAST, Gravity.SOUTH_EAST):
            return 1
        return 0

    @property
    def vertical(self) -> int:
        """-1 south-aligned, 0 centered, 1 north-aligned."""
        if self in (Gravity.SOUTH_WEST, Gravity.SOUTH, Gravity.SOUTH_EAST):
            return -1
        if self in (Gravity.NORTH_WEST, Gravity.NORTH, Gravity.NORTH_EAST):
            return 1
        return 0

    def object_center(
        self,
        object_size: tuple[float, float],
        canvas_size: tuple[float, float],
        geometry: Geometry | None = None,
    ) -> PlacementResult:
        """Center of an object placed on the canvas with this gravity.

        The object is kept inside the canvas on each axis where it fits.
        On an axis where it is larger than the canvas, the offset is dropped
        and the object is aligned by gravity alone.
        """
        object_width, object_height = object_size
        canvas_width, canvas_height = canvas_size

        center_x = _anchor(self.horizontal, canvas_width)
        center_y = _anchor(self.vertical, canvas_height)

        if geometry is not None:
            if isinstance(geometry.x, Percent):
                center_x += canvas_width * geometry.x.value / 100
            else:
                center_x += geometry.x.value
            # Percentages are taken against the width on both axes.
            if isinstance(geometry.y, Percent):
                center_y += canvas_width * -geometry.y.value / 100
            else:
                center_y += -geometry.y.value

        center_x = _fit(center_x, object_width, canvas_width, self.horizontal)
        center_y = _fit(center_y, object_height, canvas_height, self.vertical)
        return PlacementResult(center_x, center_y)


def _anchor(direction: int, extent: float) -> float:
    if direction < 0:
        return 0
    if direction > 0:
        return extent
    return extent / 2


def _fit(center: float, object_extent: float, canvas_extent: float, direction: int) -> float:
    half = object_extent / 2
    if object_extent <= canvas_extent:
        if center - half < 0:
            return half
        if center + half > canvas_extent:
            return canvas_extent - half
        return center

    if direction < 0:
        return half
    if direction > 0:
        return canvas_extent - half
    return canvas_extent / 2


def parse_gravity(name: str) -> Gravity | None:
    """Case-sensitive lookup: "NorthWest" -> Gravity.NORTH_WEST."""
    try:
        return Gravity(name)
    except ValueError:
        return None
