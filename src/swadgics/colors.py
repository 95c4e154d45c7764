"""Named shield colors. Pure lookups, no side effects."""

from __future__ import annotations

from enum import Enum


class NamedColor(Enum):
    BRIGHT_GREEN = "44cc11"
    GREEN = "97ca00"
    YELLOW = "dfb317"
    YELLOW_GREEN = "a4a61d"
    ORANGE = "fe7d37"
    RED = "e05d44"
    BLUE = "007ec6"
    GREY = "555555"
    LIGHT_GREY = "9f9f9f"

    @property
    def hex(self) -> str:
        return self.value

    @property
    def rgb(self) -> tuple[int, int, int]:
        """8-bit sRGB triple, e.g. GREY -> (85, 85, 85)."""
        return (
            int(self.value[0:2], 16),
            int(self.value[2:4], 16),
            int(self.value[4:6], 16),
        )

    @property
    def spec_name(self) -> str:
        """Name used in badge specs: YELLOW_GREEN -> 'yellowgreen'."""
        return self.name.lower().replace("_", "")


COLOR_NAMES: dict[str, NamedColor] = {color.spec_name: color for color in NamedColor}

# Aliases shields.io accepts for the canonical names
COLOR_ALIASES: dict[str, str] = {
    "gray": "grey",
    "lightgray": "lightgrey",
    "critical": "red",
    "important": "orange",
    "success": "brightgreen",
    "informational": "blue",
    "inactive": "lightgrey",
}


def resolve_color(name: str) -> NamedColor | None:
    """Return the color for a name or alias (any case), or None if unknown."""
    key = name.lower()
    key = COLOR_ALIASES.get(key, key)
    return COLOR_NAMES.get(key)
