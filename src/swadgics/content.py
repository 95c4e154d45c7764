"""Badge spec parsing: "label-message-color" -> Content.

The spec format is the one shields.io uses in static badge URLs:
`-` separates fields, `_` stands for a space, and doubling either
character (`--`, `__`) gives the literal character.
"""

from __future__ import annotations

from dataclasses import dataclass

from swadgics.colors import NamedColor, resolve_color

SEPARATOR = "-"
SPACE = "_"


@dataclass(frozen=True)
class Content:
    label: str
    message: str | None
    color: NamedColor

    @property
    def label_background(self) -> NamedColor:
        """A lone label takes the badge color; next to a message it stays grey."""
        if self.message is None:
            return self.color
        return NamedColor.GREY

    @property
    def message_background(self) -> NamedColor:
        return self.color

    def to_spec(self) -> str:
        """Canonical spec string for this content.

        Parses back to equal content, except that a space directly
        followed by a literal `_` encodes as "___", which reads back as
        `_` followed by a space.
        """
        parts = [self.label]
        if self.message is not None:
            parts.append(self.message)
        fields = [_escape(part) for part in parts]
        fields.append(self.color.spec_name)
        return SEPARATOR.join(fields)


def _escape(text: str) -> str:
    return (
        text.replace(SEPARATOR, SEPARATOR * 2)
        .replace(SPACE, SPACE * 2)
        .replace(" ", SPACE)
    )


def split_spec(raw: str) -> list[str] | None:
    """Split a raw spec into its unescaped fields.

    Scans with one character of lookbehind (`pending`). Returns None when
    the spec is empty or ends with an unescaped separator.
    """
    if not raw:
        return None

    parts: list[str] = [""]
    pending: str | None = raw[0]
    for char in raw[1:]:
        if pending == SPACE and char == SPACE:
            parts[-1] += SPACE
            pending = None
        elif pending == SEPARATOR and char == SEPARATOR:
            parts[-1] += SEPARATOR
            pending = None
        elif pending == SEPARATOR:
            parts.append("")
            pending = char
        elif pending == SPACE:
            parts[-1] += " "
            pending = char
        else:
            if pending is not None:
                parts[-1] += pending
            pending = char

    if pending == SEPARATOR:
        return None
    if pending == SPACE:
        parts[-1] += " "
    elif pending is not None:
        parts[-1] += pending
    return parts


def parse_content(raw: str) -> Content | None:
    """Parse "label-color" or "label-message-color". Returns None if invalid."""
    parts = split_spec(raw)
    if parts is None:
        return None

    message: str | None = None
    if len(parts) == 2:
        label, color_name = parts
    elif len(parts) == 3:
        label, message, color_name = parts
    else:
        return None

    if not label:
        return None

    color = resolve_color(color_name)
    if color is None:
        return None
    return Content(label=label, message=message, color=color)
