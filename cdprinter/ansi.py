"""Text attributes and colors for the colored printer, as rich style names."""

from __future__ import annotations

from enum import StrEnum


class Attribute(StrEnum):
    NONE = ""
    CLEAR = "none"
    BOLD = "bold"
    LIGHT = "bold"
    DARK = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    REVERSE = "reverse"
    HIDDEN = "conceal"


class FColor(StrEnum):
    NONE = ""
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class BColor(StrEnum):
    NONE = ""
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


def style_for(
    attribute: Attribute = Attribute.NONE,
    foreground: FColor = FColor.NONE,
    background: BColor = BColor.NONE,
) -> str:
    """Build a rich style string, e.g. ``"bold red on white"``."""
    parts = [p for p in (attribute.value, foreground.value) if p]
    if background is not BColor.NONE:
        parts.append(f"on {background.value}")
    return " ".join(parts)


def parse_enum(enum_cls: type[StrEnum], name: str | StrEnum | None) -> StrEnum:
    """Look up a member by name, case-insensitively; ``None`` gives ``NONE``."""
    if name is None or name == "":
        return enum_cls["NONE"]
    if isinstance(name, enum_cls):
        return name
    try:
        return enum_cls[str(name).upper()]
    except KeyError:
        choices = ", ".join(m.lower() for m in enum_cls.__members__)
        raise ValueError(f"Unknown {enum_cls.__name__} {name!r}; expected one of: {choices}") from None
