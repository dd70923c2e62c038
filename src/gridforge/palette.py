"""ComputerCraft color palette and color-key rules."""

from typing import Any

from gridforge.literal.values import ColorRef

# Bit values match the colors API
PALETTE: dict[str, int] = {
    "white": 0x1, "orange": 0x2, "magenta": 0x4, "lightBlue": 0x8,
    "yellow": 0x10, "lime": 0x20, "pink": 0x40, "gray": 0x80,
    "lightGray": 0x100, "cyan": 0x200, "purple": 0x400, "blue": 0x800,
    "brown": 0x1000, "green": 0x2000, "red": 0x4000, "black": 0x8000,
}


def is_color_key(key: str) -> bool:
    """Color-like keys: contain "color", or are/end with background/foreground."""
    lowered = key.lower()
    return "color" in lowered or lowered.endswith(("background", "foreground"))


def is_palette_color(value: Any) -> bool:
    return isinstance(value, str) and value in PALETTE


def to_color_literal(key: str, value: Any) -> Any:
    """Promote a palette name under a color key to a ColorRef for emission."""
    if is_color_key(key) and is_palette_color(value):
        return ColorRef(value)
    return value


def unwrap_color(key: str, value: Any) -> Any:
    """Demote a qualified color reference under a color key to its bare name."""
    if is_color_key(key) and isinstance(value, ColorRef):
        return value.name
    return value
