"""
Named color table - no external dependencies.

Maps lowercase color names to canonical opaque colors. Entries are looked up
before any other string decoding. The default table is read-only; callers
that need more names build an extended copy and pass it through CodecConfig.
"""

__all__ = [
    "NAMED_COLORS",
    "named_color",
    "extend_named_colors",
]

from types import MappingProxyType
from typing import Mapping, Optional

from .model import STANDARD_SCALE, Color

# CSS keyword values as (red, green, blue) bytes
_DEFAULT_RGB = {
    "red": (0xFF, 0x00, 0x00),
    "green": (0x00, 0x80, 0x00),
    "blue": (0x00, 0x00, 0xFF),
    "yellow": (0xFF, 0xFF, 0x00),
    "orange": (0xFF, 0xA5, 0x00),
    "pink": (0xFF, 0xC0, 0xCB),
    "black": (0x00, 0x00, 0x00),
    "gray": (0x80, 0x80, 0x80),
}

NAMED_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        name: Color(*(value / STANDARD_SCALE for value in rgb))
        for name, rgb in _DEFAULT_RGB.items()
    }
)


def named_color(
    name: str, colors: Mapping[str, Color] = NAMED_COLORS
) -> Optional[Color]:
    """
    Look up a named color, ignoring case.

    Example:
        >>> named_color("RED")
        Color(red=1.0, green=0.0, blue=0.0, alpha=1.0)
        >>> named_color("teal") is None
        True
    """
    return colors.get(name.lower())


def extend_named_colors(
    extra: Mapping[str, Color],
    base: Mapping[str, Color] = NAMED_COLORS,
) -> Mapping[str, Color]:
    """
    Return a new read-only table with extra names added or replaced.

    Args:
        extra: Names to add; stored lowercased
        base: Table to start from

    Returns:
        Read-only mapping; base is left unchanged

    Raises:
        ValueError: If a name is empty

    Example:
        >>> extend_named_colors({"Teal": Color(0, 0.5, 0.5)})["teal"]
        Color(red=0.0, green=0.5, blue=0.5, alpha=1.0)
    """
    table = dict(base)
    for name, color in extra.items():
        key = name.strip().lower()
        if not key:
            raise ValueError("Color name must not be empty")
        table[key] = color
    return MappingProxyType(table)
