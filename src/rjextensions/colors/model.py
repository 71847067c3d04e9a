"""
Color value types - no external dependencies.

Immutable RGBA color value and the selectors for its derived readings.
"""

__all__ = [
    "Color",
    "ChannelValueKind",
    "CHANNELS",
    "STANDARD_SCALE",
]

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Channel names in serialization order
CHANNELS = ("red", "green", "blue", "alpha")

# Upper bound of a standard (0-255) channel value
STANDARD_SCALE = 255


@dataclass(frozen=True)
class Color:
    """
    RGBA color with normalized floating-point channels.

    Channels are coerced to float on construction; no range clamping is
    performed, so values outside [0, 1] are stored as given.

    Example:
        >>> Color(1, 0.5, 0)
        Color(red=1.0, green=0.5, blue=0.0, alpha=1.0)
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in CHANNELS:
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def components(self) -> Tuple[float, float, float, float]:
        """Channels as a (red, green, blue, alpha) tuple."""
        return (self.red, self.green, self.blue, self.alpha)

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy of this color with a different alpha."""
        return Color(self.red, self.green, self.blue, alpha)

    def to_hex(self) -> str:
        """
        Render the RGB channels as an uppercase RRGGBB string.

        Channels are clamped to [0, 1] and rounded to the nearest standard
        value. Alpha is not represented.

        Example:
            >>> Color(1.0, 0.5, 0.0).to_hex()
            'FF8000'
        """
        return "".join(
            f"{round(min(max(value, 0.0), 1.0) * STANDARD_SCALE):02X}"
            for value in (self.red, self.green, self.blue)
        )


class ChannelValueKind(Enum):
    """Selector for one derived reading of a Color."""

    NORMALIZED_RED = ("red", False)
    NORMALIZED_GREEN = ("green", False)
    NORMALIZED_BLUE = ("blue", False)
    NORMALIZED_ALPHA = ("alpha", False)
    STANDARD_RED = ("red", True)
    STANDARD_GREEN = ("green", True)
    STANDARD_BLUE = ("blue", True)
    STANDARD_ALPHA = ("alpha", True)
    # Reserved; always reads as 0
    HEX = (None, False)

    @property
    def channel(self) -> Optional[str]:
        """Name of the channel this selector reads, or None for HEX."""
        return self.value[0]

    @property
    def is_standard(self) -> bool:
        """True if the reading is scaled to the 0-255 range."""
        return self.value[1]
