"""
Codec configuration - no external dependencies.

Selectors for the lenient/strict behaviors of the color codec, bundled in a
single frozen dataclass.
"""

__all__ = [
    "RangePolicy",
    "HexMode",
    "StandardScale",
    "CodecConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_DELIMITER",
]

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from .model import Color
from .named import NAMED_COLORS

DEFAULT_DELIMITER = "||"


class RangePolicy(Enum):
    """Handling of parsed channel values outside [0, 1]."""

    PASS_THROUGH = "pass"
    CLAMP = "clamp"
    REJECT = "reject"


class HexMode(Enum):
    """How hex color strings are read."""

    # First hex run wins; unparsable input reads as 0
    LENIENT = "lenient"
    # Optional '#' or '0x', then exactly six hex digits
    STRICT = "strict"


class StandardScale(Enum):
    """Mapping from a 0-255 standard value to a normalized channel."""

    LINEAR = "linear"
    # Legacy 255 // value; 0 maps to infinity
    RECIPROCAL = "reciprocal"


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for color encoding and decoding."""

    range_policy: RangePolicy = RangePolicy.PASS_THROUGH
    hex_mode: HexMode = HexMode.LENIENT
    standard_scale: StandardScale = StandardScale.LINEAR
    delimiter: str = DEFAULT_DELIMITER
    named_colors: Mapping[str, Color] = field(
        default_factory=lambda: NAMED_COLORS, hash=False
    )

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("delimiter must not be empty")
        for name in self.named_colors:
            if self.delimiter in name:
                raise ValueError(
                    f"Color name {name!r} contains delimiter {self.delimiter!r}"
                )


DEFAULT_CONFIG = CodecConfig()
