"""
Color codec - requires numpy.

Conversions between Color values and their textual forms:

- delimited numeric form: "r||g||b||a" with normalized float channels
- named colors: see rjextensions.colors.named
- hex form: RRGGBB, no alpha

Plus construction from standard (0-255) channel values and random colors.
"""

__all__ = [
    "random_color",
    "to_delimited_string",
    "parse_color",
    "from_standard_rgba",
    "from_hex",
]

import math
import re
from typing import List, Optional

import numpy as np
from loguru import logger

from .config import DEFAULT_CONFIG, CodecConfig, HexMode, RangePolicy, StandardScale
from .errors import (
    ChannelOutOfRange,
    InvalidChannelValue,
    InvalidHexString,
    InvalidStringFormat,
)
from .model import CHANNELS, STANDARD_SCALE, Color
from .named import named_color

# Optional 0x prefix, then the first run of hex digits
_HEX_RUN = re.compile(r"(?:0[xX])?([0-9a-fA-F]+)")
_STRICT_HEX = re.compile(r"(?:#|0[xX])?([0-9a-fA-F]{6})")
# Signed decimal with optional fraction and exponent, or inf/infinity/nan
_DECIMAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def random_color(rng: Optional[np.random.Generator] = None) -> Color:
    """
    Return an opaque color with uniformly random RGB channels.

    Args:
        rng: Random generator to draw from; a fresh unseeded one if None

    Returns:
        Color with red, green, blue in [0, 1) and alpha 1.0

    Example:
        >>> random_color(np.random.default_rng(0)).alpha
        1.0
    """
    if rng is None:
        rng = np.random.default_rng()
    red, green, blue = rng.random(3)
    return Color(red, green, blue, 1.0)


def to_delimited_string(color: Color, config: Optional[CodecConfig] = None) -> str:
    """
    Serialize a color as "red||green||blue||alpha".

    Example:
        >>> to_delimited_string(Color(1, 0.5, 0, 1))
        '1.0||0.5||0.0||1.0'
    """
    config = config or DEFAULT_CONFIG
    return config.delimiter.join(str(value) for value in color.components)


def _parse_float(segment: str) -> Optional[float]:
    if _DECIMAL.fullmatch(segment) is None:
        return None
    return float(segment)


def _apply_range_policy(values: List[float], policy: RangePolicy) -> List[float]:
    if policy is RangePolicy.PASS_THROUGH:
        return values
    if policy is RangePolicy.REJECT:
        for channel, value in zip(CHANNELS, values):
            if not 0.0 <= value <= 1.0:
                raise ChannelOutOfRange(channel, value)
        return values
    clamped = [min(max(value, 0.0), 1.0) for value in values]
    moved = [
        channel
        for channel, old, new in zip(CHANNELS, values, clamped)
        if new != old and not math.isnan(old)
    ]
    if moved:
        logger.debug(f"Clamped {', '.join(moved)} into [0, 1]")
    return clamped


def parse_color(text: str, config: Optional[CodecConfig] = None) -> Color:
    """
    Decode a color from a color name or a delimited numeric string.

    Named colors are matched first, ignoring case. Anything else must be
    "red||green||blue||alpha" with each segment a decimal float literal (no
    whitespace or underscores; inf and nan allowed); values are used as
    normalized channels.

    Args:
        text: Color name or delimited string
        config: Codec configuration (delimiter, range policy, named colors)

    Returns:
        Decoded Color

    Raises:
        InvalidStringFormat: If the string does not split into 4 segments
        InvalidChannelValue: If a segment is not a float, reporting the first
            failing channel in red, green, blue, alpha order
        ChannelOutOfRange: If the range policy is REJECT and a value is
            outside [0, 1]

    Example:
        >>> parse_color("Red")
        Color(red=1.0, green=0.0, blue=0.0, alpha=1.0)
        >>> parse_color("0.2||0.4||0.6||1")
        Color(red=0.2, green=0.4, blue=0.6, alpha=1.0)
    """
    config = config or DEFAULT_CONFIG

    named = named_color(text, config.named_colors)
    if named is not None:
        logger.debug(f"Decoded named color {text!r}")
        return named

    segments = text.split(config.delimiter)
    if len(segments) != len(CHANNELS):
        raise InvalidStringFormat(text, len(segments))

    parsed = [_parse_float(segment) for segment in segments]
    for channel, segment, value in zip(CHANNELS, segments, parsed):
        if value is None:
            raise InvalidChannelValue(channel, segment)

    values = _apply_range_policy(parsed, config.range_policy)
    return Color(*values)


def _from_standard_value(value: int, scale: StandardScale) -> float:
    if scale is StandardScale.LINEAR:
        return value / STANDARD_SCALE
    if value == 0:
        logger.warning("Reciprocal standard scale with value 0 yields infinity")
        return math.inf
    # Integer division truncating toward zero
    return float(int(STANDARD_SCALE / value))


def from_standard_rgba(
    red: int = 255,
    green: int = 255,
    blue: int = 255,
    alpha: int = 255,
    config: Optional[CodecConfig] = None,
) -> Color:
    """
    Build a color from standard 0-255 channel values.

    With the default LINEAR scale each channel is value / 255. The legacy
    RECIPROCAL scale computes 255 // value instead, so 255 maps to 1.0,
    anything from 128 to 254 also maps to 1.0, smaller values map above 1.0
    and 0 maps to infinity.

    Args:
        red: Red value (0-255)
        green: Green value (0-255)
        blue: Blue value (0-255)
        alpha: Alpha / opacity value (0-255)
        config: Codec configuration (standard scale)

    Returns:
        Color with the converted channels, unclamped

    Example:
        >>> from_standard_rgba(255, 0, 51, 255)
        Color(red=1.0, green=0.0, blue=0.2, alpha=1.0)
    """
    config = config or DEFAULT_CONFIG
    return Color(
        *(
            _from_standard_value(value, config.standard_scale)
            for value in (red, green, blue, alpha)
        )
    )


def _scan_hex(text: str, mode: HexMode) -> int:
    if mode is HexMode.STRICT:
        match = _STRICT_HEX.fullmatch(text)
        if match is None:
            raise InvalidHexString(text)
        return int(match.group(1), 16)

    match = _HEX_RUN.search(text)
    if match is None:
        logger.debug(f"No hex digits in {text!r}, reading as 0")
        return 0
    return int(match.group(1), 16)


def from_hex(text: str, config: Optional[CodecConfig] = None) -> Color:
    """
    Build an opaque color from a hex color code.

    The parsed integer is read as 24-bit RRGGBB regardless of string length.
    In LENIENT mode (the default) the first run of hex digits is used, any
    leading characters such as '#' are skipped, and a string without hex
    digits reads as black. STRICT mode accepts only an optional '#' or '0x'
    followed by exactly six hex digits.

    Args:
        text: Hex color string (e.g., "#77aadd" or "77aadd")
        config: Codec configuration (hex mode)

    Returns:
        Color with alpha 1.0

    Raises:
        InvalidHexString: In STRICT mode, if text is not a 6-digit hex code

    Example:
        >>> from_hex("#ff8000")
        Color(red=1.0, green=0.5019607843137255, blue=0.0, alpha=1.0)
    """
    config = config or DEFAULT_CONFIG
    value = _scan_hex(text, config.hex_mode)

    red = (value & 0xFF0000) >> 16
    green = (value & 0xFF00) >> 8
    blue = value & 0xFF

    return Color(red / 0xFF, green / 0xFF, blue / 0xFF, 1.0)
