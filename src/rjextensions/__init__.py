"""
rjextensions - Small, reusable value utilities for UI applications.

This package is organized into focused subpackages:

- colors/   Color conversions (requires numpy)
            - model: Color, ChannelValueKind
            - codec: parse_color, to_delimited_string, from_hex,
                     from_standard_rgba, random_color
            - channels: get_channel_value, all_channel_values
            - named: NAMED_COLORS, named_color, extend_named_colors
            - config: CodecConfig, RangePolicy, HexMode, StandardScale

- cli       Command line front end (requires fire, loguru)

Usage:
    from rjextensions.colors import parse_color, from_hex, all_channel_values
    from rjextensions import Color, to_delimited_string
"""

__version__ = "0.0.1"

# Convenience imports from colors
from rjextensions.colors import (
    Color,
    ChannelValueKind,
    ColorParseError,
    CodecConfig,
    random_color,
    to_delimited_string,
    parse_color,
    from_standard_rgba,
    from_hex,
    get_channel_value,
    all_channel_values,
)

__all__ = [
    "__version__",
    # colors.model
    "Color",
    "ChannelValueKind",
    # colors.errors
    "ColorParseError",
    # colors.config
    "CodecConfig",
    # colors.codec
    "random_color",
    "to_delimited_string",
    "parse_color",
    "from_standard_rgba",
    "from_hex",
    # colors.channels
    "get_channel_value",
    "all_channel_values",
]
