"""
Color utilities subpackage - requires numpy.

Color value model, text/hex codec, named color registry and channel readers.
"""

from rjextensions.colors.model import (
    Color,
    ChannelValueKind,
)

from rjextensions.colors.errors import (
    ColorParseError,
    InvalidStringFormat,
    InvalidChannelValue,
    ChannelOutOfRange,
    InvalidHexString,
)

from rjextensions.colors.config import (
    CodecConfig,
    RangePolicy,
    HexMode,
    StandardScale,
    DEFAULT_CONFIG,
)

from rjextensions.colors.named import (
    NAMED_COLORS,
    named_color,
    extend_named_colors,
)

from rjextensions.colors.codec import (
    random_color,
    to_delimited_string,
    parse_color,
    from_standard_rgba,
    from_hex,
)

from rjextensions.colors.channels import (
    get_channel_value,
    all_channel_values,
)

__all__ = [
    # model
    "Color",
    "ChannelValueKind",
    # errors
    "ColorParseError",
    "InvalidStringFormat",
    "InvalidChannelValue",
    "ChannelOutOfRange",
    "InvalidHexString",
    # config
    "CodecConfig",
    "RangePolicy",
    "HexMode",
    "StandardScale",
    "DEFAULT_CONFIG",
    # named
    "NAMED_COLORS",
    "named_color",
    "extend_named_colors",
    # codec
    "random_color",
    "to_delimited_string",
    "parse_color",
    "from_standard_rgba",
    "from_hex",
    # channels
    "get_channel_value",
    "all_channel_values",
]
