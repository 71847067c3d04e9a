"""Errors raised while decoding colors from text."""

__all__ = [
    "ColorParseError",
    "InvalidStringFormat",
    "InvalidChannelValue",
    "ChannelOutOfRange",
    "InvalidHexString",
]


class ColorParseError(ValueError):
    """Base class for every color decoding failure."""


class InvalidStringFormat(ColorParseError):
    """Delimited color string does not have exactly four segments."""

    def __init__(self, text: str, segment_count: int):
        self.text = text
        self.segment_count = segment_count
        super().__init__(
            f"Invalid color string {text!r}: expected 4 segments, got {segment_count}"
        )


class InvalidChannelValue(ColorParseError):
    """One channel segment is not a floating-point number."""

    def __init__(self, channel: str, value: str):
        self.channel = channel
        self.value = value
        super().__init__(f"Invalid {channel} value: {value!r}")


class ChannelOutOfRange(ColorParseError):
    """Parsed channel lies outside [0, 1] and the range policy rejects it."""

    def __init__(self, channel: str, value: float):
        self.channel = channel
        self.value = value
        super().__init__(f"{channel} value {value!r} is outside [0, 1]")


class InvalidHexString(ColorParseError):
    """Hex color string is not a 6-digit RRGGBB value (strict mode only)."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid hex color {text!r}: expected RRGGBB")
