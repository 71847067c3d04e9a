"""Channel readings derived from a Color."""

__all__ = [
    "get_channel_value",
    "all_channel_values",
]

from typing import Dict

from .model import STANDARD_SCALE, ChannelValueKind, Color


def get_channel_value(color: Color, kind: ChannelValueKind) -> float:
    """
    Read one channel value from a color.

    Standard readings are the normalized value times 255. HEX is reserved and
    always reads as 0.

    Example:
        >>> get_channel_value(Color(0.5, 0, 0), ChannelValueKind.STANDARD_RED)
        127.5
    """
    if kind.channel is None:
        return 0.0
    value = getattr(color, kind.channel)
    if kind.is_standard:
        return STANDARD_SCALE * value
    return value


def all_channel_values(color: Color) -> Dict[ChannelValueKind, float]:
    """Every normalized and standard reading of a color, keyed by kind (no HEX)."""
    return {
        kind: get_channel_value(color, kind)
        for kind in ChannelValueKind
        if kind is not ChannelValueKind.HEX
    }
