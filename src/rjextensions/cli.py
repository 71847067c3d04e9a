"""
Command line front end for the color codec.

Run with:
    rjcolor parse "0.2||0.4||0.6||1"
    rjcolor hex "#77aadd" [--strict]
    rjcolor rgba 255 128 0 255 [--reciprocal]
    rjcolor random [--seed 42]
    rjcolor channels orange
    rjcolor names
"""

__all__ = ["ColorCLI", "main"]

from typing import Callable, Dict, Optional, TypeVar

import fire
import numpy as np
from loguru import logger

from rjextensions.colors import (
    NAMED_COLORS,
    CodecConfig,
    ColorParseError,
    HexMode,
    RangePolicy,
    StandardScale,
    all_channel_values,
    from_hex,
    from_standard_rgba,
    parse_color,
    random_color,
    to_delimited_string,
)

T = TypeVar("T")


def _run(func: Callable[[], T]) -> T:
    """Call func, turning color decoding errors into exit status 1."""
    try:
        return func()
    except ColorParseError as e:
        logger.error(str(e))
        raise SystemExit(1) from e


class ColorCLI:
    """Convert colors between names, delimited strings and hex codes."""

    @fire.decorators.SetParseFn(str, "text")
    def parse(
        self, text: str, clamp: bool = False, reject: bool = False
    ) -> Dict[str, str]:
        """Decode a color name or r||g||b||a string."""
        if clamp and reject:
            logger.error("--clamp and --reject are mutually exclusive")
            raise SystemExit(2)
        policy = RangePolicy.PASS_THROUGH
        if clamp:
            policy = RangePolicy.CLAMP
        elif reject:
            policy = RangePolicy.REJECT
        config = CodecConfig(range_policy=policy)

        color = _run(lambda: parse_color(str(text), config))
        return {
            "string": to_delimited_string(color, config),
            "hex": color.to_hex(),
        }

    @fire.decorators.SetParseFn(str, "text")
    def hex(self, text: str, strict: bool = False) -> str:
        """Decode a hex color code (RRGGBB)."""
        config = CodecConfig(hex_mode=HexMode.STRICT if strict else HexMode.LENIENT)
        color = _run(lambda: from_hex(str(text), config))
        return to_delimited_string(color)

    def rgba(
        self,
        red: int = 255,
        green: int = 255,
        blue: int = 255,
        alpha: int = 255,
        reciprocal: bool = False,
    ) -> str:
        """Build a color from standard 0-255 channel values."""
        scale = StandardScale.RECIPROCAL if reciprocal else StandardScale.LINEAR
        if reciprocal:
            logger.info("Using legacy reciprocal standard scale")
        config = CodecConfig(standard_scale=scale)
        color = from_standard_rgba(int(red), int(green), int(blue), int(alpha), config)
        return to_delimited_string(color)

    def random(self, seed: Optional[int] = None) -> str:
        """Generate a random opaque color."""
        return to_delimited_string(random_color(np.random.default_rng(seed)))

    @fire.decorators.SetParseFn(str, "text")
    def channels(self, text: str) -> Dict[str, float]:
        """Print every normalized and standard reading of a color."""
        color = _run(lambda: parse_color(str(text)))
        return {
            kind.name.lower(): value
            for kind, value in all_channel_values(color).items()
        }

    def names(self) -> Dict[str, str]:
        """List named colors with their hex codes."""
        return {name: color.to_hex() for name, color in sorted(NAMED_COLORS.items())}


def main() -> None:
    """Entry point for the rjcolor script."""
    fire.Fire(ColorCLI, name="rjcolor")


if __name__ == "__main__":
    main()
