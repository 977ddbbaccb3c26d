"""Color literal parsing, mixing and shade synthesis.

Mixing is a plain per-channel linear interpolation in sRGB space, with no
gamma correction.  Shades are approximations good enough for a completion
swatch, not a perceptually uniform palette.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

WHITE = "#ffffff"
BLACK = "#000000"
BASE_SHADE = 500

# Keywords that have no channels and therefore no lighter or darker shades.
SHADE_INVARIANT_COLORS = frozenset({"transparent", "currentColor"})

_NUMBER = r"(\d*\.?\d+)"
_HEX_LITERAL = re.compile(r"^#?[0-9a-fA-F]{3,6}$")
_HEX_SHORT = re.compile(r"^#?([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])$")
_HEX_LONG = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_RGB_FUNCTION = re.compile(rf"rgb\(\s*{_NUMBER}[,\s]+{_NUMBER}[,\s]+{_NUMBER}\s*\)", re.IGNORECASE)
_PLAIN_NUMBER = re.compile(r"^\d*\.?\d+$")
_ANY_NUMBER = re.compile(r"\d*\.?\d+")


@dataclass(frozen=True, slots=True)
class RGB:
    r: float
    g: float
    b: float


def hex_to_rgb(value: str) -> Optional[RGB]:
    short = _HEX_SHORT.match(value)
    if short:
        value = "".join(channel * 2 for channel in short.groups())
    match = _HEX_LONG.match(value)
    if match is None:
        return None
    r, g, b = (int(channel, 16) for channel in match.groups())
    return RGB(r, g, b)


def _round_half_up(channel: float) -> int:
    return int(math.floor(channel + 0.5))


def rgb_to_hex(color: RGB) -> str:
    channels = (min(max(_round_half_up(channel), 0), 255) for channel in (color.r, color.g, color.b))
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def color_to_rgb(value: str) -> Optional[RGB]:
    """Parse a hex, ``rgb()``, bare ``R G B [/ A]`` or numeric-ish literal.

    Returns ``None`` when no channel triple can be extracted.
    """
    if not value:
        return None
    text = value.strip()
    if _HEX_LITERAL.match(text):
        return hex_to_rgb(text)

    function = _RGB_FUNCTION.search(text)
    if function:
        return RGB(*(float(channel) for channel in function.groups()))

    parts = text.split("/")[0].split()
    if len(parts) == 3 and all(_PLAIN_NUMBER.match(part) for part in parts):
        return RGB(*(float(part) for part in parts))

    # Decorated values such as "239 68 68;" or a leftover var() fallback.
    numbers = _ANY_NUMBER.findall(text)
    if len(numbers) >= 3:
        return RGB(*(float(number) for number in numbers[:3]))
    return None


def mix_colors(color1: str, color2: str, weight: float) -> Optional[str]:
    """Mix ``weight`` percent (0-100) of ``color2`` into ``color1``."""
    first = color_to_rgb(color1)
    second = color_to_rgb(color2)
    if first is None or second is None:
        return None
    w = weight / 100
    return rgb_to_hex(
        RGB(
            _round_half_up(first.r * (1 - w) + second.r * w),
            _round_half_up(first.g * (1 - w) + second.g * w),
            _round_half_up(first.b * (1 - w) + second.b * w),
        )
    )


def calculate_shade(base_color: str, shade: int) -> Optional[str]:
    """Derive ``shade`` of ``base_color`` by mixing toward white or black.

    Rung 500 is the base itself; every 100 steps away mixes in another 20%.
    """
    if shade == BASE_SHADE or base_color in SHADE_INVARIANT_COLORS:
        return base_color
    if shade < BASE_SHADE:
        return mix_colors(base_color, WHITE, (BASE_SHADE - shade) / BASE_SHADE * 100)
    return mix_colors(base_color, BLACK, (shade - BASE_SHADE) / BASE_SHADE * 100)


__all__ = [
    "RGB",
    "WHITE",
    "BLACK",
    "SHADE_INVARIANT_COLORS",
    "hex_to_rgb",
    "rgb_to_hex",
    "color_to_rgb",
    "mix_colors",
    "calculate_shade",
]
