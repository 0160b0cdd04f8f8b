"""
Hex color validation, decoding and encoding.
Accepted forms: #RGB, #RGBA, #RRGGBB, #RRGGBBAA.
"""

import math
from typing import Any

from .models import HEX_RE, RGBA, HexColor


def round_half_up(v: float) -> int:
    """Round .5 towards positive infinity."""
    return int(math.floor(v + 0.5))


def is_valid_hex(color: Any) -> bool:
    """Check if a value is a hex color with an optional alpha channel."""
    return isinstance(color, str) and HEX_RE.fullmatch(color) is not None


def to_hex(color: str) -> HexColor:
    """Validate and return the string as a HexColor, or raise InvalidHexColor."""
    return HexColor(color)


def hex_to_rgba(hex_color: HexColor) -> RGBA:
    """Convert a validated hex color to RGBA.

    Short forms are expanded by doubling each digit. Only the expanded
    length picks the byte layout, so callers validate first.
    """
    h = hex_color.lstrip("#")
    if 3 <= len(h) <= 4:
        h = "".join(ch + ch for ch in h)

    value = int(h, 16)
    if len(h) == 8:
        return RGBA(
            r=(value >> 24) & 255,
            g=(value >> 16) & 255,
            b=(value >> 8) & 255,
            alpha=(value & 255) / 255,
        )
    return RGBA(r=(value >> 16) & 255, g=(value >> 8) & 255, b=value & 255, alpha=1)


def rgba_to_hex(rgba: RGBA) -> HexColor:
    """Convert RGBA to #rrggbb, or #rrggbbaa when alpha is set and below 1."""
    def h(n: int) -> str:
        return format(n, "02x")

    base = f"#{h(rgba.r)}{h(rgba.g)}{h(rgba.b)}"
    if rgba.alpha is None or rgba.alpha >= 1:
        return HexColor(base)
    return HexColor(base + h(round_half_up(rgba.alpha * 255)))
