"""
Parse a color string into canonical RGBA.

Recognized notations, tried in order, first match wins:
named color, hex, rgb()/rgba(), hsl()/hsla().
"""

import logging
import re
from typing import Optional

from .conversions import hsl_to_rgb
from .errors import InvalidColorString
from .hex_codec import hex_to_rgba, is_valid_hex, to_hex
from .models import RGBA
from .named_colors import NAMED_COLORS

logger = logging.getLogger(__name__)

RGBA_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]*))?\)", re.ASCII)
HSLA_RE = re.compile(r"hsla?\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*(?:,\s*([\d.]*))?\)", re.ASCII)

# Integers with more significant digits are rejected so parsed values stay finite in float math
MAX_INT_DIGITS = 9


def _parse_alpha(text: Optional[str], default: Optional[float], source: str) -> Optional[float]:
    if not text:
        return default
    try:
        return float(text)
    except ValueError:
        raise InvalidColorString(source) from None


def _parse_int(text: str, source: str) -> int:
    if len(text.lstrip("0")) > MAX_INT_DIGITS:
        raise InvalidColorString(source)
    try:
        return int(text)
    except ValueError:
        raise InvalidColorString(source) from None


def parse_color(color_string: str) -> RGBA:
    """Convert a color string to RGBA.

    rgb() alpha defaults to 1 when omitted, hsl() alpha is left unset.
    Raises InvalidColorString when nothing matches.
    """
    if not isinstance(color_string, str):
        raise InvalidColorString(color_string)

    s = color_string.strip().lower()

    # Named colors
    if s in NAMED_COLORS:
        logger.debug("Resolved named color %r", s)
        return hex_to_rgba(to_hex(NAMED_COLORS[s]))

    # Hex(A)
    if is_valid_hex(s):
        return hex_to_rgba(to_hex(s))

    # RGB(A)
    m = RGBA_RE.fullmatch(s)
    if m:
        r, g, b, a = m.groups()
        return RGBA(
            r=_parse_int(r, color_string),
            g=_parse_int(g, color_string),
            b=_parse_int(b, color_string),
            alpha=_parse_alpha(a, 1, color_string),
        )

    # HSL(A)
    m = HSLA_RE.fullmatch(s)
    if m:
        h, sat, light, a = m.groups()
        return hsl_to_rgb(
            _parse_int(h, color_string),
            _parse_int(sat, color_string) / 100,
            _parse_int(light, color_string) / 100,
            _parse_alpha(a, None, color_string),
        )

    logger.debug("No notation matched %r", color_string)
    raise InvalidColorString(color_string)
