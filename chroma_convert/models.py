"""
Value records for the supported color models.
Fields are not range-constrained: out-of-range input yields out-of-range output.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .errors import InvalidHexColor

HEX_RE = re.compile(r"#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")


class _ColorRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    alpha: Optional[float] = None


class RGBA(_ColorRecord):
    r: int
    g: int
    b: int


class HSLA(_ColorRecord):
    h: float
    s: float
    l: float


class HSVA(_ColorRecord):
    h: float
    s: float
    v: float


class XYZ(_ColorRecord):
    """CIE XYZ on the D65 percentage scale (Y of white is 100)."""

    x: float
    y: float
    z: float


class Lab(_ColorRecord):
    """CIE L*a*b*. ``a`` is the green-red axis, not alpha."""

    l: float
    a: float
    b: float


class HexColor(str):
    """A hex color string that has passed validation.

    Constructing one runs the hex predicate, so there is no way to obtain
    a HexColor holding an invalid string.
    """

    def __new__(cls, value):
        if not isinstance(value, str) or not HEX_RE.fullmatch(value):
            raise InvalidHexColor(value)
        return super().__new__(cls, value)

    def __repr__(self):
        return f"HexColor({str.__repr__(self)})"
