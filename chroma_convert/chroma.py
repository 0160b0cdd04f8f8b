"""
Chroma: a parsed color with on-demand views in other color models.
"""

from typing import Union

from . import conversions
from .hex_codec import is_valid_hex, rgba_to_hex, to_hex
from .models import HSLA, HSVA, RGBA, XYZ, HexColor, Lab
from .parser import parse_color


class Chroma:
    """Holds a canonical RGBA value. Views are recomputed on every call."""

    __slots__ = ("_rgba",)

    is_valid_hex_color = staticmethod(is_valid_hex)
    as_hex_color = staticmethod(to_hex)
    parse_color = staticmethod(parse_color)

    def __init__(self, color: Union[str, RGBA]):
        if isinstance(color, RGBA):
            self._rgba = color
        elif isinstance(color, str):
            self._rgba = parse_color(color)
        else:
            raise TypeError(f"Chroma expects a color string or RGBA, got {type(color).__name__}")

    @property
    def rgba(self) -> RGBA:
        return self._rgba

    def to_hex(self) -> HexColor:
        return rgba_to_hex(self._rgba)

    def to_hsl(self) -> HSLA:
        c = self._rgba
        return conversions.rgb_to_hsl(c.r, c.g, c.b, c.alpha)

    def to_hsv(self) -> HSVA:
        c = self._rgba
        return conversions.rgb_to_hsv(c.r, c.g, c.b, c.alpha)

    def to_xyz(self) -> XYZ:
        c = self._rgba
        return conversions.rgb_to_xyz(c.r, c.g, c.b).model_copy(update={"alpha": c.alpha})

    def to_lab(self) -> Lab:
        xyz = self.to_xyz()
        return conversions.xyz_to_lab(xyz.x, xyz.y, xyz.z).model_copy(update={"alpha": xyz.alpha})

    def __eq__(self, other):
        if not isinstance(other, Chroma):
            return NotImplemented
        return self._rgba == other._rgba

    def __hash__(self):
        return hash(self._rgba)

    def __repr__(self):
        c = self._rgba
        return f"Chroma(r={c.r}, g={c.g}, b={c.b}, alpha={c.alpha})"
