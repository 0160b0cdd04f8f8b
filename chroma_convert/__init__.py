"""
Color string parsing and color space conversion with RGBA as the hub.
"""

from .chroma import Chroma
from .conversions import hsl_to_rgb, rgb_to_hsl, rgb_to_hsv, rgb_to_lab, rgb_to_xyz, xyz_to_lab
from .errors import ChromaError, InvalidColorString, InvalidHexColor
from .hex_codec import hex_to_rgba, is_valid_hex, rgba_to_hex, to_hex
from .models import HSLA, HSVA, RGBA, XYZ, HexColor, Lab
from .named_colors import NAMED_COLORS
from .parser import parse_color

__version__ = "1.0.0"

__all__ = [
    "Chroma",
    "ChromaError",
    "HSLA",
    "HSVA",
    "HexColor",
    "InvalidColorString",
    "InvalidHexColor",
    "Lab",
    "NAMED_COLORS",
    "RGBA",
    "XYZ",
    "hex_to_rgba",
    "hsl_to_rgb",
    "is_valid_hex",
    "parse_color",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_lab",
    "rgb_to_xyz",
    "rgba_to_hex",
    "to_hex",
    "xyz_to_lab",
]
