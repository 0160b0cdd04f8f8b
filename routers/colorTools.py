"""
Color parsing and conversion endpoints, with RGBA as the hub.
Supported input: named, hex 3/4/6/8, rgb/rgba, hsl/hsla.
Targets: hex, rgb, hsl, hsv, xyz, lab.
"""

from fastapi import HTTPException, APIRouter

from chroma_convert import Chroma, ChromaError, RGBA
from logging_config import get_logger
from schemas.requests import (
    ColorConvertRequest,
    ColorParseRequest,
)
from schemas.responses import SuccessResponse, ErrorResponse

logger = get_logger("api")

# Formatting helpers ---------------------------------------------

def round1(x: float) -> float:
    """Round to 1 decimal place."""
    return round(x * 10) / 10

def round2(x: float) -> float:
    """Round to 2 decimal places."""
    return round(x * 100) / 100

def round3(x: float) -> float:
    """Round to 3 decimal places."""
    return round(x * 1000) / 1000

def roundp(x: float) -> str:
    """Fraction as a percentage with 1 decimal."""
    return f"{round(x * 1000) / 10}%"

def _has_alpha(alpha) -> bool:
    return alpha is not None and alpha < 1

# Conversions from a parsed color --------------------------------

def chroma_to_rgb_string(color: Chroma) -> str:
    """Format as rgb(r, g, b) or rgba(r, g, b, a)."""
    c = color.rgba
    if not _has_alpha(c.alpha):
        return f"rgb({c.r}, {c.g}, {c.b})"
    return f"rgba({c.r}, {c.g}, {c.b}, {round3(c.alpha)})"

def chroma_to_hsl_string(color: Chroma) -> str:
    """Format as hsl(h, s%, l%) or hsla(h, s%, l%, a)."""
    hsl = color.to_hsl()
    if not _has_alpha(hsl.alpha):
        return f"hsl({round1(hsl.h)}, {roundp(hsl.s)}, {roundp(hsl.l)})"
    return f"hsla({round1(hsl.h)}, {roundp(hsl.s)}, {roundp(hsl.l)}, {round3(hsl.alpha)})"

def chroma_to_hsv_string(color: Chroma) -> str:
    """Format as hsv(h, s%, v%) or hsva(h, s%, v%, a)."""
    hsv = color.to_hsv()
    if not _has_alpha(hsv.alpha):
        return f"hsv({round1(hsv.h)}, {roundp(hsv.s)}, {roundp(hsv.v)})"
    return f"hsva({round1(hsv.h)}, {roundp(hsv.s)}, {roundp(hsv.v)}, {round3(hsv.alpha)})"

def chroma_to_xyz_string(color: Chroma) -> str:
    xyz = color.to_xyz()
    return f"xyz({round2(xyz.x)}, {round2(xyz.y)}, {round2(xyz.z)})"

def chroma_to_lab_string(color: Chroma) -> str:
    lab = color.to_lab()
    return f"lab({round2(lab.l)}, {round2(lab.a)}, {round2(lab.b)})"

FORMATTERS = {
    "hex": lambda color: str(color.to_hex()),
    "rgb": chroma_to_rgb_string,
    "hsl": chroma_to_hsl_string,
    "hsv": chroma_to_hsv_string,
    "xyz": chroma_to_xyz_string,
    "lab": chroma_to_lab_string,
}

def _parse_or_400(code: str) -> Chroma:
    try:
        return Chroma(code)
    except ChromaError as e:
        logger.warning("Rejected color %r: %s", code, e)
        raise HTTPException(status_code=400, detail=str(e))

# Targeted conversion API ----------------------------------------

router = APIRouter()

@router.post("/parse_color", response_model=RGBA, responses={400: {"model": ErrorResponse}}, operation_id="parse_color", description="Parse a color string to RGBA")
async def parse(request: ColorParseRequest):
    """Parse a color string to its canonical RGBA value."""
    return _parse_or_400(request.code).rgba

@router.post("/convert_color_code", response_model=SuccessResponse, responses={400: {"model": ErrorResponse}}, operation_id="convert_color_code", description="Convert a color string to a target format")
async def parse_and_convert(request: ColorConvertRequest):
    """Parse a color string and convert it to the target format."""
    color = _parse_or_400(request.code)
    try:
        message = FORMATTERS[request.target](color)
    except ChromaError as e:
        # out-of-range channels cannot be written as hex
        logger.warning("Cannot convert %r to %s: %s", request.code, request.target, e)
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Converted %r to %s: %s", request.code, request.target, message)
    return SuccessResponse(success=True, message=message)
