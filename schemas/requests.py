from pydantic import BaseModel, Field
from typing import Literal

TargetSpace = Literal["hex", "rgb", "hsl", "hsv", "xyz", "lab"]


class ColorParseRequest(BaseModel):
    code: str = Field(..., description="The color string to parse (named, hex, rgb[a](), hsl[a]())")


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color string to convert")
    target: TargetSpace = Field(..., description="The target color format to convert to")
