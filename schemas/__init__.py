from .requests import ColorConvertRequest, ColorParseRequest, TargetSpace
from .responses import SuccessResponse, ErrorResponse

__all__ = ["ColorConvertRequest", "ColorParseRequest", "TargetSpace", "SuccessResponse", "ErrorResponse"]
