from pydantic import BaseModel, Field
from typing import Optional


class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="The converted color text")


class ErrorResponse(BaseModel):
    """Body of a 400 response, as emitted by HTTPException."""

    detail: str = Field(..., description="Why the color could not be handled")
