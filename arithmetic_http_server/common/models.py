"""Pydantic models for the JSON bodies returned by the server."""
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SuccessResponse(BaseModel):
    """Body of a successful computation."""

    model_config = ConfigDict(frozen=True)

    status: Literal[0] = Field(default=0, description="Always 0 for a success")
    result: float = Field(..., allow_inf_nan=False, description="Finite float32 result of the operation")


class ErrorResponse(BaseModel):
    """Body of a rejected request."""

    model_config = ConfigDict(frozen=True)

    status: Literal[-1] = Field(default=-1, description="Always -1 for an error")
    error_message: str = Field(..., description="Human readable reason of the failure")
    error_code: int = Field(..., ge=400, le=599, description="HTTP status code of the response")


OperationResponse = Union[SuccessResponse, ErrorResponse]
