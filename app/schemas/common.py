"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")

# Ids are 32-bit INTEGER columns; anything outside this range cannot exist.
MAX_ID = 2**31 - 1


class ApiResponse(BaseModel, Generic[DataT]):
    """Success envelope: {success, message, data}. Errors use ErrorResponse."""

    success: bool = Field(default=True, description="Always true for this envelope")
    message: str | None = Field(default=None, description="Human-readable outcome")
    data: DataT | None = Field(default=None, description="Entity or list of entities")


class ErrorResponse(BaseModel):
    """Error envelope rendered by the global error handlers."""

    success: bool = Field(default=False, description="Always false for this envelope")
    error: str = Field(..., description="Human-readable error message")
