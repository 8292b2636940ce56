"""
Common response models.

Generic reply wrappers used on the worker boundary.

Dependencies: pydantic
System role: Task reply structures
"""

from typing import Generic, Literal, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: Literal[True] = True
    result: T


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: Literal[False] = False
    error: str = Field(description="Error message")
