"""Response envelope shared by all routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """``{"data": ..., "error": ...}``; exactly one of the two is set."""

    data: T | None = None
    error: str | None = None


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
