"""Pydantic schemas for the content filter API."""

from pydantic import BaseModel


class CheckRequest(BaseModel):
    """Text to run through the filter."""

    text: str


class CheckResponse(BaseModel):
    """Verdict for accepted text."""

    message: str
