"""Pydantic model for the JSON error envelope."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx API response."""

    error: str = Field(..., description="Short error kind, e.g. ``Validation Error``")
    message: str = Field(..., description="Human‑readable description")
    timestamp: str
