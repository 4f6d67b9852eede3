"""
Pydantic models for message responses.

Field names follow the public JSON contract of the service, which is
why ``HealthResponse`` and ``ReloadResponse`` use ``messagesLoaded``
rather than a snake‑case name.
"""

from typing import List

from pydantic import BaseModel, Field


class RandomMessageResponse(BaseModel):
    message: str = Field(..., description="The selected message")
    category: str
    tone: str
    timestamp: str = Field(..., description="ISO‑8601 UTC time the message was selected")


class AllMessagesResponse(BaseModel):
    category: str
    tone: str
    messages: List[str]
    count: int = Field(..., description="Number of entries in ``messages``")


class CategoriesResponse(BaseModel):
    categories: List[str]
    tones: List[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    messagesLoaded: int


class ReloadResponse(BaseModel):
    status: str
    version: str
    messagesLoaded: int


class ServiceInfo(BaseModel):
    """Banner returned by ``GET /``."""

    name: str
    version: str
    health: str
    api: str
