"""
Top‑level router for version 1 of the API.

The admin router is not included here: ``create_app`` mounts it only
when the reload endpoint is enabled in settings.
"""

from fastapi import APIRouter

from .endpoints import categories, messages

router = APIRouter()

router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
