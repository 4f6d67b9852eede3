"""
Administrative endpoints for API v1.

``POST /admin/reload`` re‑reads the messages file without restarting
the process.  The router is mounted by ``create_app`` only when
``settings.enable_reload_endpoint`` is true.  If the new file is
invalid the previous messages keep being served and the error is
returned as HTTP 500.
"""

import logging

from fastapi import APIRouter, Depends

from politely_failed_api.app.schemas.message import ReloadResponse
from politely_failed_api.app.services.message_service import MessageService, get_message_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/reload", response_model=ReloadResponse)
async def reload_messages(service: MessageService = Depends(get_message_service)) -> ReloadResponse:
    """Reload the message database from disk."""
    database = service.store.reload()
    logger.info("Message database reloaded via API")
    return ReloadResponse(status="reloaded", version=database.version, messagesLoaded=database.total())
