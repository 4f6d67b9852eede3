"""
Operational routes: the service banner and the health check.

``GET /health`` reports the loaded database version and message
count.  If the store cannot provide the database (for example the
file could not be loaded) it answers 500 with
``{"status": "error", "message": ...}``.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from politely_failed_api.app.schemas.message import HealthResponse, ServiceInfo
from politely_failed_api.app.services.message_service import MessageService, get_message_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=ServiceInfo)
async def service_info(request: Request) -> ServiceInfo:
    app = request.app
    return ServiceInfo(name=app.title, version=app.version, health="/health", api="/api/v1")


@router.get("/health", response_model=HealthResponse)
async def health(service: MessageService = Depends(get_message_service)):
    try:
        return HealthResponse(
            status="ok",
            version=service.get_version(),
            messagesLoaded=service.get_message_count(),
        )
    except Exception as exc:
        logger.exception("Health check failed")
        return JSONResponse(status_code=500, content={"status": "error", "message": str(exc)})
