"""Categories endpoint for API v1: lists the accepted category and tone values."""

from fastapi import APIRouter, Depends

from politely_failed_api.app.schemas.message import CategoriesResponse
from politely_failed_api.app.services.message_service import MessageService, get_message_service

router = APIRouter()


@router.get("", response_model=CategoriesResponse)
async def list_categories(service: MessageService = Depends(get_message_service)) -> CategoriesResponse:
    return CategoriesResponse(categories=service.get_categories(), tones=service.get_tones())
