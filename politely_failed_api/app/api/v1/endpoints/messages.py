"""
Message endpoints for API v1.

``GET /messages/random`` returns one randomly chosen message for a
category and tone, as JSON or (with ``format=text``) as plain text.
``GET /messages`` returns every message for the pair.  Query
parameters are validated before the service is called; invalid input
yields HTTP 400.  A pair with no messages is an error for the random
route (HTTP 500) but a valid empty list for the listing route.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from politely_failed_api.app.api.v1.params import parse_category, parse_format, parse_tone
from politely_failed_api.app.core.utils import utc_timestamp
from politely_failed_api.app.schemas.error import ErrorResponse
from politely_failed_api.app.schemas.message import AllMessagesResponse, RandomMessageResponse
from politely_failed_api.app.services.message_service import MessageService, get_message_service

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/random", response_model=RandomMessageResponse, responses=ERROR_RESPONSES)
async def get_random_message(
    category: Optional[str] = Query(None, description="Failure category, e.g. ``network``"),
    tone: Optional[str] = Query(None, description="``casual``, ``professional`` or ``humorous``"),
    output_format: Optional[str] = Query(None, alias="format", description="``json`` (default) or ``text``"),
    service: MessageService = Depends(get_message_service),
) -> Union[RandomMessageResponse, PlainTextResponse]:
    """Return a random message for the given category and tone."""
    category_ = parse_category(category)
    tone_ = parse_tone(tone)
    format_ = parse_format(output_format)

    message = service.get_random_message(category_, tone_)

    if format_ == "text":
        return PlainTextResponse(message)
    return RandomMessageResponse(
        message=message,
        category=category_.value,
        tone=tone_.value,
        timestamp=utc_timestamp(),
    )


@router.get("", response_model=AllMessagesResponse, responses=ERROR_RESPONSES)
async def list_messages(
    category: Optional[str] = Query(None, description="Failure category, e.g. ``network``"),
    tone: Optional[str] = Query(None, description="``casual``, ``professional`` or ``humorous``"),
    service: MessageService = Depends(get_message_service),
) -> AllMessagesResponse:
    """Return all messages for the given category and tone."""
    category_ = parse_category(category)
    tone_ = parse_tone(tone)

    messages = service.get_all_messages(category_, tone_)
    return AllMessagesResponse(
        category=category_.value,
        tone=tone_.value,
        messages=messages,
        count=len(messages),
    )
