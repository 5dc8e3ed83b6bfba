import logging
from collections.abc import Sequence
from enum import StrEnum

import msgspec
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_406_NOT_ACCEPTABLE

from .config import DEFAULT_ACCEPT
from .matcher import best_match
from .media_range import MalformedMediaRange
from .models import json_encoder
from .templates import TemplateResponse

logger = logging.getLogger(__name__)


class MediaType(StrEnum):
    JSON = "application/json"
    HTML = "text/html"


# earlier entries win ties
RESPONSE_MEDIA_TYPES = (MediaType.JSON, MediaType.HTML)

response_headers = {"Vary": "Accept"}


def get_accept(request: Request) -> str:
    """The ranges header a query endpoint evaluates: ?accept=, then Accept, then the default."""
    return request.query_params.get("accept") or request.headers.get("accept") or DEFAULT_ACCEPT


def negotiate(accept_header: str | None, supported: Sequence[str]) -> str:
    try:
        media_type = best_match(supported, accept_header or DEFAULT_ACCEPT)
    except MalformedMediaRange as e:
        logger.info("Rejecting malformed Accept header %r", accept_header)
        raise HTTPException(HTTP_400_BAD_REQUEST, detail=str(e)) from e

    if media_type is None:
        logger.info("No acceptable media type in %s for %r", list(supported), accept_header)
        raise HTTPException(HTTP_406_NOT_ACCEPTABLE)
    return media_type


def get_response_media_type(accept_header: str | None) -> MediaType:
    return MediaType(negotiate(accept_header, RESPONSE_MEDIA_TYPES))


def get_response(request: Request, model: msgspec.Struct, template: str) -> Response:
    media_type = get_response_media_type(request.headers.get("accept"))
    if media_type == MediaType.HTML:
        return TemplateResponse(
            request,
            template,
            context={"model": model},
            headers=response_headers,
            media_type=MediaType.HTML,
        )
    else:
        return Response(
            json_encoder.encode(model),
            headers=response_headers,
            media_type=MediaType.JSON,
        )
