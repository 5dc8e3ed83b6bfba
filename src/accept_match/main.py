import logging

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route
from starlette.status import HTTP_400_BAD_REQUEST

from .config import LOG_LEVEL
from .endpoint_utils import get_accept, get_response
from .matcher import best_match, quality
from .media_range import MalformedMediaRange, parse_ranges
from .models import BestMatchResult, ParseResult, QualityResult

logger = logging.getLogger(__name__)


if not logging.root.hasHandlers():  # pragma: no cover
    logging.basicConfig(
        level=logging.WARNING,
        handlers=logging.getLogger("uvicorn").handlers or None,
    )
    logging.getLogger(__package__).setLevel(LOG_LEVEL)


def _bad_request(e: MalformedMediaRange) -> HTTPException:
    logger.info("Bad request: %s", e)
    return HTTPException(HTTP_400_BAD_REQUEST, detail=str(e))


async def parse(request: Request) -> Response:
    accept = get_accept(request)
    try:
        ranges = parse_ranges(accept)
    except MalformedMediaRange as e:
        raise _bad_request(e) from e

    return get_response(request, ParseResult(accept=accept, ranges=ranges), "parse.html")


async def media_type_quality(request: Request) -> Response:
    media_type = request.query_params.get("type")
    if not media_type:
        raise HTTPException(HTTP_400_BAD_REQUEST, detail="Missing query parameter 'type'")
    accept = get_accept(request)
    try:
        q = quality(media_type, accept)
    except MalformedMediaRange as e:
        raise _bad_request(e) from e

    result = QualityResult(media_type=media_type, accept=accept, quality=q)
    return get_response(request, result, "quality.html")


async def media_type_best_match(request: Request) -> Response:
    supported = request.query_params.getlist("supported")
    accept = get_accept(request)
    try:
        match = best_match(supported, accept)
    except MalformedMediaRange as e:
        raise _bad_request(e) from e

    result = BestMatchResult(supported=supported, accept=accept, match=match)
    return get_response(request, result, "best_match.html")


async def ping(request: Request) -> PlainTextResponse:
    return PlainTextResponse("", headers={"Cache-Control": "no-store"})


routes = [
    Route("/parse", endpoint=parse),
    Route("/quality", endpoint=media_type_quality),
    Route("/best-match", endpoint=media_type_best_match),
    # internal
    Route("/ping", endpoint=ping),
]

app = Starlette(routes=routes)
