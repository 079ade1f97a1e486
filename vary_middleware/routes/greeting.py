"""
vary_middleware.routes.greeting

Purpose:
    Content-negotiated greeting: the same URL returns HTML or JSON depending on
    the Accept request header. This is the case the Vary middleware exists for;
    without `Vary: Accept` a shared cache could hand the JSON body to a browser.

Notes:
    - HTML is preferred when the client ranks both representations equally.
    - An Accept header matching neither representation -> 406 via ApiError.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from vary_middleware.contracts.api_paths import ApiPaths
from vary_middleware.contracts.api_tags import ApiTags
from vary_middleware.contracts.error_contract import ApiErrorCode
from vary_middleware.errors import ApiError

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.greeting])

# Server preference order.
OFFERED_MEDIA_TYPES: tuple[str, ...] = ("text/html", "application/json")

GREETING_HTML = "<!DOCTYPE html>\n<html><body><h1>Hello</h1></body></html>"


def _parse_accept(accept: str) -> list[tuple[str, float]]:
    ranges: list[tuple[str, float]] = []
    for part in accept.split(","):
        media_range, *params = [p.strip() for p in part.split(";")]
        if not media_range:
            continue
        q = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    q = float(value)
                except ValueError:
                    q = 0.0
        ranges.append((media_range.lower(), q))
    return ranges


def _quality(media_type: str, ranges: list[tuple[str, float]]) -> float:
    """q of the most specific range matching media_type (0.0 if none)."""
    main_type = media_type.split("/", 1)[0]
    best_specificity = -1
    best_q = 0.0
    for media_range, q in ranges:
        if media_range == media_type:
            specificity = 2
        elif media_range == f"{main_type}/*":
            specificity = 1
        elif media_range == "*/*":
            specificity = 0
        else:
            continue
        if specificity > best_specificity:
            best_specificity, best_q = specificity, q
    return best_q


def negotiate_media_type(accept: str | None) -> str | None:
    if not accept or not accept.strip():
        return OFFERED_MEDIA_TYPES[0]

    ranges = _parse_accept(accept)
    best: str | None = None
    best_q = 0.0
    for media_type in OFFERED_MEDIA_TYPES:
        q = _quality(media_type, ranges)
        if q > best_q:
            best, best_q = media_type, q
    return best


@router.get(_paths.greeting)
def greeting(request: Request) -> Response:
    media_type = negotiate_media_type(request.headers.get("accept"))

    if media_type == "application/json":
        return JSONResponse({"message": "Hello"})
    if media_type == "text/html":
        return HTMLResponse(GREETING_HTML)

    raise ApiError(
        status_code=status.HTTP_406_NOT_ACCEPTABLE,
        error_code=ApiErrorCode.NOT_ACCEPTABLE,
        message="No acceptable representation",
        details={"available": list(OFFERED_MEDIA_TYPES)},
    )
