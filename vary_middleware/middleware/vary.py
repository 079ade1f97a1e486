"""
vary_middleware.middleware.vary

Purpose:
    ASGI middleware that adds a static Vary response header to every HTTP response,
    so caches key stored entries by the listed request headers (content negotiation,
    encoding, language, or custom headers like HX-Request).

Usage:
    app = VaryMiddleware(fastapi_app, config=VaryConfig(headers=("Accept",)))
    # or, inside the app's own stack (error pages from ServerErrorMiddleware
    # are then outside it):
    fastapi_app.add_middleware(VaryMiddleware, config=VaryConfig(headers=("Accept",)))

Notes:
    - The header value is validated and computed once, when the middleware is built.
      Wrapping builds it immediately; add_middleware defers it to the first ASGI
      call (lifespan startup under a server). Either way a bad configuration stops
      the app before it serves traffic.
    - The entry is added to a copy of the response start headers, never merged. Per
      RFC 7230 §3.2.2 repeated fields are equivalent to one comma-joined field,
      so a downstream Vary and ours both go out as separate lines.
    - Any response started downstream carries the header, including error responses
      rendered by the app's exception handlers. Exceptions propagate unchanged.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from vary_middleware.contracts.error_contract import VaryErrorCode
from vary_middleware.contracts.vary_policy import (
    VARY_HEADER,
    VARY_SEPARATOR,
    VARY_WILDCARD,
    VaryConfig,
)
from vary_middleware.errors import VaryConfigError

if TYPE_CHECKING:  # pragma: no cover
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


def _join_headers(headers: Sequence[str]) -> str:
    return VARY_SEPARATOR.join(headers)


def build_vary_value(
    headers: Sequence[str],
    *,
    join: Callable[[Sequence[str]], str] = _join_headers,
) -> str:
    """
    Validate configured header names and compute the Vary header value.

    Rules (checked in order):
      - no entries -> EMPTY_HEADERS
      - "*" present: alone -> "*"; with anything else -> WILDCARD_MUST_BE_ALONE
      - "" entry -> EMPTY_HEADER_NAME
      - otherwise names joined with ", " in the given order

    `join` is the only place a new string is built; the wildcard and error
    paths never call it.
    """
    if len(headers) == 0:
        raise VaryConfigError(
            VaryErrorCode.EMPTY_HEADERS,
            "Vary middleware needs at least one header name",
        )

    for name in headers:
        if name == VARY_WILDCARD:
            if len(headers) != 1:
                raise VaryConfigError(
                    VaryErrorCode.WILDCARD_MUST_BE_ALONE,
                    f"'{VARY_WILDCARD}' cannot be combined with other header names",
                )
            return VARY_WILDCARD
        if not name:
            raise VaryConfigError(
                VaryErrorCode.EMPTY_HEADER_NAME,
                "Vary header names must be non-empty",
            )

    return join(headers)


class VaryMiddleware:
    """Append a pre-computed ``Vary`` header to every HTTP response."""

    def __init__(self, app: ASGIApp, config: VaryConfig) -> None:
        self.app = app
        try:
            self.vary_value = build_vary_value(config.headers)
        except VaryConfigError as exc:
            logger.warning("Rejected Vary configuration %r (%s)", list(config.headers), exc)
            raise

        # Latin-1 matches Starlette's own header encoding.
        self._raw_header = (VARY_HEADER.lower().encode("latin-1"), self.vary_value.encode("latin-1"))
        logger.info("Vary middleware configured: %s: %s", VARY_HEADER, self.vary_value)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        raw_header = self._raw_header

        async def send_with_vary(message: Message) -> None:
            if message["type"] == "http.response.start":
                # Fresh list: the downstream list may belong to a reused Response.
                message["headers"] = [*(message.get("headers") or ()), raw_header]
            await send(message)

        await self.app(scope, receive, send_with_vary)
