"""
vary_middleware.main

Purpose:
    FastAPI application entrypoint for the Vary middleware example service.

Notes:
    - create_app() builds the FastAPI app (routes, error handlers, logging).
    - create_asgi_app() wraps it in VaryMiddleware, outside Starlette's
      ServerErrorMiddleware, so even the 500 envelope for an unhandled error
      carries Vary. The wrap validates the configuration immediately.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from vary_middleware.contracts.vary_policy import VaryConfig
from vary_middleware.error_handlers import register_error_handlers
from vary_middleware.logging.logging_config import configure_logging
from vary_middleware.middleware.vary import VaryMiddleware
from vary_middleware.routes.greeting import router as greeting_router
from vary_middleware.routes.health import router as health_router
from vary_middleware.settings import Settings, get_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(greeting_router)

    return app


def create_asgi_app(settings: Settings | None = None, *, app: FastAPI | None = None) -> VaryMiddleware:
    settings = settings or get_settings()
    if app is None:
        app = create_app(settings)
    return VaryMiddleware(app, config=VaryConfig(headers=tuple(settings.vary_headers)))


def serve(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    uvicorn.run(create_asgi_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
