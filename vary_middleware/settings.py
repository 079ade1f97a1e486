# vary_middleware/settings.py
"""
vary_middleware.settings

Purpose:
    Centralized configuration for the example FastAPI service.
    Keeps deployment flexible and avoids hard-coded app metadata.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Settings(BaseModel):
    service_name: str = Field(default="vary-middleware-demo")
    service_version: str = Field(default="0.1.0")

    # Request headers the greeting representation depends on.
    vary_headers: list[str] = Field(default_factory=lambda: ["Accept"])

    log_level: str = Field(default="INFO")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080)


def get_settings() -> Settings:
    return Settings()
