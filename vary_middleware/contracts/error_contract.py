"""
vary_middleware.contracts.error_contract

Purpose:
    Stable error contracts:
      - VaryErrorCode: closed set of middleware configuration mistakes.
      - ApiErrorCode / ErrorResponse: JSON envelope returned by the example service.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class VaryErrorCode(str, Enum):
    EMPTY_HEADERS = "EMPTY_HEADERS"
    WILDCARD_MUST_BE_ALONE = "WILDCARD_MUST_BE_ALONE"
    EMPTY_HEADER_NAME = "EMPTY_HEADER_NAME"


class ApiErrorCode(str, Enum):
    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Content negotiation
    NOT_ACCEPTABLE = "NOT_ACCEPTABLE"


class ErrorResponse(BaseModel):
    error_code: ApiErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
