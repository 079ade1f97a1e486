"""
vary_middleware.errors

Purpose:
    Internal exception types.
    VaryConfigError is raised while building the middleware (never per request).
    ApiError is raised by routes; the global handler converts it to ErrorResponse.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vary_middleware.contracts.error_contract import ApiErrorCode, VaryErrorCode


# Exceptions are not frozen: contextlib assigns __traceback__ on the way out.
@dataclass(eq=False)
class VaryConfigError(ValueError):
    error_code: VaryErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


@dataclass(eq=False)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"
