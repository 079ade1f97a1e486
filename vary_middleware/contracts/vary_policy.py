"""
vary_middleware.contracts.vary_policy

Purpose:
    Configuration value and wire constants for the Vary middleware.
    Keeps the header name, wildcard token and separator in one place.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

VARY_HEADER = "Vary"
VARY_WILDCARD = "*"
VARY_SEPARATOR = ", "


@dataclass(frozen=True)
class VaryConfig:
    """
    Request header names to list in the Vary response header.

    Must contain at least one entry. Use ("*",) to signal that the response
    varies on factors other than request headers (effectively uncacheable).
    """

    headers: Sequence[str] = ("Accept",)
