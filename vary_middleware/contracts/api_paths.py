# vary_middleware/contracts/api_paths.py
"""
vary_middleware.contracts.api_paths

Purpose:
    Central definition of example service route paths.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    health: str = "/health"
    greeting: str = "/greeting"
