"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Callable

from starlette.responses import Response

from fastapi_ip_echo.context import RequestContext

# Negotiation rule parts
Predicate = Callable[[RequestContext], bool]
Renderer = Callable[[RequestContext], Response]
