"""Application factory — routes and the transport guard wiring."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse
from starlette.responses import Response

from fastapi_ip_echo.components.address import ClientAddress
from fastapi_ip_echo.components.transport import HTTPSRedirect
from fastapi_ip_echo.config import Settings
from fastapi_ip_echo.context import RequestContext
from fastapi_ip_echo.dependency import flow_dependency
from fastapi_ip_echo.flow import Flow
from fastapi_ip_echo.hooks import LoggingHook
from fastapi_ip_echo.middleware import FlowMiddleware
from fastapi_ip_echo.negotiation import Negotiator, negotiate


def create_app(
    settings: Settings | None = None,
    *,
    guard: Flow | None = None,
    negotiator: Negotiator | None = None,
) -> FastAPI:
    """Build the service.

    ``guard`` runs before routing on every request and defaults to
    ``HTTPSRedirect`` with logging. ``negotiator`` renders ``GET /``.
    """
    settings = settings or Settings()
    guard = guard or Flow(HTTPSRedirect()).add_hook(LoggingHook())
    render = negotiator or negotiate
    client = flow_dependency(Flow(ClientAddress()))

    app = FastAPI(title="fastapi-ip-echo", docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.add_middleware(FlowMiddleware, flow=guard)

    @app.api_route("/", methods=["GET", "HEAD"])
    async def index(
        ctx: RequestContext = Depends(client),  # noqa: B008
    ) -> Response:
        return render(ctx)

    @app.api_route("/json", methods=["GET", "HEAD"])
    async def address_json(
        ctx: RequestContext = Depends(client),  # noqa: B008
    ) -> dict[str, Any]:
        return {"ip": ctx.address}

    @app.api_route("/ip", methods=["GET", "HEAD"], response_class=PlainTextResponse)
    async def address_text(
        ctx: RequestContext = Depends(client),  # noqa: B008
    ) -> str:
        return ctx.address or ""

    @app.api_route("/health", methods=["GET", "HEAD"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
