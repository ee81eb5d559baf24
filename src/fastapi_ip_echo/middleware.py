"""FlowMiddleware — runs a flow before routing for every HTTP request."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response
from starlette.types import ASGIApp

from fastapi_ip_echo.dependency import run_flow
from fastapi_ip_echo.exceptions import FlowAbort, FlowInternalError, RedirectRequired
from fastapi_ip_echo.flow import Flow


class FlowMiddleware(BaseHTTPMiddleware):
    """Applies a flow to every request, including paths with no route."""

    def __init__(self, app: ASGIApp, *, flow: Flow) -> None:
        super().__init__(app)
        self._resolved = flow.resolve()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            ctx = await run_flow(self._resolved, request)
        except RedirectRequired as exc:
            return RedirectResponse(exc.location, status_code=exc.status_code)
        except FlowAbort as exc:
            return JSONResponse(
                {"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers
            )
        except FlowInternalError as exc:
            return JSONResponse({"detail": exc.detail}, status_code=500)

        request.state.flow_context = ctx
        return await call_next(request)
