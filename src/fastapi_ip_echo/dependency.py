"""Flow execution and flow_dependency() — FastAPI-compatible dependency factory."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import HTTPException
from starlette.requests import Request

from fastapi_ip_echo.context import RequestContext
from fastapi_ip_echo.exceptions import FlowAbort, FlowException, FlowInternalError
from fastapi_ip_echo.flow import Flow, ResolvedFlow


async def run_flow(resolved: ResolvedFlow, request: Request) -> RequestContext:
    """Execute a resolved flow against a request.

    ``FlowAbort`` propagates unchanged. Any other exception raised by a
    component is wrapped in ``FlowInternalError``. Hooks see every
    component outcome and always receive ``on_flow_end``.
    """
    ctx = RequestContext(request=request)

    for hook in resolved.hooks:
        await hook.on_flow_start(ctx)

    try:
        for component in resolved.components:
            try:
                await component.resolve(ctx)
            except FlowException as exc:
                for hook in resolved.hooks:
                    await hook.on_component(ctx, component, exc)
                raise
            except Exception as exc:
                wrapped = FlowInternalError("Internal flow error", cause=exc)
                for hook in resolved.hooks:
                    await hook.on_component(ctx, component, wrapped)
                raise wrapped from exc
            else:
                for hook in resolved.hooks:
                    await hook.on_component(ctx, component, None)
    finally:
        for hook in resolved.hooks:
            await hook.on_flow_end(ctx)

    return ctx


def flow_dependency(flow: Flow) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI-compatible dependency that executes the flow."""
    resolved = flow.resolve()

    async def dependency(request: Request) -> RequestContext:
        try:
            return await run_flow(resolved, request)
        except FlowAbort as exc:
            raise HTTPException(
                status_code=exc.status_code, detail=exc.detail, headers=exc.headers
            ) from exc
        except FlowInternalError as exc:
            raise HTTPException(status_code=500, detail=exc.detail) from exc

    dependency._flow_resolved = resolved  # type: ignore[attr-defined]

    return dependency
