"""FlowHook base, convenience hooks and the logging hook."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi_ip_echo.component import FlowComponent
from fastapi_ip_echo.context import RequestContext
from fastapi_ip_echo.exceptions import FlowAbort, FlowException

logger = logging.getLogger(__name__)


class FlowHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default."""

    async def on_flow_start(self, ctx: RequestContext) -> None:
        pass

    async def on_flow_end(self, ctx: RequestContext) -> None:
        pass

    async def on_component(
        self,
        ctx: RequestContext,
        component: FlowComponent,
        error: FlowException | None,
    ) -> None:
        pass


class AfterComponent(FlowHook):
    """Convenience hook that fires after each component."""

    def __init__(
        self,
        callback: Callable[
            [RequestContext, FlowComponent, FlowException | None], Awaitable[None]
        ],
    ) -> None:
        self._callback = callback

    async def on_component(
        self,
        ctx: RequestContext,
        component: FlowComponent,
        error: FlowException | None,
    ) -> None:
        await self._callback(ctx, component, error)


class LoggingHook(FlowHook):
    """Logs component outcomes: passes at DEBUG, aborts at INFO."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    async def on_component(
        self,
        ctx: RequestContext,
        component: FlowComponent,
        error: FlowException | None,
    ) -> None:
        name = type(component).__name__
        path = ctx.request.url.path
        if error is None:
            self._log.debug("%s passed for %s", name, path)
        elif isinstance(error, FlowAbort):
            self._log.info(
                "%s aborted %s with %d: %s",
                name,
                path,
                error.status_code,
                error.detail,
            )
        else:
            self._log.warning("%s failed for %s: %s", name, path, error)
