"""Tests for FlowHook, AfterComponent and LoggingHook."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import AsyncMock

import pytest

from fastapi_ip_echo.component import ComponentCategory, FlowComponent
from fastapi_ip_echo.context import RequestContext
from fastapi_ip_echo.dependency import run_flow
from fastapi_ip_echo.exceptions import FlowAbort, FlowException, FlowInternalError
from fastapi_ip_echo.flow import Flow
from fastapi_ip_echo.hooks import AfterComponent, FlowHook, LoggingHook


class _AddressStub(FlowComponent):
    category = ComponentCategory.ADDRESS

    async def resolve(self, ctx: RequestContext) -> None:
        ctx.address = "192.0.2.1"


class _FailStub(FlowComponent):
    category = ComponentCategory.CUSTOM

    async def resolve(self, ctx: RequestContext) -> None:
        raise FlowAbort("denied", status_code=403)


class _RecordingHook(FlowHook):
    def __init__(self) -> None:
        self.events: list[str] = []

    async def on_flow_start(self, ctx: RequestContext) -> None:
        self.events.append("start")

    async def on_flow_end(self, ctx: RequestContext) -> None:
        self.events.append("end")

    async def on_component(
        self,
        ctx: RequestContext,
        component: FlowComponent,
        error: FlowException | None,
    ) -> None:
        self.events.append("fail" if error else type(component).__name__)


class TestFlowHookBase:
    async def test_default_methods_are_noop(self, make_request: Any) -> None:
        hook = FlowHook()
        ctx = RequestContext(request=make_request())
        await hook.on_flow_start(ctx)
        await hook.on_flow_end(ctx)
        await hook.on_component(ctx, _AddressStub(), None)

    async def test_lifecycle_order(self, make_request: Any) -> None:
        hook = _RecordingHook()
        flow = Flow(_AddressStub()).add_hook(hook)
        await run_flow(flow.resolve(), make_request())
        assert hook.events == ["start", "_AddressStub", "end"]

    async def test_flow_end_fires_after_abort(self, make_request: Any) -> None:
        hook = _RecordingHook()
        flow = Flow(_AddressStub(), _FailStub()).add_hook(hook)
        with pytest.raises(FlowAbort):
            await run_flow(flow.resolve(), make_request())
        assert hook.events == ["start", "_AddressStub", "fail", "end"]


class TestAfterComponent:
    async def test_callback_receives_error(self, make_request: Any) -> None:
        callback = AsyncMock()
        flow = Flow(_FailStub()).add_hook(AfterComponent(callback))
        with pytest.raises(FlowAbort):
            await run_flow(flow.resolve(), make_request())
        callback.assert_awaited_once()
        _, component, error = callback.await_args.args
        assert isinstance(component, _FailStub)
        assert isinstance(error, FlowAbort)


class TestLoggingHook:
    async def test_logs_pass_at_debug(
        self, make_request: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        flow = Flow(_AddressStub()).add_hook(LoggingHook())
        with caplog.at_level(logging.DEBUG, logger="fastapi_ip_echo.hooks"):
            await run_flow(flow.resolve(), make_request(path="/json"))
        assert any(
            r.levelno == logging.DEBUG and "_AddressStub passed for /json" in r.message
            for r in caplog.records
        )

    async def test_logs_abort_at_info(
        self, make_request: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        flow = Flow(_FailStub()).add_hook(LoggingHook())
        with caplog.at_level(logging.INFO, logger="fastapi_ip_echo.hooks"):
            with pytest.raises(FlowAbort):
                await run_flow(flow.resolve(), make_request(path="/ip"))
        assert "_FailStub aborted /ip with 403: denied" in caplog.text

    async def test_logs_internal_error_at_warning(
        self, make_request: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        class Broken(FlowComponent):
            category = ComponentCategory.CUSTOM

            async def resolve(self, ctx: RequestContext) -> None:
                raise RuntimeError("boom")

        flow = Flow(Broken()).add_hook(LoggingHook())
        with caplog.at_level(logging.WARNING, logger="fastapi_ip_echo.hooks"):
            with pytest.raises(FlowInternalError):
                await run_flow(flow.resolve(), make_request())
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    async def test_uses_given_logger(self, make_request: Any) -> None:
        log = logging.getLogger("test.custom")
        hook = LoggingHook(log)
        assert hook._log is log
