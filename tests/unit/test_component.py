"""Tests for ComponentCategory enum and FlowComponent ABC."""

from __future__ import annotations

import pytest

from fastapi_ip_echo.component import ComponentCategory, FlowComponent
from fastapi_ip_echo.context import RequestContext


class TestComponentCategory:
    def test_member_values(self) -> None:
        assert ComponentCategory.TRANSPORT.value == "transport"
        assert ComponentCategory.ADDRESS.value == "address"
        assert ComponentCategory.CUSTOM.value == "custom"

    def test_transport_runs_before_address(self) -> None:
        ordered = sorted(ComponentCategory, key=lambda c: c.order)
        assert ordered == [
            ComponentCategory.TRANSPORT,
            ComponentCategory.ADDRESS,
            ComponentCategory.CUSTOM,
        ]


class TestFlowComponent:
    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            FlowComponent()  # type: ignore[abstract]

    async def test_subclass_resolves(self, make_request: object) -> None:
        class Tagger(FlowComponent):
            category = ComponentCategory.CUSTOM

            async def resolve(self, ctx: RequestContext) -> None:
                ctx.state["tagged"] = True

        ctx = RequestContext(request=make_request())  # type: ignore[operator]
        await Tagger().resolve(ctx)
        assert ctx.state["tagged"] is True
