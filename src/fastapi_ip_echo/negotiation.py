"""Response negotiation — ordered (predicate, renderer) rule table.

The first rule whose predicate matches renders the response. An explicit
``format``/``f`` query selector is checked before the ``Accept`` header,
and plain text is the fallback for command-line clients.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from fastapi_ip_echo._types import Predicate, Renderer
from fastapi_ip_echo.context import RequestContext
from fastapi_ip_echo.pages import render_index

FORMAT_PARAMS = ("format", "f")
JSON_FORMATS = frozenset({"json"})
TEXT_FORMATS = frozenset({"text", "plain"})


@dataclass(frozen=True)
class NegotiationRule:
    """Single entry of the negotiation table."""

    name: str
    matches: Predicate
    render: Renderer


def requested_format(ctx: RequestContext) -> str | None:
    params = ctx.request.query_params
    for name in FORMAT_PARAMS:
        value = params.get(name)
        if value:
            return value
    return None


def _accepts(ctx: RequestContext, media_type: str) -> bool:
    return media_type in ctx.request.headers.get("accept", "")


def render_json(ctx: RequestContext) -> Response:
    return JSONResponse({"ip": ctx.address})


def render_text(ctx: RequestContext) -> Response:
    return PlainTextResponse(ctx.address or "")


def render_html(ctx: RequestContext) -> Response:
    request = ctx.request
    host = request.headers.get("host") or request.url.netloc
    page = render_index(ctx.address or "", scheme=request.url.scheme, host=host)
    return HTMLResponse(page)


DEFAULT_RULES: tuple[NegotiationRule, ...] = (
    NegotiationRule(
        "format-json", lambda ctx: requested_format(ctx) in JSON_FORMATS, render_json
    ),
    NegotiationRule(
        "format-text", lambda ctx: requested_format(ctx) in TEXT_FORMATS, render_text
    ),
    NegotiationRule(
        "accept-json", lambda ctx: _accepts(ctx, "application/json"), render_json
    ),
    NegotiationRule("accept-html", lambda ctx: _accepts(ctx, "text/html"), render_html),
)


class Negotiator:
    """Evaluates rules in order and falls back to ``default``."""

    def __init__(
        self,
        rules: Iterable[NegotiationRule] = DEFAULT_RULES,
        *,
        default: Renderer = render_text,
    ) -> None:
        self._rules = tuple(rules)
        self._default = default

    @property
    def rules(self) -> tuple[NegotiationRule, ...]:
        return self._rules

    def select(self, ctx: RequestContext) -> Renderer:
        for rule in self._rules:
            if rule.matches(ctx):
                return rule.render
        return self._default

    def __call__(self, ctx: RequestContext) -> Response:
        return self.select(ctx)(ctx)


negotiate = Negotiator()
