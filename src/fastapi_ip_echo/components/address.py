"""Address components — ClientAddress and the resolver it uses.

Sources are consulted in a fixed order:

1. ``X-Forwarded-For``, leftmost entry. Any direct client can set this
   header; no upstream proxy allow-list is applied.
2. ``X-Real-IP``, verbatim.
3. ``request.client.host``, the socket peer.

The result is a string transform only. Malformed header values are
returned as they arrive.
"""

from __future__ import annotations

from starlette.requests import Request

from fastapi_ip_echo.component import ComponentCategory, FlowComponent
from fastapi_ip_echo.context import RequestContext

IPV4_MAPPED_PREFIX = "::ffff:"


def strip_ipv4_mapped_prefix(address: str) -> str:
    """``::ffff:192.0.2.1`` -> ``192.0.2.1``; anything else unchanged."""
    if address.startswith(IPV4_MAPPED_PREFIX):
        return address[len(IPV4_MAPPED_PREFIX) :]
    return address


def resolve_client_address(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        address = forwarded.split(",")[0].strip()
    else:
        address = request.headers.get("x-real-ip") or ""
        if not address and request.client is not None:
            address = request.client.host
    return strip_ipv4_mapped_prefix(address)


class ClientAddress(FlowComponent):
    """Stores the caller's apparent address in ``ctx.address``."""

    category = ComponentCategory.ADDRESS

    async def resolve(self, ctx: RequestContext) -> None:
        ctx.address = resolve_client_address(ctx.request)
