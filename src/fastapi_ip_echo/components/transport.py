"""Transport components — HTTPSRedirect."""

from __future__ import annotations

from collections.abc import Iterable

from starlette.requests import Request

from fastapi_ip_echo.component import ComponentCategory, FlowComponent
from fastapi_ip_echo.context import RequestContext
from fastapi_ip_echo.exceptions import RedirectRequired

LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1"})

_SECURE_SCHEMES = frozenset({"https", "wss"})


def is_secure(request: Request) -> bool:
    """True if the ASGI scheme or ``X-Forwarded-Proto`` says HTTPS.

    The ASGI scheme covers both a TLS connection and the declared protocol.
    """
    if request.url.scheme in _SECURE_SCHEMES:
        return True
    return request.headers.get("x-forwarded-proto") == "https"


def secure_url(request: Request) -> str:
    """Same host (without port) and path under the https scheme."""
    url = request.url
    host = url.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    target = f"https://{host}{url.path}"
    if url.query:
        target = f"{target}?{url.query}"
    return target


class HTTPSRedirect(FlowComponent):
    """Redirects insecure requests to HTTPS unless they target a loopback host.

    The loopback exemption keeps local development on plain HTTP.
    """

    category = ComponentCategory.TRANSPORT

    def __init__(
        self,
        *,
        exempt_hosts: Iterable[str] = LOOPBACK_HOSTS,
        status_code: int = 301,
    ) -> None:
        self._exempt_hosts = frozenset(exempt_hosts)
        self._status_code = status_code

    async def resolve(self, ctx: RequestContext) -> None:
        request = ctx.request
        if is_secure(request):
            return
        if request.url.hostname in self._exempt_hosts:
            return
        raise RedirectRequired(secure_url(request), status_code=self._status_code)
