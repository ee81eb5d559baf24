"""Built-in flow components."""

from fastapi_ip_echo.components.address import (
    ClientAddress,
    resolve_client_address,
    strip_ipv4_mapped_prefix,
)
from fastapi_ip_echo.components.transport import HTTPSRedirect, is_secure

__all__ = [
    "ClientAddress",
    "HTTPSRedirect",
    "is_secure",
    "resolve_client_address",
    "strip_ipv4_mapped_prefix",
]
