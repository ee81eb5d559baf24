"""FastAPI IP Echo - report the caller's apparent network address."""

from fastapi_ip_echo.app import create_app
from fastapi_ip_echo.component import ComponentCategory, FlowComponent
from fastapi_ip_echo.components.address import (
    ClientAddress,
    resolve_client_address,
    strip_ipv4_mapped_prefix,
)
from fastapi_ip_echo.components.transport import HTTPSRedirect, is_secure
from fastapi_ip_echo.config import Settings, configure_logging
from fastapi_ip_echo.context import RequestContext
from fastapi_ip_echo.dependency import flow_dependency, run_flow
from fastapi_ip_echo.exceptions import (
    FlowAbort,
    FlowException,
    FlowInternalError,
    RedirectRequired,
)
from fastapi_ip_echo.flow import Flow
from fastapi_ip_echo.hooks import AfterComponent, FlowHook, LoggingHook
from fastapi_ip_echo.middleware import FlowMiddleware
from fastapi_ip_echo.negotiation import NegotiationRule, Negotiator, negotiate

__all__ = [
    "AfterComponent",
    "ClientAddress",
    "ComponentCategory",
    "Flow",
    "FlowAbort",
    "FlowComponent",
    "FlowException",
    "FlowHook",
    "FlowInternalError",
    "FlowMiddleware",
    "HTTPSRedirect",
    "LoggingHook",
    "NegotiationRule",
    "Negotiator",
    "RedirectRequired",
    "RequestContext",
    "Settings",
    "configure_logging",
    "create_app",
    "flow_dependency",
    "is_secure",
    "negotiate",
    "resolve_client_address",
    "run_flow",
    "strip_ipv4_mapped_prefix",
]
