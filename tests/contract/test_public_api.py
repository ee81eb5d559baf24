"""Contract tests — verify all public symbols are importable from top-level."""

from __future__ import annotations

import fastapi_ip_echo

PUBLIC_SYMBOLS = [
    # Core
    "Flow",
    "RequestContext",
    "FlowComponent",
    "ComponentCategory",
    "flow_dependency",
    "run_flow",
    "FlowMiddleware",
    # Exceptions
    "FlowException",
    "FlowAbort",
    "RedirectRequired",
    "FlowInternalError",
    # Hooks
    "FlowHook",
    "AfterComponent",
    "LoggingHook",
    # Components
    "HTTPSRedirect",
    "ClientAddress",
    "is_secure",
    "resolve_client_address",
    "strip_ipv4_mapped_prefix",
    # Negotiation
    "NegotiationRule",
    "Negotiator",
    "negotiate",
    # Application
    "Settings",
    "configure_logging",
    "create_app",
]


class TestPublicAPIContract:
    def test_all_symbols_importable(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert hasattr(fastapi_ip_echo, symbol), (
                f"Symbol '{symbol}' not found in fastapi_ip_echo"
            )

    def test_all_matches_public_symbols(self) -> None:
        assert sorted(fastapi_ip_echo.__all__) == sorted(PUBLIC_SYMBOLS)

    def test_exception_hierarchy(self) -> None:
        from fastapi_ip_echo import (
            FlowAbort,
            FlowException,
            FlowInternalError,
            RedirectRequired,
        )

        assert issubclass(FlowAbort, FlowException)
        assert issubclass(RedirectRequired, FlowAbort)
        assert issubclass(FlowInternalError, FlowException)
        assert not issubclass(FlowInternalError, FlowAbort)

    def test_request_context_is_dataclass(self) -> None:
        from dataclasses import fields

        from fastapi_ip_echo import RequestContext

        field_names = [f.name for f in fields(RequestContext)]
        assert field_names == ["request", "address", "state"]
