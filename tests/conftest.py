"""Shared pytest fixtures for fastapi-ip-echo tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request


@pytest.fixture
def make_request() -> Any:
    """Factory for creating raw Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
        scheme: str = "http",
        client: tuple[str, int] | None = ("203.0.113.7", 51000),
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "scheme": scheme,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
            "client": client,
        }
        return Request(scope)

    return _make
