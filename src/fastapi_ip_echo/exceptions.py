"""FlowException hierarchy for controlled flow aborts."""

from __future__ import annotations


class FlowException(Exception):
    """Base for all flow exceptions."""


class FlowAbort(FlowException):
    """Controlled abort with HTTP status code, detail and optional headers."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = 400,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.headers = headers


class RedirectRequired(FlowAbort):
    """Request must be retried at another URL (301 by default)."""

    def __init__(self, location: str, *, status_code: int = 301) -> None:
        super().__init__(
            "Redirecting to secure transport",
            status_code=status_code,
            headers={"Location": location},
        )
        self.location = location


class FlowInternalError(FlowException):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
