"""
Custom negotiation example for fastapi-ip-echo.

Demonstrates:
- Adding a negotiation rule ahead of the defaults
- Exempting an internal hostname from the HTTPS redirect
- Running the guard flow with request logging
"""

from starlette.responses import PlainTextResponse

from fastapi_ip_echo import (
    Flow,
    HTTPSRedirect,
    LoggingHook,
    NegotiationRule,
    Negotiator,
    RequestContext,
    configure_logging,
    create_app,
)
from fastapi_ip_echo.components.transport import LOOPBACK_HOSTS
from fastapi_ip_echo.negotiation import DEFAULT_RULES


def render_shell(ctx: RequestContext) -> PlainTextResponse:
    """Render an export line for shell scripts."""
    return PlainTextResponse(f"export CLIENT_IP={ctx.address}\n")


shell_rule = NegotiationRule(
    "format-shell",
    lambda ctx: ctx.request.query_params.get("format") == "shell",
    render_shell,
)

guard = Flow(HTTPSRedirect(exempt_hosts={*LOOPBACK_HOSTS, "ip.internal"}))
guard.add_hook(LoggingHook())

app = create_app(guard=guard, negotiator=Negotiator([shell_rule, *DEFAULT_RULES]))


if __name__ == "__main__":
    import uvicorn

    configure_logging("DEBUG")
    uvicorn.run(app, host="0.0.0.0", port=3000)

    # Test with:
    # curl http://localhost:3000/
    # curl "http://localhost:3000/?format=shell"
    # curl -H "Accept: application/json" http://localhost:3000/
