"""HTML landing page shown to browsers."""

from __future__ import annotations

from html import escape
from string import Template

_INDEX = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Your IP Address</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
            display: flex;
            justify-content: center;
            align-items: center;
            min-height: 100vh;
            margin: 0;
            background: #2d3a6b;
            color: #fff;
        }
        main {
            text-align: center;
            padding: 2rem;
            max-width: 600px;
            margin: 2rem;
            border-radius: 16px;
            background: rgba(255, 255, 255, 0.1);
        }
        .ip {
            font-size: 3rem;
            font-weight: bold;
            font-family: "Courier New", monospace;
            margin: 2rem 0;
            word-break: break-all;
        }
        .usage {
            text-align: left;
            padding: 1.5rem;
            border-radius: 10px;
            background: rgba(0, 0, 0, 0.2);
        }
        code {
            display: block;
            margin: 0.5rem 0;
            padding: 0.2rem 0.5rem;
            font-family: "Courier New", monospace;
            background: rgba(0, 0, 0, 0.3);
            word-break: break-all;
        }
    </style>
</head>
<body>
    <main>
        <h1>Your IP Address</h1>
        <div class="ip">$address</div>
        <section class="usage">
            <h2>API Usage</h2>
            <strong>Plain text:</strong>
            <code>$plain_example</code>
            <strong>JSON format:</strong>
            <code>$json_example</code>
            <strong>With Accept header:</strong>
            <code>$accept_example</code>
        </section>
    </main>
</body>
</html>
"""
)


def usage_examples(scheme: str, host: str) -> tuple[str, str, str]:
    """curl invocations for plain text, ``?format=json`` and the Accept header."""
    base = f"{scheme}://{host}"
    return (
        f"curl {base}/",
        f"curl {base}/?format=json",
        f'curl -H "Accept: application/json" {base}/',
    )


def render_index(address: str, *, scheme: str, host: str) -> str:
    plain, as_json, accept = usage_examples(scheme, host)
    return _INDEX.substitute(
        address=escape(address),
        plain_example=escape(plain),
        json_example=escape(as_json),
        accept_example=escape(accept),
    )
