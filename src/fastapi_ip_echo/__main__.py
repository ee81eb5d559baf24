"""Serve the application with uvicorn: ``python -m fastapi_ip_echo``."""

from __future__ import annotations

import logging

import uvicorn

from fastapi_ip_echo.app import create_app
from fastapi_ip_echo.config import Settings, configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(settings)

    logger.info("IP detection service running on port %d", settings.port)
    logger.info("Visit http://localhost:%d to see your IP", settings.port)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        proxy_headers=False,
    )


if __name__ == "__main__":
    main()
