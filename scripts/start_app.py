#!/usr/bin/env python3
"""Serve the TopMeUp API with uvicorn.

Logfire is configured before the app module is imported so failures while
building the app are reported too.
"""

import sys

import logfire
import uvicorn

from topmeup.config import Settings
from topmeup.util.observability import configure_logfire

APP_PATH = "topmeup.interface.api.app:app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    reload = settings.environment == "development"
    logfire.info(
        "Starting API server",
        port=settings.port,
        environment=settings.environment,
        reload=reload,
    )

    try:
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",
            port=settings.port,
            reload=reload,
            proxy_headers=True,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API server failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
