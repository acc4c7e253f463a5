"""Run the photo pool HTTP API."""

from __future__ import annotations

import argparse

import uvicorn
from loguru import logger

from photopool.infrastructure.logging import configure_logging
from photopool.infrastructure.settings import get_settings


def main() -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Serve the photo pool API")
    parser.add_argument("--host", default=settings.api_host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    configure_logging(settings.log_level)
    logger.info(f"Serving {settings.app_name} on http://{args.host}:{args.port}")

    uvicorn.run(
        "photopool.api.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
