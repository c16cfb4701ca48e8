"""
Process-wide logging setup and per-request access logging.
"""

from __future__ import annotations

import logging
import time

from fastapi import Request

from . import config

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(name)s: %(message)s"

access_logger = logging.getLogger("album_api.access")


def configure_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, pytest, or an earlier call).
        root.setLevel(level or config.log_level())
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level or config.log_level())


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(
        "request method=%s path=%s status=%s elapsed_ms=%.1f",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
