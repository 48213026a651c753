# app/core/middleware.py

"""
HTTP middleware: request logging and CORS.
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.exceptions import unhandled_exception_handler

logger = logging.getLogger("app.request")


async def log_requests(request: Request, call_next):
    """
    Logs method, path, status code and elapsed time of every request.

    Unexpected errors are turned into the 500 error body here, inside CORS.
    """
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        response = await unhandled_exception_handler(request, exc)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s %d %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(log_requests)

    # One trusted frontend origin; cookies and auth headers allowed.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CORS_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
