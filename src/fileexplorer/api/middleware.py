# HTTP middleware: unhandled-error capture and security headers.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import Request

from fileexplorer.api.errors import UNEXPECTED_ERROR, error_json

logger = logging.getLogger(__name__)


async def unhandled_error_middleware(request: Request, call_next):
    """Log any exception that escaped a handler once and answer with a terse 500."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_json(500, UNEXPECTED_ERROR)


async def security_headers_middleware(request: Request, call_next):
    """Add security headers to all responses."""
    response = await call_next(request)
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    # HSTS only when accessed via HTTPS (direct TLS or reverse proxy)
    if request.url.scheme == "https" or request.headers.get("x-forwarded-proto") == "https":
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return response
