# Error mapping for the HTTP surface.
# Created: 2026-10-19
#
# The single place where core error kinds become status codes and JSON bodies.
# Bodies are always {"error": "<message>"}; messages never carry absolute paths.

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fileexplorer.core.result import Err, ErrorKind

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}

UNEXPECTED_ERROR = "An unexpected error occurred."
UPLOAD_TOO_LARGE = "Uploaded file exceeds the configured size limit."


def error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def error_response(err: Err) -> JSONResponse:
    """Render a core ``Err`` as an HTTP response."""
    return error_json(STATUS_BY_KIND[err.kind], err.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_json(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg")
    else:
        message = "Invalid request."
    return error_json(400, message or "Invalid request.")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
