"""Response helpers and exception handlers for the HTTP API."""

import logging
from urllib.parse import quote

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from core.errors import InternalError, NotFoundError, ValidationError
from core.models import Website
from web.preview import download_filename, render

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, **extra: object) -> JSONResponse:
    """JSON error body in the shape the frontend expects."""
    return JSONResponse({"message": message, **extra}, status_code=status_code)


def download_response(website: Website) -> HTMLResponse:
    """Standalone document served as an attachment."""
    filename = download_filename(website)
    ascii_name = filename.encode("ascii", "ignore").decode() or "website.html"
    disposition = f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
    return HTMLResponse(render(website), headers={"Content-Disposition": disposition})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return error_response(400, "Validation error", errors=exc.errors)


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(404, "Website not found")


async def handle_internal_error(request: Request, exc: InternalError) -> JSONResponse:
    # Detail was logged where the error was raised; the client gets the summary only
    return error_response(500, str(exc) or "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(InternalError, handle_internal_error)
