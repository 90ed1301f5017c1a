"""Maps the domain error hierarchy onto HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tasktracker.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    StoreError,
    TrackerError,
)

logger = logging.getLogger(__name__)

STATUS_CODES = {
    InvalidArgumentError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StoreError: 500,
}


def status_for(exc: TrackerError) -> int:
    for kind, status in STATUS_CODES.items():
        if isinstance(exc, kind):
            return status
    return 500


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
