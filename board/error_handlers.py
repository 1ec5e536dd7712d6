"""Global exception handlers.

Validation errors become 400. Anything uncaught becomes 500; the body only
carries the exception details outside production, and it gets the same
security headers as every other response.
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .middleware import apply_security_headers

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, *, is_production: Callable[[], bool]) -> None:
    """Register the validation and catch-all handlers on the app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid data",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        if is_production():
            content = {"error": {"message": "server error"}}
        else:
            content = {"message": str(exc), "error": exc.__class__.__name__}
        response = JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)
        return apply_security_headers(response)
