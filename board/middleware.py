"""HTTP middleware: bearer auth, request logging and security headers."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.security.utils import get_authorization_scheme_param

from .logging_config import REQUEST_LOGGER_NAME, request_log_format
from .services.auth_service import AuthService

logger = logging.getLogger(__name__)
request_logger = logging.getLogger(REQUEST_LOGGER_NAME)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


def apply_security_headers(response):
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


def bearer_token(request: Request):
    """Return the token from an ``Authorization: Bearer <token>`` header, or None."""
    scheme, credentials = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer" or not credentials:
        return None
    return credentials


def register_middleware(
    app: FastAPI,
    *,
    verbose: Callable[[], bool],
    auth_service: Callable[[], AuthService],
    public_paths: Iterable[str],
) -> None:
    """Attach bearer auth, security headers and request logging to every response.

    Auth is the innermost layer but still runs before routing, so a request
    without a valid token never reaches body parsing or a service.
    """
    allowed_paths = frozenset(public_paths)

    @app.middleware("http")
    async def require_bearer_token(request: Request, call_next):
        if request.url.path in allowed_paths:
            return await call_next(request)
        if not auth_service().verify(bearer_token(request)):
            logger.error("Unauthorized request to path: %s", request.url.path)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Unauthorized request"},
                headers={"WWW-Authenticate": "Bearer"},
            )
        return await call_next(request)

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        return apply_security_headers(response)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        log_format = request_log_format(verbose())
        fields = {"method": request.method, "path": request.url.path}
        try:
            response = await call_next(request)
        except Exception:
            fields.update(status=500, duration=(time.perf_counter() - started) * 1000)
            request_logger.error(log_format, fields)
            raise
        fields.update(status=response.status_code, duration=(time.perf_counter() - started) * 1000)
        request_logger.info(log_format, fields)
        return response
