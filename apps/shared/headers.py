"""Security and caching headers for the site's services."""

import os
from fastapi import FastAPI, Request
from fastapi.responses import Response


DEFAULT_CSP = (
    "default-src 'self'; "
    "img-src 'self' data: https:; "
    "media-src 'self' https:; "
    "font-src 'self' data: https:; "
    "style-src 'self' 'unsafe-inline'; "
    "script-src 'self'; "
    "frame-ancestors 'none'"
)

HSTS_VALUE = "max-age=31536000; includeSubDomains; preload"


def apply_security_headers(response: Response) -> Response:
    """
    Add CSP, nosniff, anti-clickjacking and (in production) HSTS headers.

    Headers already set on the response are left alone. Also called by the
    500 handler, whose responses bypass the http middleware.
    """
    response.headers.setdefault("Content-Security-Policy", DEFAULT_CSP)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    if os.getenv("ENVIRONMENT", "development") == "production":
        response.headers.setdefault("Strict-Transport-Security", HSTS_VALUE)
    return response


def setup_security_headers(app: FastAPI) -> None:
    """Add the security headers to every response of an app."""

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        return apply_security_headers(response)


def setup_cache_control(app: FastAPI, max_age: int) -> None:
    """Let browsers and proxies cache the static catalog for max_age seconds."""

    @app.middleware("http")
    async def add_cache_control(request: Request, call_next) -> Response:
        response = await call_next(request)
        if response.status_code < 400:
            response.headers.setdefault("Cache-Control", f"public, max-age={max_age}")
        else:
            response.headers.setdefault("Cache-Control", "no-store")
        return response
