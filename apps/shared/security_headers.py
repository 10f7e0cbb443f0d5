"""Security headers for the portfolio API."""

from fastapi import FastAPI, Request
from fastapi.responses import Response


# Responses under these prefixes carry session data and must never be cached
NO_STORE_PREFIXES = ("/api/admin", "/api/auth", "/api/messages")


def setup_security_headers(app: FastAPI) -> None:
    """Add nosniff, anti-clickjacking and Cache-Control headers."""

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        if request.url.path.startswith(NO_STORE_PREFIXES):
            response.headers.setdefault(
                "Cache-Control",
                "no-cache, no-store, must-revalidate",
            )
        return response
