from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from notetagger.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.types import ASGIApp

logger = get_logger(__name__)


class SecurityMiddleware(BaseHTTPMiddleware):
    """Add security headers and log calls that change the stored lexicon."""

    MUTATING_PATHS = ("/tags/custom", "/tags/import", "/tags/reset")

    def __init__(self, app: ASGIApp, api_prefix: str = ""):
        super().__init__(app)
        self._watched = tuple(f"{api_prefix}{p}" for p in self.MUTATING_PATHS)

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none';"

        if request.url.scheme == "https":
            response.headers["Strict-Transport-Security"] = "max-age=15552000; includeSubDomains"

        response.headers["Cache-Control"] = "no-store"

        if request.method != "GET" and request.url.path.startswith(self._watched):
            client_ip = request.client.host if request.client else "unknown"
            logger.info(
                "Lexicon change requested",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "ip": client_ip,
                    "status": response.status_code,
                }
            )

        return response
