# justmyluck/middlewares/origin.py
from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from justmyluck.platform.logger import get_logger

logger = get_logger("origin")


def is_origin_allowed(origin: str | None, allowed_origins: Iterable[str]) -> bool:
    allowed = list(allowed_origins)
    if not origin or not allowed:
        return True
    return origin in allowed


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """
    Rejects requests whose Origin header is not in the allow-list.

    Requests without an Origin header, and every request when the allow-list is
    empty, pass through. CORS response headers are added by CORSMiddleware.
    """

    def __init__(self, app, allowed_origins: Iterable[str] = ()):
        super().__init__(app)
        self.allowed_origins = list(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")

        if is_origin_allowed(origin, self.allowed_origins):
            return await call_next(request)

        logger.warning(f"Blocked request from origin {origin} to {request.url.path}")
        return JSONResponse(
            status_code=403,
            content={"status": "error", "message": "Not allowed by CORS"},
        )
