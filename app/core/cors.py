from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

ALLOW_METHODS = "POST, GET, OPTIONS"
ALLOW_HEADERS = "Content-Type"


class CorsMiddleware(BaseHTTPMiddleware):
    """Stamp CORS headers on every response and answer preflights directly.

    Starlette's ``CORSMiddleware`` only treats an OPTIONS request as a
    preflight when ``Origin`` and ``Access-Control-Request-Method`` are sent,
    and only decorates responses to requests carrying an ``Origin``. Here any
    OPTIONS request, on any path, gets a bare 200 before routing.
    """

    def __init__(self, app, allow_origin: str = "*"):
        super().__init__(app)
        self.allow_origin = allow_origin

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        response.headers["Access-Control-Allow-Origin"] = self.allow_origin
        response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response
