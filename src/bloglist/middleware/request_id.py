"""Request ID middleware — unique ID per request for tracing.

Learn: Every request gets an id, either from the incoming X-Request-ID
header or a fresh UUID. It's bound to structlog's contextvars so every
log line for the request (auth rejections, blog deletes, the access
log) carries it, and it's echoed back in the response header.
"""

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Generate and propagate a unique request ID."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response: Response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
