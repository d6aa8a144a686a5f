"""
Color Picker API - Request ID Middleware
==========================================

What:  Tags each request with a short correlation id.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one. The id is stored in a ContextVar (read by the access log
       and exception handlers) and echoed back in the X-Request-ID response
       header.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request id and returns it to the client."""

    header_name = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars are enough to correlate log lines
        rid = request.headers.get(self.header_name) or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[self.header_name] = rid
        return response
