"""Request ID middleware.

Tags every request with an ID so envelope responses and handler log entries
can be correlated. The ID lands on ``request.state.request_id``; the error
handlers read it from there for their ``extra`` log context.
"""

from __future__ import annotations

import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Propagate or mint a request ID and echo it in ``header_name``.

    A non-empty incoming header is trusted as-is; otherwise a UUID4 is used.
    Responses produced by the catch-all 500 handler never pass back through
    this middleware, so that handler sets the header itself from
    ``app.state.request_id_header``.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
