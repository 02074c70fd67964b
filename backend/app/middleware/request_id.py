"""
PostSearch Backend: Request ID Middleware
===========================================

What:  Gives each request a short correlation id and echoes it back.
How:   A well-formed client X-Request-ID header is reused; anything else
       (missing, too long, characters outside [A-Za-z0-9_-]) is replaced by
       a fresh id. The id lives in a ContextVar so the access log and the
       error handlers in main.py can stamp it on their output.
Who:   Outermost middleware; runs before RequestLoggingMiddleware.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        incoming = request.headers.get("X-Request-ID", "")
        # The id is copied into log lines and error bodies
        rid = incoming if _VALID_REQUEST_ID.match(incoming) else new_request_id()

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
