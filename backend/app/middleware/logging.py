"""
PostSearch Backend: Request Logging Middleware
================================================

What:  One access log line for every HTTP request.
How:   Times the rest of the stack, then logs the controller action the
       request maps to, the post id (if any), status, duration and request id.
Who:   Applied to every request via Starlette middleware, inside
       RequestIDMiddleware so the request id is already set.

Example lines:
    GET /posts → index 200 12.4ms [a1b2c3d4]
    DELETE /posts/AVhMJ → destroy post_id=AVhMJ 404 3.0ms [a1b2c3d4]

Log levels:
    5xx → ERROR (store rejected the call or crashed)
    4xx → WARNING (every unknown post id lands here)
    2xx/3xx → INFO

Request bodies are never logged; post content may contain personal data.
"""

import logging
import time
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("postsearch.access")

_COLLECTION_ACTIONS = {"GET": "index", "POST": "create"}
_MEMBER_ACTIONS = {"GET": "show", "POST": "update", "DELETE": "destroy"}


def resolve_action(method: str, path: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Map a request to (controller action, post id).

    Returns (None, None) for anything outside /posts, e.g. /health or /docs.
    """
    segments = [segment for segment in path.split("/") if segment]
    if not segments or segments[0] != "posts" or len(segments) > 2:
        return None, None
    if len(segments) == 1:
        return _COLLECTION_ACTIONS.get(method), None
    return _MEMBER_ACTIONS.get(method), segments[1]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs the outcome of each request against the posts API.

    Duration covers everything below this middleware, which for the posts
    routes is dominated by the single OpenSearch round trip.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path

        # Load balancers poll /health every few seconds
        if path == "/health":
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        action, post_id = resolve_action(request.method, path)
        rid = request_id_var.get("")
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        target = action or "-"
        if post_id:
            target = f"{target} post_id={post_id}"

        logger.log(
            log_level,
            "%s %s → %s %d %.1fms [%s]",
            request.method,
            path,
            target,
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "action": action,
                "post_id": post_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
