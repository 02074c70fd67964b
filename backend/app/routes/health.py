"""
PostSearch Backend: Health Check Route
========================================

What:  Health check endpoint for monitoring and load balancer health checks.
How:   Pings the document store and reports aggregate status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   store answered the ping (HTTP 200)
    - unhealthy: store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app import __version__
from app.schemas.post import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Document store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    """
    Check the health of the service and its document store.

    The store check is DocumentStore.ping(), which never raises.
    """
    store = request.app.state.posts_controller.store
    store_ok = await store.ping()
    if not store_ok:
        logger.warning("Health check: document store unreachable")

    health = HealthResponse(
        status="healthy" if store_ok else "unhealthy",
        version=__version__,
        store="connected" if store_ok else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if store_ok else 503,
        content=health.model_dump(),
    )
