"""
PostSearch Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models describing the HTTP contract of the posts API.
How:   PostEnvelope validates request bodies. Post, DeletedPost and the
       error/health models feed the OpenAPI docs and the response payloads.

Post attributes are deliberately loose: any extra field passes through
untouched and none is required.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PostEnvelope(BaseModel):
    """
    Body of POST /posts and POST /posts/{id}: {"post": {...attrs}}.

    A body without "post" means "no attributes".
    """
    post: Dict[str, Any] = Field(
        default_factory=dict,
        description="Post attributes, e.g. author and content",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class Post(BaseModel):
    """A stored post. Unknown attributes are kept as-is."""
    id: str = Field(description="Store-assigned document id")
    author: Optional[str] = Field(default=None, description="Post author")
    content: Optional[str] = Field(default=None, description="Post body")

    model_config = {"extra": "allow"}


class DeletedPost(BaseModel):
    """Returned by DELETE /posts/{id}."""
    id: str = Field(description="Id of the deleted post")


class ErrorResponse(BaseModel):
    """
    Error envelope for store failures (502/503) and unexpected errors (500).

    404 responses carry no body at all.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Document store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
