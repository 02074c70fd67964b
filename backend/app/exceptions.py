"""
PostSearch Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the few error scenarios the API models.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the matching HTTP status code.
Who:   Raised by the post parser and the document store client; caught by
       the handlers in main.py.

Exception Hierarchy:
    PostSearchError (base)
    ├── NotFoundError            → 404 Not Found (empty body)
    └── DocumentStoreError       → 502 Bad Gateway
        └── StoreUnavailableError → 503 Service Unavailable

NotFoundError is the only domain error: "no post with this id". Store
failures are kept in their own branch so a dead cluster never reads as a
missing document.
"""

from typing import Any, Dict, Optional


class PostSearchError(Exception):
    """
    Base exception for all PostSearch application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(PostSearchError):
    """
    Raised when the store reports that a document does not exist.

    What:    The parser's rejection channel. Carries the requested id.
    When:    GET, POST or DELETE on /posts/{id} for an id the store cannot find.
    HTTP:    404 Not Found with an empty body; the id is only logged.
    """

    def __init__(
        self,
        resource: str = "post",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DocumentStoreError(PostSearchError):
    """
    Raised when the document store rejects a call for a reason other than
    a missing document (bad request, mapping conflict, server error).

    HTTP:    502 Bad Gateway. The store's error body goes to the log only.
    """

    def __init__(
        self,
        message: str = "The document store could not complete the request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreUnavailableError(DocumentStoreError):
    """
    Raised when the document store cannot be reached at all.

    When:    Connection refused, DNS failure, connection timeout.
    HTTP:    503 Service Unavailable
    """

    def __init__(
        self,
        message: str = "The document store is temporarily unavailable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
