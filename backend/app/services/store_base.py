"""
PostSearch Backend: Abstract Document Store Interface
=======================================================

What:  Abstract base class defining the contract the Resource layer consumes.
How:   Concrete implementations inherit from DocumentStore and implement the
       five document verbs. Each verb takes one params dict and returns the
       store's response dict.
Who:   Called by Resource; implemented by OpenSearchStore (production) and
       by the in-memory store used in the test suite.

Params shapes (always merged with {"index": ..., "type": ...}):
    search:  {}
    index:   {"body": attrs}
    get:     {"id": id}
    update:  {"id": id, "doc": attrs}
    delete:  {"id": id}

Response shapes:
    search:  {"hits": {"hits": [{"_id": ..., "_source": {...}}, ...]}}
    index:   {"_id": ...}
    get:     {"_id": ..., "found": True, "_source": {...}}  or  {"_id": ..., "found": False}
    update:  {"_id": ...}  or  a dict without "_id" when the document is missing
    delete:  {"_id": ..., "found": True}  or  {"_id": ..., "found": False}
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class DocumentStore(ABC):
    """
    Abstract interface for the remote document-search service.

    Contract:
        - A missing document is reported through the response shape
          (found: False / no _id), never raised.
        - Transport and server failures raise DocumentStoreError or
          StoreUnavailableError.
    """

    @abstractmethod
    async def search(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Return every document of the index as raw hits."""
        ...

    @abstractmethod
    async def index(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Store params["body"] as a new document; the store assigns the id."""
        ...

    @abstractmethod
    async def get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    async def update(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Partially update document params["id"] with params["doc"]."""
        ...

    @abstractmethod
    async def delete(self, params: Dict[str, Any]) -> Dict[str, Any]:
        ...

    async def ping(self) -> bool:
        """
        Check if the store is reachable.

        Who:     Called by the health check endpoint.
        Returns: True if the store answered, False otherwise. Never raises.
        """
        return True

    async def close(self) -> None:
        """Release network resources. Called once on application shutdown."""
        return None
