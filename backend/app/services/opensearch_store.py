"""
PostSearch Backend: OpenSearch Document Store
===============================================

What:  DocumentStore implementation backed by opensearch-py's AsyncOpenSearch.
How:   Translates the params dicts built by Resource into client keyword
       arguments and normalises OpenSearch 2.x responses into the shapes
       documented in store_base.py.
Who:   Built by main.build_app() from settings; used through Resource.

Response normalisation:
    - 404 on get/update/delete is turned into the store's "absent" shape
      instead of an exception, so the parser stays the only place that
      decides what "not found" means.
    - Delete responses carry "found" derived from result == "deleted".
    - OpenSearch 2.x has no mapping types. The "type" param is accepted
      and dropped.

Error translation:
    404 on search / index              → DocumentStoreError (502)
    ConnectionError / ConnectionTimeout → StoreUnavailableError (503)
    any other TransportError            → DocumentStoreError (502)
"""

import logging
from typing import Any, Dict, List, Optional

from opensearchpy import AsyncOpenSearch
from opensearchpy.exceptions import (
    ConnectionError as OpenSearchConnectionError,
    NotFoundError as OpenSearchNotFoundError,
    TransportError,
)

from app.config import Settings
from app.exceptions import DocumentStoreError, StoreUnavailableError
from app.services.store_base import DocumentStore

logger = logging.getLogger(__name__)


class OpenSearchStore(DocumentStore):
    """
    Async OpenSearch client wrapper satisfying the DocumentStore contract.

    Attributes:
        client: The underlying AsyncOpenSearch instance. Exposed so tests
                can substitute a mock.
    """

    def __init__(self, client: AsyncOpenSearch):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenSearchStore":
        """Build a store from application settings."""
        hosts: List[str] = settings.opensearch_hosts_list
        http_auth = None
        if settings.opensearch_username and settings.opensearch_password:
            http_auth = (settings.opensearch_username, settings.opensearch_password)

        client = AsyncOpenSearch(
            hosts=hosts,
            http_auth=http_auth,
            use_ssl=hosts[0].startswith("https") if hosts else False,
            verify_certs=settings.opensearch_verify_certs,
            ssl_show_warn=False,
        )
        logger.info("OpenSearch client configured for %s", ", ".join(hosts))
        return cls(client)

    # ── Document Verbs ────────────────────────────────────────────────────

    async def search(self, params: Dict[str, Any]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"index": params["index"]}
        if params.get("body") is not None:
            kwargs["body"] = params["body"]
        return await self._call("search", **kwargs)

    async def index(self, params: Dict[str, Any]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"index": params["index"], "body": params.get("body") or {}}
        if params.get("id") is not None:
            kwargs["id"] = params["id"]
        return await self._call("index", **kwargs)

    async def get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        doc_id = params["id"]
        try:
            return await self._call("get", allow_missing=True, index=params["index"], id=doc_id)
        except OpenSearchNotFoundError:
            return {"_id": doc_id, "found": False}

    async def update(self, params: Dict[str, Any]) -> Dict[str, Any]:
        doc_id = params["id"]
        try:
            return await self._call(
                "update",
                allow_missing=True,
                index=params["index"],
                id=doc_id,
                body={"doc": params.get("doc") or {}},
            )
        except OpenSearchNotFoundError:
            # No "_id" key: the parser reads that as "nothing was updated"
            return {"result": "not_found"}

    async def delete(self, params: Dict[str, Any]) -> Dict[str, Any]:
        doc_id = params["id"]
        try:
            response = await self._call("delete", allow_missing=True, index=params["index"], id=doc_id)
        except OpenSearchNotFoundError:
            return {"_id": doc_id, "found": False}
        response = dict(response)
        response.setdefault("found", response.get("result") == "deleted")
        return response

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except Exception as e:
            logger.warning("OpenSearch ping failed: %s", str(e))
            return False

    async def close(self) -> None:
        await self.client.close()

    # ── Internals ─────────────────────────────────────────────────────────

    async def _call(self, verb: str, allow_missing: bool = False, **kwargs: Any) -> Dict[str, Any]:
        """
        Invoke one client method and translate transport failures.

        With allow_missing, an OpenSearch NotFoundError is re-raised for the
        caller to turn into its "absent" shape; otherwise a 404 (for example
        a missing index on search) is a DocumentStoreError like any other
        rejected call.
        """
        method = getattr(self.client, verb)
        try:
            return await method(**kwargs)
        except OpenSearchNotFoundError:
            if allow_missing:
                raise
            logger.error("OpenSearch returned 404 for %s on %s", verb, kwargs.get("index"))
            raise DocumentStoreError(
                context={"verb": verb, "index": kwargs.get("index"), "status_code": 404},
            )
        except OpenSearchConnectionError as e:
            logger.error("OpenSearch unreachable during %s: %s", verb, str(e))
            raise StoreUnavailableError(
                context={"verb": verb, "index": kwargs.get("index"), "error": str(e)},
            ) from e
        except TransportError as e:
            logger.error(
                "OpenSearch rejected %s on %s: status=%s error=%s",
                verb,
                kwargs.get("index"),
                e.status_code,
                e.error,
            )
            raise DocumentStoreError(
                context={
                    "verb": verb,
                    "index": kwargs.get("index"),
                    "status_code": _status_code(e),
                    "error": str(e.error),
                },
            ) from e


def _status_code(error: TransportError) -> Optional[int]:
    status = error.status_code
    return status if isinstance(status, int) else None
