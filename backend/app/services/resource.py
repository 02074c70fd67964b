"""
PostSearch Backend: Store Resource
====================================

What:  Binds a fixed (index, type) pair to the document store's five verbs.
How:   Merges the fixed descriptor with the call-specific params (body, id,
       doc) and forwards to the matching DocumentStore method.
Who:   Owned by PostsController.

No validation and no error translation happens here: the store response
is returned exactly as received.
"""

from typing import Any, Dict

from app.services.store_base import DocumentStore


class Resource:
    def __init__(self, client: DocumentStore, index_name: str, doc_type: str):
        self.client = client
        self.base_params: Dict[str, Any] = {"index": index_name, "type": doc_type}

    async def search(self) -> Dict[str, Any]:
        return await self.client.search(dict(self.base_params))

    async def create(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.index({"body": attrs, **self.base_params})

    async def get(self, doc_id: str) -> Dict[str, Any]:
        return await self.client.get({"id": doc_id, **self.base_params})

    async def update(self, doc_id: str, attrs: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.update({"id": doc_id, "doc": attrs, **self.base_params})

    async def delete(self, doc_id: str) -> Dict[str, Any]:
        return await self.client.delete({"id": doc_id, **self.base_params})
