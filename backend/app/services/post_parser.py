"""
PostSearch Backend: Store Response Parser
===========================================

What:  Translates raw document store responses into the API's Post shape.
How:   One method per outcome. Found/created responses become Post dicts;
       absent responses raise NotFoundError carrying the requested id.
Who:   Called by PostsController after every Resource call.

Merge rule:
    A Post is the document source (or the caller's attributes) with "id"
    set to the store-assigned id. The store id always wins over an "id"
    key supplied by the caller.

Example:
    {"hits": {"hits": [{"_id": "A1", "_source": {"author": "Smith"}}]}}
    → [{"id": "A1", "author": "Smith"}]
"""

from typing import Any, Dict, List, Optional

from app.exceptions import NotFoundError


def _with_id(doc_id: Any, source: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    post = {"id": doc_id}
    post.update((key, value) for key, value in (source or {}).items() if key != "id")
    return post


class PostParser:
    """
    Stateless translator from store responses to API responses.

    All conditional behavior of the posts API lives here: the controller
    only composes Resource calls with these methods.
    """

    def parse_search_result(self, res: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Always returns a list, even for zero or one hit."""
        hits = res.get("hits", {}).get("hits", [])
        return [_with_id(hit["_id"], hit.get("_source")) for hit in hits]

    def parse_create_result(self, attrs: Dict[str, Any], res: Dict[str, Any]) -> Dict[str, Any]:
        """Trusts the store's id; the stored content is not read back."""
        return _with_id(res["_id"], attrs)

    def parse_get_result(self, res: Dict[str, Any]) -> Dict[str, Any]:
        if res.get("found"):
            return _with_id(res["_id"], res.get("_source"))
        raise NotFoundError(resource="post", resource_id=res.get("_id"))

    def parse_update_result(
        self, doc_id: str, attrs: Dict[str, Any], res: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Returns the caller's attributes merged with the id when the store
        acknowledged the update (an "_id" is present). The document is not
        re-fetched, so fields outside attrs are not included.

        Raises:
            NotFoundError: the response carries no "_id"
        """
        if res.get("_id"):
            return _with_id(res["_id"], attrs)
        raise NotFoundError(resource="post", resource_id=doc_id)

    def parse_delete_result(self, doc_id: str, res: Dict[str, Any]) -> str:
        if res.get("found"):
            return doc_id
        raise NotFoundError(resource="post", resource_id=doc_id)
