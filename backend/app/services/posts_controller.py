"""
PostSearch Backend: Posts Controller
======================================

What:  One method per REST action on the post resource.
How:   Each action awaits the matching Resource call, then pipes the raw
       response through the matching PostParser method.
Who:   Built by main.build_app(); called by the route handlers in
       routes/posts.py through the get_posts_controller dependency.

Action map:
    index()             → Resource.search  → parse_search_result
    create(attrs)       → Resource.create  → parse_create_result
    show(id)            → Resource.get     → parse_get_result
    update(id, attrs)   → Resource.update  → parse_update_result
    destroy(id)         → Resource.delete  → parse_delete_result

Errors:
    NotFoundError from the parser and DocumentStoreError from the store
    propagate unchanged to the global exception handlers.
"""

import logging
from typing import Any, Dict, List

from app.services.post_parser import PostParser
from app.services.resource import Resource
from app.services.store_base import DocumentStore

logger = logging.getLogger(__name__)


class PostsController:
    """
    Composes Resource and PostParser for the posts API.

    Attributes:
        store:    The DocumentStore every call goes to (also used for
                  health checks and shutdown)
        resource: Resource bound to (index_name, doc_type)
        parser:   Stateless PostParser
    """

    def __init__(self, client: DocumentStore, index_name: str, doc_type: str):
        self.store = client
        self.resource = Resource(client, index_name, doc_type)
        self.parser = PostParser()

    async def index(self) -> List[Dict[str, Any]]:
        res = await self.resource.search()
        return self.parser.parse_search_result(res)

    async def create(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        res = await self.resource.create(attrs)
        post = self.parser.parse_create_result(attrs, res)
        logger.info("Created post %s", post["id"])
        return post

    async def show(self, doc_id: str) -> Dict[str, Any]:
        res = await self.resource.get(doc_id)
        return self.parser.parse_get_result(res)

    async def update(self, doc_id: str, attrs: Dict[str, Any]) -> Dict[str, Any]:
        res = await self.resource.update(doc_id, attrs)
        return self.parser.parse_update_result(doc_id, attrs, res)

    async def destroy(self, doc_id: str) -> str:
        res = await self.resource.delete(doc_id)
        deleted_id = self.parser.parse_delete_result(doc_id, res)
        logger.info("Deleted post %s", deleted_id)
        return deleted_id
