"""
PostSearch Backend: Posts Controller Unit Tests
=================================================

What:  Tests for PostsController against a stubbed document store.
How:   AsyncMock stores replaying real OpenSearch responses for the
       parsing tests; the in-memory store for round-trip behavior.

What we test:
    ✅ index/create parse store responses and send the right params
    ✅ create followed by show returns the submitted attributes with the id
    ✅ show/update/destroy raise NotFoundError for unknown ids
    ❌ Real OpenSearch calls (see test_opensearch_store.py for the adapter)
"""

from unittest.mock import AsyncMock

import pytest

from app.exceptions import NotFoundError
from app.services.posts_controller import PostsController
from app.services.store_base import DocumentStore


SEARCH_RESPONSE = {
    "took": 27,
    "timed_out": False,
    "_shards": {"total": 5, "successful": 5, "failed": 0},
    "hits": {
        "total": 1,
        "max_score": 1,
        "hits": [
            {
                "_index": "index",
                "_type": "type",
                "_id": "AVhMJLOujQMgnw8euuFI",
                "_score": 1,
                "_source": {
                    "text": "Now PostController index works!",
                    "author": "Mr.Smith",
                },
            }
        ],
    },
}

INDEX_RESPONSE = {
    "_index": "index",
    "_type": "type",
    "_id": "AViXYdnZxmF-_Ui11JAF",
    "_version": 1,
    "created": True,
}


class TestPostsControllerIndex:

    def setup_method(self):
        self.client = AsyncMock(spec=DocumentStore)
        self.client.search.return_value = SEARCH_RESPONSE
        self.posts = PostsController(self.client, "index", "type")

    @pytest.mark.asyncio
    async def test_parses_and_returns_post_data(self):
        result = await self.posts.index()

        assert result == [{
            "id": "AVhMJLOujQMgnw8euuFI",
            "author": "Mr.Smith",
            "text": "Now PostController index works!",
        }]

    @pytest.mark.asyncio
    async def test_specifies_index_and_type_while_searching(self):
        await self.posts.index()

        self.client.search.assert_awaited_once_with({"index": "index", "type": "type"})

    @pytest.mark.asyncio
    async def test_empty_index_returns_empty_list(self, posts_controller):
        assert await posts_controller.index() == []


class TestPostsControllerCreate:
    attrs = {"author": "Mr. Rogers", "text": "Now PostController create works!"}

    def setup_method(self):
        self.client = AsyncMock(spec=DocumentStore)
        self.client.index.return_value = INDEX_RESPONSE
        self.posts = PostsController(self.client, "index", "type")

    @pytest.mark.asyncio
    async def test_parses_and_returns_post_data(self):
        result = await self.posts.create(self.attrs)

        assert result == {"id": "AViXYdnZxmF-_Ui11JAF", **self.attrs}

    @pytest.mark.asyncio
    async def test_specifies_index_type_and_body(self):
        await self.posts.create(self.attrs)

        self.client.index.assert_awaited_once_with(
            {"index": "index", "type": "type", "body": self.attrs}
        )


class TestPostsControllerRoundTrip:
    """Behavior against the in-memory store."""

    @pytest.mark.asyncio
    async def test_create_then_show_returns_submitted_attributes(self, posts_controller):
        attrs = {"author": "Mr. Rogers", "content": "Hello", "tags": ["a", "b"]}

        created = await posts_controller.create(attrs)
        shown = await posts_controller.show(created["id"])

        assert shown == {"id": created["id"], **attrs}

    @pytest.mark.asyncio
    async def test_index_lists_created_posts(self, posts_controller):
        first = await posts_controller.create({"author": "a"})
        second = await posts_controller.create({"author": "b"})

        result = await posts_controller.index()

        assert sorted(result, key=lambda post: post["author"]) == [first, second]

    @pytest.mark.asyncio
    async def test_update_returns_submitted_attributes_only(self, posts_controller, memory_store):
        created = await posts_controller.create({"author": "a", "content": "old"})

        updated = await posts_controller.update(created["id"], {"content": "new"})

        assert updated == {"id": created["id"], "content": "new"}
        assert await posts_controller.show(created["id"]) == {
            "id": created["id"],
            "author": "a",
            "content": "new",
        }

    @pytest.mark.asyncio
    async def test_destroy_returns_id_and_removes_document(self, posts_controller):
        created = await posts_controller.create({"author": "a"})

        assert await posts_controller.destroy(created["id"]) == created["id"]
        with pytest.raises(NotFoundError):
            await posts_controller.show(created["id"])


class TestPostsControllerNotFound:

    @pytest.mark.asyncio
    async def test_show_unknown_id(self, posts_controller):
        with pytest.raises(NotFoundError) as exc_info:
            await posts_controller.show("missing")
        assert exc_info.value.resource_id == "missing"

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, posts_controller):
        with pytest.raises(NotFoundError) as exc_info:
            await posts_controller.update("X", {"content": "edited"})
        assert exc_info.value.resource_id == "X"

    @pytest.mark.asyncio
    async def test_destroy_unknown_id(self, posts_controller):
        with pytest.raises(NotFoundError) as exc_info:
            await posts_controller.destroy("missing")
        assert exc_info.value.resource_id == "missing"
