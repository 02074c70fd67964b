"""
PostSearch Backend: Middleware Tests
======================================

What:  Request id handling and the posts access log.

What we test:
    ✅ Well-formed client request ids are echoed, malformed ones replaced
    ✅ Requests map to the controller action and post id they hit
    ✅ Unknown post ids are logged at WARNING
"""

import logging

import pytest

from app.exceptions import NotFoundError
from app.middleware.logging import resolve_action


class TestResolveAction:

    @pytest.mark.parametrize(
        "method, path, expected",
        [
            ("GET", "/posts", ("index", None)),
            ("POST", "/posts", ("create", None)),
            ("GET", "/posts/A1", ("show", "A1")),
            ("POST", "/posts/A1", ("update", "A1")),
            ("DELETE", "/posts/A1", ("destroy", "A1")),
            ("DELETE", "/posts", (None, None)),
            ("GET", "/docs", (None, None)),
            ("GET", "/posts/A1/extra", (None, None)),
        ],
    )
    def test_maps_request_to_action(self, method, path, expected):
        assert resolve_action(method, path) == expected


class TestRequestID:

    @pytest.mark.asyncio
    async def test_well_formed_client_id_is_echoed(self, store_client):
        response = await store_client.get("/posts", headers={"X-Request-ID": "trace-42"})

        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_malformed_client_id_is_replaced(self, store_client):
        response = await store_client.get("/posts", headers={"X-Request-ID": "bad id;drop"})

        rid = response.headers["X-Request-ID"]
        assert rid != "bad id;drop"
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_missing_client_id_is_generated(self, store_client):
        response = await store_client.get("/posts")

        assert len(response.headers["X-Request-ID"]) == 8


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_logs_action_and_post_id(self, test_client, stub_controller, caplog):
        stub_controller.show.return_value = {"id": "A1"}

        with caplog.at_level(logging.INFO, logger="postsearch.access"):
            await test_client.get("/posts/A1", headers={"X-Request-ID": "abc"})

        record = next(r for r in caplog.records if r.name == "postsearch.access")
        assert record.action == "show"
        assert record.post_id == "A1"
        assert record.request_id == "abc"
        assert record.levelno == logging.INFO

    @pytest.mark.asyncio
    async def test_unknown_post_is_logged_as_warning(self, test_client, stub_controller, caplog):
        stub_controller.destroy.side_effect = NotFoundError(resource_id="A1")

        with caplog.at_level(logging.INFO, logger="postsearch.access"):
            await test_client.delete("/posts/A1")

        record = next(r for r in caplog.records if r.name == "postsearch.access")
        assert record.action == "destroy"
        assert record.status == 404
        assert record.levelno == logging.WARNING

    @pytest.mark.asyncio
    async def test_health_is_not_logged(self, store_client, caplog):
        with caplog.at_level(logging.INFO, logger="postsearch.access"):
            await store_client.get("/health")

        assert not [r for r in caplog.records if r.name == "postsearch.access"]
