"""
PostSearch Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── memory_store: InMemoryDocumentStore (no OpenSearch needed)
    ├── posts_controller: real PostsController over memory_store
    ├── stub_controller: AsyncMock with the PostsController interface
    ├── test_client: HTTPX AsyncClient over create_app(stub_controller)
    └── store_client: HTTPX AsyncClient over create_app(posts_controller)
"""

import os
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["OPENSEARCH_HOSTS"] = "http://opensearch.test:9200"
os.environ["LOG_LEVEL"] = "WARNING"

from app.main import create_app  # noqa: E402
from app.services.posts_controller import PostsController  # noqa: E402
from fakes import InMemoryDocumentStore  # noqa: E402

TEST_INDEX = "index"
TEST_TYPE = "type"


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def posts_controller(memory_store):
    return PostsController(memory_store, TEST_INDEX, TEST_TYPE)


@pytest.fixture
def stub_controller():
    """
    A controller double for route tests.

    Usage:
        stub_controller.show.return_value = {"id": "3", "author": "Mr. Williams"}
        stub_controller.show.side_effect = NotFoundError(resource_id="3")
    """
    controller = AsyncMock(spec=PostsController)
    controller.store = InMemoryDocumentStore()
    return controller


@pytest_asyncio.fixture
async def test_client(stub_controller):
    """HTTPX AsyncClient routed straight into an app bound to stub_controller."""
    transport = ASGITransport(app=create_app(stub_controller))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def store_client(posts_controller):
    """HTTPX AsyncClient over the real controller and the in-memory store."""
    transport = ASGITransport(app=create_app(posts_controller))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
