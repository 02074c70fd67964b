"""
PostSearch Backend: Application Package Initializer
=====================================================

Architecture Note:

    ┌─────────────────────────────────────┐
    │     Routes (API Layer, FastAPI)     │  ← HTTP verbs, paths, status codes
    ├─────────────────────────────────────┤
    │   PostsController                   │  ← one method per REST action
    ├──────────────────┬──────────────────┤
    │   Resource       │   PostParser     │  ← store params / response shapes
    ├──────────────────┴──────────────────┤
    │   DocumentStore (OpenSearch)        │  ← remote document search service
    └─────────────────────────────────────┘

    The store is the only source of truth; nothing is persisted locally.
"""

__version__ = "1.0.0"
