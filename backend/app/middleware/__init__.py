# Middleware package init
"""
PostSearch Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line carries it; the logging
    middleware sees the final status code on the way back out.
"""
