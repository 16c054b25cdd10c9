"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers, RFC 7807 error mapping and middleware.
It is thin: it parses the Accept header, asks the version dispatcher which
version to serve, and translates results to HTTP responses.

Structure:
- routers/system.py: Root, health and config endpoints
- routers/api/flip/: Versioned resources generated from the route registry
- api/middleware/: Request tracing

The presentation layer depends on the application layer but contains NO
negotiation logic.
"""
