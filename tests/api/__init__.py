"""API tests package.

End-to-end tests for HTTP endpoints using TestClient.
Tests the complete request/response cycle including:
- Accept header negotiation
- Content-Type of the negotiated representation
- Deprecation headers
- RFC 7807 error responses
"""
