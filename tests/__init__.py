"""Test suite for the Flip versioning API.

Test structure follows the test pyramid:
- unit/: Unit tests - domain, registry, dispatcher and HTTP helpers in isolation
- api/: API endpoint tests - full request/response cycle through TestClient
"""
