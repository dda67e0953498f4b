"""
Tests for the social_service package.

- HTTP-level tests drive the FastAPI app through `TestClient`
- Service tests exercise `services/` against mocked sessions
- Database, token and health tests cover the supporting modules
"""
