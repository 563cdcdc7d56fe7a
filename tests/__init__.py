"""Test suite for the attendance and payment lifecycle engine.

Test structure follows the test pyramid:
- unit/: Unit tests - handlers, entities and adapters over in-memory fakes
- integration/: Integration tests - repositories against PostgreSQL
- api/: API endpoint tests - HTTP endpoints end-to-end via TestClient

Integration tests are skipped when DATABASE_URL is unreachable.
"""
