"""API tests package.

End-to-end tests for the REST API using TestClient. Handlers run for real;
repositories and payment processors are swapped for in-memory doubles
through FastAPI dependency overrides (see conftest.py).
"""
