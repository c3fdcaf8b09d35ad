# tests/__init__.py
"""
Test suite for the e-commerce HTTP API.

Organization:
- `services`: service layer against a real in-memory SQLite session.
- `http_api`: endpoints through FastAPI's TestClient, envelopes included.
"""
