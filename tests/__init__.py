# tests\__init__.py
"""
Test Suite for Abstract Wiki.

Organization:
- `unit`: Tests for Core Logic (Use Cases, Domain Models) with mocked dependencies.
- `integration`: Tests for Adapters (Repositories, Engines) requiring real (or dockerized) infrastructure.
- `e2e`: End-to-end API tests.
"""