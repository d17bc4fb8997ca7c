# portfolio\adapters\__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `portfolio.core.ports`:
- `api`: The Primary Adapter (Driving) - FastAPI web server and templates.
- `content_api`: Secondary Adapter (Driven) - HTTP client for the upstream
  `/api/v1` content service.

Dependencies point INWARD: these modules depend on `portfolio.core`,
never the other way round.
"""
