# portfolio\adapters\api\__init__.py
"""
Web Adapter.

The HTTP entry point of the portfolio, built on FastAPI:
- It depends on `portfolio.core` (Use Cases & Models).
- It wires the `portfolio.shared.container` to inject dependencies.
- It renders Jinja2 templates; it does NOT contain business logic.
"""

from .main import create_app

__all__ = ["create_app"]
