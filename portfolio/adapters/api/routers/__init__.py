# portfolio\adapters\api\routers\__init__.py
"""
Route Definitions.

- `pages`: Public pages (home, projects, about, contact).
- `insights`: Insight listing, posts and their comment threads.
- `admin`: Static sign-in flow and the admin dashboard.
- `health`: System health checks.
"""

from .pages import router as pages_router
from .insights import router as insights_router
from .admin import router as admin_router
from .health import router as health_router

__all__ = [
    "pages_router",
    "insights_router",
    "admin_router",
    "health_router",
]
