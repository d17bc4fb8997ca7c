# portfolio/adapters/api/templating.py
from pathlib import Path

from fastapi.templating import Jinja2Templates

from portfolio import __version__
from portfolio.shared.config import settings

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    site_name=settings.APP_NAME,
    version=__version__,
)


def pluralize(count: int, singular: str, plural: str = "") -> str:
    """`1 project`, `3 projects`."""
    return f"{count} {singular if count == 1 else (plural or singular + 's')}"


templates.env.filters["pluralize"] = pluralize
