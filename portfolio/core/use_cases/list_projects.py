# portfolio/core/use_cases/list_projects.py
import structlog
from typing import Optional

from portfolio.core.domain.catalog import derive_categories, filter_by_category
from portfolio.core.domain.models import ProjectsPage
from portfolio.core.ports.content_source import IContentSource
from portfolio.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class ListPublishedProjects:
    """
    Use Case: Builds the data behind the public /projects page.

    1. Reads the published projects through the Port (empty on failure).
    2. Derives the category set from the full list.
    3. Applies the optional category filter for display only.
    """

    def __init__(self, source: IContentSource, revalidate_seconds: int = 60):
        self.source = source
        self.revalidate_seconds = revalidate_seconds

    async def execute(self, category: Optional[str] = None) -> ProjectsPage:
        with tracer.start_as_current_span("use_case.list_projects") as span:
            projects = await self.source.fetch_published_projects()
            categories = derive_categories(projects)

            # An unknown category just shows the empty state.
            active = category or None
            visible = filter_by_category(projects, active)

            span.set_attribute("app.projects_count", len(projects))
            logger.info(
                "projects_page_built",
                projects=len(projects),
                categories=len(categories),
                category=active,
            )

            return ProjectsPage(
                projects=projects,
                categories=categories,
                active_category=active,
                visible_projects=visible,
                revalidate_seconds=self.revalidate_seconds,
            )
