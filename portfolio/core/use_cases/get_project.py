# portfolio/core/use_cases/get_project.py
import structlog

from portfolio.core.domain.exceptions import ProjectNotFoundError
from portfolio.core.domain.models import ProjectDetail
from portfolio.core.ports.content_source import IContentSource

logger = structlog.get_logger()

class GetProjectDetail:
    """Use Case: Loads one published project case study by slug."""

    def __init__(self, source: IContentSource):
        self.source = source

    async def execute(self, slug: str) -> ProjectDetail:
        """
        Raises:
            ProjectNotFoundError: the API has no published project for `slug`
            (or could not be read).
        """
        project = await self.source.fetch_project(slug)
        if project is None:
            logger.info("project_not_found", slug=slug)
            raise ProjectNotFoundError(slug)
        return project
