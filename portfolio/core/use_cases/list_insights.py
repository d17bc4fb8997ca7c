# portfolio/core/use_cases/list_insights.py
import structlog

from portfolio.core.domain.catalog import derive_topics
from portfolio.core.domain.models import InsightsPage
from portfolio.core.ports.content_source import IContentSource
from portfolio.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class ListInsights:
    """
    Use Case: Builds the /insights listing from the published posts.
    The API returns newest first; the first post becomes the hero card.
    """

    def __init__(self, source: IContentSource):
        self.source = source

    async def execute(self) -> InsightsPage:
        with tracer.start_as_current_span("use_case.list_insights") as span:
            posts = await self.source.fetch_blog_posts()
            span.set_attribute("app.posts_count", len(posts))
            logger.info("insights_page_built", posts=len(posts))
            return InsightsPage(posts=posts, topics=derive_topics(posts))
