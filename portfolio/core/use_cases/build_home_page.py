# portfolio/core/use_cases/build_home_page.py
import asyncio
import structlog

from portfolio.core.domain.models import HomePage, Profile, Stat
from portfolio.core.ports.content_source import IContentSource
from portfolio.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class BuildHomePage:
    """
    Use Case: Composes the landing page.

    The five reads are independent and run concurrently; each one falls
    back to its own empty value, so a partial outage still renders a page.
    """

    def __init__(
        self,
        source: IContentSource,
        featured_limit: int = 4,
        posts_limit: int = 3,
        tech_preview: int = 6,
    ):
        self.source = source
        self.featured_limit = featured_limit
        self.posts_limit = posts_limit
        self.tech_preview = tech_preview

    async def execute(self) -> HomePage:
        with tracer.start_as_current_span("use_case.build_home_page"):
            profile, projects, tech_stack, posts, skills = await asyncio.gather(
                self.source.fetch_profile(),
                self.source.fetch_published_projects(limit=self.featured_limit),
                self.source.fetch_tech_stack(),
                self.source.fetch_blog_posts(limit=self.posts_limit),
                self.source.fetch_skills(),
            )

            tech_stack = tech_stack[: self.tech_preview]
            stats = [
                Stat(value=str(len(projects)), label="Projects", icon="folder_open", color="blue"),
                Stat(value=str(len(skills)), label="Skills", icon="psychology", color="purple"),
                Stat(value=str(len(tech_stack)), label="Technologies", icon="code", color="green"),
            ]

            logger.info("home_page_built", projects=len(projects), posts=len(posts), has_profile=profile is not None)

            return HomePage(
                profile=profile or Profile(),
                projects=projects,
                tech_stack=tech_stack,
                posts=posts,
                skills=skills,
                stats=stats,
            )
