# portfolio/core/use_cases/build_about_page.py
import asyncio
import structlog

from portfolio.core.domain.models import AboutPage
from portfolio.core.ports.content_source import IContentSource
from portfolio.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class BuildAboutPage:
    """
    Use Case: Composes /about from the keyed about sections, work
    experience, education and certifications. Each read fails to empty
    on its own.
    """

    def __init__(self, source: IContentSource):
        self.source = source

    async def execute(self) -> AboutPage:
        with tracer.start_as_current_span("use_case.build_about_page"):
            sections, experiences, education, certifications = await asyncio.gather(
                self.source.fetch_about_sections(),
                self.source.fetch_experiences(),
                self.source.fetch_education(),
                self.source.fetch_certifications(),
            )
            logger.info(
                "about_page_built",
                sections=sorted(sections),
                experiences=len(experiences),
                education=len(education),
                certifications=len(certifications),
            )
            return AboutPage(
                sections=sections,
                experiences=experiences,
                education=education,
                certifications=certifications,
            )
