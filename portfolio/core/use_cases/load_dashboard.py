# portfolio/core/use_cases/load_dashboard.py
import structlog

from portfolio.core.domain.models import DashboardSummary
from portfolio.core.ports.content_source import IContentSource

logger = structlog.get_logger()

class LoadDashboard:
    """Use Case: Content counts for the admin dashboard, zeroed when unavailable."""

    def __init__(self, source: IContentSource):
        self.source = source

    async def execute(self) -> DashboardSummary:
        summary = await self.source.fetch_dashboard()
        if summary is None or not summary.stats:
            logger.warning("dashboard_fallback", reason="no dashboard data")
            return DashboardSummary.default()
        return summary
