# portfolio/core/use_cases/send_contact_message.py
import structlog

from portfolio.core.domain.models import ContactMessage, SubmissionResult
from portfolio.core.ports.content_source import IContentSource

logger = structlog.get_logger()

class SendContactMessage:
    """Use Case: Forwards a contact form submission to the API."""

    def __init__(self, source: IContentSource):
        self.source = source

    async def execute(self, message: ContactMessage) -> SubmissionResult:
        result = await self.source.submit_contact(message)
        if not result.ok:
            logger.warning("contact_message_rejected", reason=result.message)
        return result
