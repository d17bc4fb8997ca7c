# portfolio/core/use_cases/get_insight.py
import asyncio
import structlog

from portfolio.core.domain.exceptions import PostNotFoundError
from portfolio.core.domain.models import CommentSubmission, PostPage, SubmissionResult
from portfolio.core.ports.content_source import IContentSource

logger = structlog.get_logger()

class GetInsight:
    """Use Case: One insight with its comment thread."""

    def __init__(self, source: IContentSource):
        self.source = source

    async def execute(self, slug: str) -> PostPage:
        """
        Raises:
            PostNotFoundError: the API has no published post for `slug`.
        """
        post, comments = await asyncio.gather(
            self.source.fetch_blog_post(slug),
            self.source.fetch_comments(slug),
        )
        if post is None:
            logger.info("post_not_found", slug=slug)
            raise PostNotFoundError(slug)
        return PostPage(post=post, comments=comments)

class AddComment:
    """Use Case: Forwards a reader comment (or reply) to the API."""

    def __init__(self, source: IContentSource):
        self.source = source

    async def execute(self, slug: str, comment: CommentSubmission) -> SubmissionResult:
        result = await self.source.submit_comment(slug, comment)
        logger.info("comment_submitted", slug=slug, ok=result.ok, reply=comment.parent_comment_id is not None)
        return result
