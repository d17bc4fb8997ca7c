# portfolio/core/ports/content_source.py
from typing import Dict, List, Optional, Protocol

from portfolio.core.domain.models import (
    AboutSection,
    BlogPost,
    Certification,
    Comment,
    CommentSubmission,
    ContactMessage,
    DashboardSummary,
    Education,
    Experience,
    Profile,
    Project,
    ProjectDetail,
    ProjectFetchResult,
    Skill,
    SubmissionResult,
    TechItem,
)

class IContentSource(Protocol):
    """
    Port for reading portfolio content.

    Every read degrades to an empty value (empty list, empty dict or None)
    instead of raising; pages render whatever could be fetched. Writes
    report their outcome as a SubmissionResult.
    """

    async def fetch_published_projects(self, limit: Optional[int] = None) -> List[Project]:
        """
        Returns the published projects, or an empty list on any failure.

        Args:
            limit: Optional cap forwarded to the API (home page preview).
        """
        ...

    async def fetch_published_projects_result(self, limit: Optional[int] = None) -> ProjectFetchResult:
        """Same read as `fetch_published_projects`, with the failure reason kept."""
        ...

    async def fetch_project(self, slug: str) -> Optional[ProjectDetail]:
        """Returns the published project for `slug`, or None."""
        ...

    async def fetch_blog_posts(self, limit: Optional[int] = None) -> List[BlogPost]:
        ...

    async def fetch_blog_post(self, slug: str) -> Optional[BlogPost]:
        ...

    async def fetch_comments(self, slug: str) -> List[Comment]:
        ...

    async def submit_comment(self, slug: str, comment: CommentSubmission) -> SubmissionResult:
        ...

    async def fetch_profile(self) -> Optional[Profile]:
        ...

    async def fetch_tech_stack(self) -> List[TechItem]:
        ...

    async def fetch_skills(self) -> List[Skill]:
        ...

    async def fetch_about_sections(self) -> Dict[str, AboutSection]:
        ...

    async def fetch_experiences(self) -> List[Experience]:
        ...

    async def fetch_education(self) -> List[Education]:
        ...

    async def fetch_certifications(self) -> List[Certification]:
        ...

    async def submit_contact(self, message: ContactMessage) -> SubmissionResult:
        """Forwards a visitor inquiry; never raises."""
        ...

    async def fetch_dashboard(self) -> Optional[DashboardSummary]:
        ...

    async def health_check(self) -> bool:
        """Returns True if the content API answers."""
        ...
