# tests\conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from portfolio.core.domain.models import Project, ProjectFetchResult, SubmissionResult
from portfolio.core.ports.content_source import IContentSource
from portfolio.shared.container import container as app_container

PROJECT_PAYLOADS = [
    {
        "id": "1",
        "title": "Storefront Revamp",
        "slug": "storefront-revamp",
        "status": "published",
        "short_description": "Headless commerce rebuild.",
        "category": "Web",
        "tech_stack": ["Next.js", "Postgres"],
    },
    {
        "id": "2",
        "title": "Field Inspector",
        "slug": "field-inspector",
        "status": "published",
        "short_description": "Offline-first inspection app.",
        "category": "Mobile",
    },
    {
        "id": "3",
        "title": "Pricing Dashboard",
        "slug": "pricing-dashboard",
        "status": "published",
        "category": "Web",
        "year": "2024",
    },
]

@pytest.fixture
def project_payloads():
    """Raw `data.projects` items as the content API sends them."""
    return [dict(p) for p in PROJECT_PAYLOADS]

@pytest.fixture
def sample_projects(project_payloads):
    return [Project(**p) for p in project_payloads]

@pytest.fixture(scope="function")
def mock_content_source(sample_projects):
    """Returns a mock Content Source serving the sample projects."""
    source = MagicMock(spec=IContentSource)
    # Async methods must be mocked with AsyncMock
    source.fetch_published_projects = AsyncMock(return_value=sample_projects)
    source.fetch_published_projects_result = AsyncMock(
        return_value=ProjectFetchResult(projects=sample_projects)
    )
    source.fetch_project = AsyncMock(return_value=None)
    source.fetch_blog_post = AsyncMock(return_value=None)
    source.fetch_comments = AsyncMock(return_value=[])
    source.submit_comment = AsyncMock(return_value=SubmissionResult(ok=True))
    source.fetch_profile = AsyncMock(return_value=None)
    source.fetch_tech_stack = AsyncMock(return_value=[])
    source.fetch_blog_posts = AsyncMock(return_value=[])
    source.fetch_skills = AsyncMock(return_value=[])
    source.fetch_about_sections = AsyncMock(return_value={})
    source.fetch_experiences = AsyncMock(return_value=[])
    source.fetch_education = AsyncMock(return_value=[])
    source.fetch_certifications = AsyncMock(return_value=[])
    source.submit_contact = AsyncMock(return_value=SubmissionResult(ok=True, message="Message sent successfully"))
    source.fetch_dashboard = AsyncMock(return_value=None)
    source.health_check = AsyncMock(return_value=True)
    return source

@pytest.fixture(scope="function")
def container(mock_content_source):
    """
    The application container with the content API replaced by the mock.
    The global instance is used because the routes are wired to it.
    """
    app_container.content_source.override(mock_content_source)

    yield app_container

    # Clean up overrides after test
    app_container.content_source.reset_override()
