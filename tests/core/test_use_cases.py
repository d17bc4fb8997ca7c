# tests\core\test_use_cases.py
import pytest

from portfolio.core.domain.exceptions import PostNotFoundError, ProjectNotFoundError
from portfolio.core.domain.models import (
    AboutSection,
    BlogPost,
    Certification,
    Comment,
    CommentSubmission,
    ContactMessage,
    DashboardStat,
    DashboardSummary,
    Experience,
    Profile,
    ProjectDetail,
    Skill,
    SubmissionResult,
    TechItem,
)

@pytest.mark.asyncio
class TestListPublishedProjects:

    async def test_execute_success(self, container, mock_content_source, sample_projects):
        """
        Scenario: The Port returns three projects in two categories.
        Expected: The page carries all of them plus the derived categories.
        """
        use_case = container.list_projects_use_case()

        page = await use_case.execute()

        assert page.projects == sample_projects
        assert page.visible_projects == sample_projects
        assert set(page.categories) == {"Web", "Mobile"}
        assert page.active_category is None
        assert page.heading == "All Projects"
        assert page.revalidate_seconds == 60
        mock_content_source.fetch_published_projects.assert_awaited_once_with()

    async def test_execute_with_category(self, container):
        use_case = container.list_projects_use_case()

        page = await use_case.execute(category="Web")

        assert [p.slug for p in page.visible_projects] == ["storefront-revamp", "pricing-dashboard"]
        # Categories always come from the full list
        assert set(page.categories) == {"Web", "Mobile"}
        assert page.heading == "Web"

    async def test_execute_unknown_category(self, container):
        page = await container.list_projects_use_case().execute(category="Games")

        assert page.visible_projects == []
        assert len(page.projects) == 3

    async def test_execute_source_empty(self, container, mock_content_source):
        """
        Scenario: The fetch degraded to an empty list (API down).
        Expected: An empty page, no exception.
        """
        mock_content_source.fetch_published_projects.return_value = []

        page = await container.list_projects_use_case().execute()

        assert page.projects == []
        assert page.categories == []
        assert page.visible_projects == []


@pytest.mark.asyncio
class TestGetProjectDetail:

    async def test_execute_success(self, container, mock_content_source):
        detail = ProjectDetail(id="1", slug="storefront-revamp", title="Storefront Revamp")
        mock_content_source.fetch_project.return_value = detail

        result = await container.get_project_use_case().execute("storefront-revamp")

        assert result is detail
        mock_content_source.fetch_project.assert_awaited_once_with("storefront-revamp")

    async def test_execute_not_found(self, container):
        with pytest.raises(ProjectNotFoundError) as excinfo:
            await container.get_project_use_case().execute("missing")

        assert excinfo.value.slug == "missing"
        assert "missing" in str(excinfo.value)


@pytest.mark.asyncio
class TestBuildHomePage:

    async def test_execute_defaults(self, container, mock_content_source):
        """
        Scenario: Only projects are available.
        Expected: Placeholder profile, stats counted from what was fetched.
        """
        page = await container.build_home_page_use_case().execute()

        assert page.profile == Profile()
        assert page.profile.name == "Your Name"
        assert [s.label for s in page.stats] == ["Projects", "Skills", "Technologies"]
        assert [s.value for s in page.stats] == ["3", "0", "0"]
        mock_content_source.fetch_published_projects.assert_awaited_once_with(limit=4)
        mock_content_source.fetch_blog_posts.assert_awaited_once_with(limit=3)

    async def test_execute_full(self, container, mock_content_source):
        mock_content_source.fetch_profile.return_value = Profile(name="Ada Lovelace")
        mock_content_source.fetch_tech_stack.return_value = [TechItem(name=f"T{i}") for i in range(9)]
        mock_content_source.fetch_blog_posts.return_value = [BlogPost(title="Hello")]
        mock_content_source.fetch_skills.return_value = [Skill(title="APIs"), Skill(title="UX")]

        page = await container.build_home_page_use_case().execute()

        assert page.profile.name == "Ada Lovelace"
        # Tech stack preview is capped
        assert len(page.tech_stack) == 6
        assert [s.value for s in page.stats] == ["3", "2", "6"]
        assert page.posts[0].title == "Hello"


@pytest.mark.asyncio
class TestLoadDashboard:

    async def test_execute_fallback(self, container):
        summary = await container.load_dashboard_use_case().execute()

        assert summary == DashboardSummary.default()
        assert [s.label for s in summary.stats] == ["Total Projects", "Blog Posts", "Total Views", "Tech Stack"]
        assert all(s.value == "0" for s in summary.stats)

    async def test_execute_success(self, container, mock_content_source):
        live = DashboardSummary(
            stats=[DashboardStat(label="Total Projects", value="12")],
            projects_count=12,
        )
        mock_content_source.fetch_dashboard.return_value = live

        assert await container.load_dashboard_use_case().execute() is live


@pytest.mark.asyncio
class TestListInsights:

    async def test_execute_success(self, container, mock_content_source):
        posts = [
            BlogPost(slug="newest", title="Newest", category={"name": "Process"}),
            BlogPost(slug="older", title="Older", category="Engineering"),
            BlogPost(slug="oldest", title="Oldest", category="Process"),
        ]
        mock_content_source.fetch_blog_posts.return_value = posts

        page = await container.list_insights_use_case().execute()

        assert page.latest.slug == "newest"
        assert [p.slug for p in page.others] == ["older", "oldest"]
        assert page.topics == ["Process", "Engineering"]
        mock_content_source.fetch_blog_posts.assert_awaited_once_with()

    async def test_execute_source_empty(self, container):
        page = await container.list_insights_use_case().execute()

        assert page.posts == []
        assert page.latest is None
        assert page.topics == []


@pytest.mark.asyncio
class TestGetInsight:

    async def test_execute_success(self, container, mock_content_source):
        post = BlogPost(slug="shipping-fast", title="Shipping Fast")
        mock_content_source.fetch_blog_post.return_value = post
        mock_content_source.fetch_comments.return_value = [
            Comment(id=1, content="Top", replies=[Comment(id=2, content="Reply", replies=[Comment(id=3, content="Deep")])]),
            Comment(id=4, content="Another"),
        ]

        page = await container.get_insight_use_case().execute("shipping-fast")

        assert page.post is post
        assert page.comment_count == 4
        mock_content_source.fetch_comments.assert_awaited_once_with("shipping-fast")

    async def test_execute_not_found(self, container):
        with pytest.raises(PostNotFoundError) as excinfo:
            await container.get_insight_use_case().execute("missing")

        assert excinfo.value.slug == "missing"

    async def test_add_comment(self, container, mock_content_source):
        submission = CommentSubmission(author_name="Ada", content="Hi", parent_comment_id="1")

        result = await container.add_comment_use_case().execute("shipping-fast", submission)

        assert result.ok
        mock_content_source.submit_comment.assert_awaited_once_with("shipping-fast", submission)


@pytest.mark.asyncio
class TestBuildAboutPage:

    async def test_execute_success(self, container, mock_content_source):
        story = AboutSection(section_key="story", title="My Story")
        mock_content_source.fetch_about_sections.return_value = {"story": story}
        mock_content_source.fetch_experiences.return_value = [Experience(title="Engineer")]
        mock_content_source.fetch_certifications.return_value = [Certification(name="CKA")]

        page = await container.build_about_page_use_case().execute()

        assert page.section("story") is story
        assert page.section("offline").title is None
        assert page.experiences[0].title == "Engineer"
        assert page.education == []
        assert page.certifications[0].name == "CKA"
        assert not page.is_empty

    async def test_execute_source_empty(self, container):
        page = await container.build_about_page_use_case().execute()

        assert page.is_empty


@pytest.mark.asyncio
class TestSendContactMessage:

    async def test_execute_success(self, container, mock_content_source):
        message = ContactMessage(name="Ada", email="ada@example.com", message="Hello")

        result = await container.send_contact_message_use_case().execute(message)

        assert result.ok
        mock_content_source.submit_contact.assert_awaited_once_with(message)

    async def test_execute_rejected(self, container, mock_content_source):
        mock_content_source.submit_contact.return_value = SubmissionResult(ok=False, message="Invalid email address")

        result = await container.send_contact_message_use_case().execute(
            ContactMessage(name="Ada", email="nope", message="Hello")
        )

        assert not result.ok
        assert result.message == "Invalid email address"
