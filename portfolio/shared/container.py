# portfolio\shared\container.py
from dependency_injector import containers, providers

from portfolio.shared.config import settings
from portfolio.adapters.content_api import ContentApiClient

from portfolio.core.use_cases.build_about_page import BuildAboutPage
from portfolio.core.use_cases.build_home_page import BuildHomePage
from portfolio.core.use_cases.get_insight import AddComment, GetInsight
from portfolio.core.use_cases.get_project import GetProjectDetail
from portfolio.core.use_cases.list_insights import ListInsights
from portfolio.core.use_cases.list_projects import ListPublishedProjects
from portfolio.core.use_cases.load_dashboard import LoadDashboard
from portfolio.core.use_cases.send_contact_message import SendContactMessage

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Assembly instructions for the application; tests override
    `content_source` with a mock.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Content API client (Singleton: stateless, opens a client per call)
    content_source = providers.Singleton(
        ContentApiClient,
        base_url=config.BASE_URL,
        revalidate_seconds=config.REVALIDATE_SECONDS,
    )

    # 3. Use Cases (Factory: new instance per request)

    list_projects_use_case = providers.Factory(
        ListPublishedProjects,
        source=content_source,
        revalidate_seconds=config.REVALIDATE_SECONDS,
    )

    get_project_use_case = providers.Factory(
        GetProjectDetail,
        source=content_source,
    )

    build_home_page_use_case = providers.Factory(
        BuildHomePage,
        source=content_source,
        featured_limit=config.FEATURED_PROJECTS_LIMIT,
        posts_limit=config.RECENT_POSTS_LIMIT,
        tech_preview=config.TECH_STACK_PREVIEW,
    )

    list_insights_use_case = providers.Factory(ListInsights, source=content_source)
    get_insight_use_case = providers.Factory(GetInsight, source=content_source)
    add_comment_use_case = providers.Factory(AddComment, source=content_source)

    build_about_page_use_case = providers.Factory(BuildAboutPage, source=content_source)
    send_contact_message_use_case = providers.Factory(SendContactMessage, source=content_source)

    load_dashboard_use_case = providers.Factory(
        LoadDashboard,
        source=content_source,
    )

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
