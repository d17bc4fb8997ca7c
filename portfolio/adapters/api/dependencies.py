# portfolio/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from portfolio.core.ports.content_source import IContentSource
from portfolio.core.use_cases.build_about_page import BuildAboutPage
from portfolio.core.use_cases.build_home_page import BuildHomePage
from portfolio.core.use_cases.get_insight import AddComment, GetInsight
from portfolio.core.use_cases.get_project import GetProjectDetail
from portfolio.core.use_cases.list_insights import ListInsights
from portfolio.core.use_cases.list_projects import ListPublishedProjects
from portfolio.core.use_cases.load_dashboard import LoadDashboard
from portfolio.core.use_cases.send_contact_message import SendContactMessage
from portfolio.shared.container import Container


@inject
def get_content_source(
    source: IContentSource = Depends(Provide[Container.content_source]),
) -> IContentSource:
    """Dependency to inject the content API adapter (container-managed)."""
    return source


@inject
def get_list_projects_use_case(
    use_case: ListPublishedProjects = Depends(Provide[Container.list_projects_use_case]),
) -> ListPublishedProjects:
    """Dependency to inject the ListPublishedProjects interactor."""
    return use_case


@inject
def get_project_detail_use_case(
    use_case: GetProjectDetail = Depends(Provide[Container.get_project_use_case]),
) -> GetProjectDetail:
    return use_case


@inject
def get_home_page_use_case(
    use_case: BuildHomePage = Depends(Provide[Container.build_home_page_use_case]),
) -> BuildHomePage:
    return use_case


@inject
def get_dashboard_use_case(
    use_case: LoadDashboard = Depends(Provide[Container.load_dashboard_use_case]),
) -> LoadDashboard:
    return use_case


@inject
def get_list_insights_use_case(
    use_case: ListInsights = Depends(Provide[Container.list_insights_use_case]),
) -> ListInsights:
    return use_case


@inject
def get_insight_use_case(
    use_case: GetInsight = Depends(Provide[Container.get_insight_use_case]),
) -> GetInsight:
    return use_case


@inject
def get_add_comment_use_case(
    use_case: AddComment = Depends(Provide[Container.add_comment_use_case]),
) -> AddComment:
    return use_case


@inject
def get_about_page_use_case(
    use_case: BuildAboutPage = Depends(Provide[Container.build_about_page_use_case]),
) -> BuildAboutPage:
    return use_case


@inject
def get_send_contact_message_use_case(
    use_case: SendContactMessage = Depends(Provide[Container.send_contact_message_use_case]),
) -> SendContactMessage:
    """Dependency to inject the SendContactMessage interactor."""
    return use_case
