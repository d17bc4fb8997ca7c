# portfolio\adapters\api\routers\pages.py
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse
import structlog

from portfolio.core.domain.exceptions import ProjectNotFoundError
from portfolio.core.domain.models import ContactMessage
from portfolio.core.use_cases.build_about_page import BuildAboutPage
from portfolio.core.use_cases.build_home_page import BuildHomePage
from portfolio.core.use_cases.get_project import GetProjectDetail
from portfolio.core.use_cases.list_projects import ListPublishedProjects
from portfolio.core.use_cases.send_contact_message import SendContactMessage
from portfolio.adapters.api.dependencies import (
    get_about_page_use_case,
    get_home_page_use_case,
    get_list_projects_use_case,
    get_project_detail_use_case,
    get_send_contact_message_use_case,
)
from portfolio.adapters.api.templating import templates
from portfolio.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(tags=["Pages"], default_response_class=HTMLResponse)


def cache_control(seconds: int) -> str:
    return f"public, max-age={seconds}, stale-while-revalidate={seconds}"


@router.get("/", name="home", summary="Landing page")
async def home(
    request: Request,
    use_case: BuildHomePage = Depends(get_home_page_use_case),
):
    page = await use_case.execute()
    response = templates.TemplateResponse(request, "home.html", {"page": page, "form": {}})
    response.headers["Cache-Control"] = cache_control(settings.REVALIDATE_SECONDS)
    return response


@router.get("/projects", name="projects", summary="Published project listing")
async def list_projects(
    request: Request,
    category: Optional[str] = Query(None, description="Show only this category"),
    use_case: ListPublishedProjects = Depends(get_list_projects_use_case),
):
    """
    Renders every published project with the category sidebar.
    Upstream failures render the empty state; they never surface here.
    """
    page = await use_case.execute(category=category)
    response = templates.TemplateResponse(request, "projects.html", {"page": page})
    response.headers["Cache-Control"] = cache_control(page.revalidate_seconds)
    return response


@router.get("/projects/{slug}", name="project_detail", summary="Project case study")
async def project_detail(
    request: Request,
    slug: str,
    use_case: GetProjectDetail = Depends(get_project_detail_use_case),
):
    try:
        project = await use_case.execute(slug)
    except ProjectNotFoundError as e:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"title": "Project Not Found", "message": e.message, "back_url": "/projects", "back_label": "Back to Projects"},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    response = templates.TemplateResponse(request, "project_detail.html", {"project": project})
    response.headers["Cache-Control"] = cache_control(settings.REVALIDATE_SECONDS)
    return response


@router.get("/about", name="about", summary="Story, experience and education")
async def about(
    request: Request,
    use_case: BuildAboutPage = Depends(get_about_page_use_case),
):
    page = await use_case.execute()
    response = templates.TemplateResponse(request, "about.html", {"page": page})
    response.headers["Cache-Control"] = cache_control(settings.REVALIDATE_SECONDS)
    return response


@router.get("/contact", name="contact", summary="Contact form")
async def contact_form(request: Request):
    return templates.TemplateResponse(request, "contact.html", {"form": {}})


@router.post("/contact", name="contact_submit", summary="Send a contact message")
async def contact_submit(
    request: Request,
    name: str = Form(...),
    email: str = Form(...),
    message: str = Form(...),
    subject: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    use_case: SendContactMessage = Depends(get_send_contact_message_use_case),
):
    """
    Forwards the inquiry to the content API. The visitor sees either the
    confirmation or the API's error with their input kept.
    """
    inquiry = ContactMessage(
        name=name,
        email=email,
        message=message,
        subject=subject or None,
        company=company or None,
    )
    result = await use_case.execute(inquiry)
    return templates.TemplateResponse(
        request,
        "contact.html",
        {"result": result, "form": {} if result.ok else inquiry.model_dump()},
    )
