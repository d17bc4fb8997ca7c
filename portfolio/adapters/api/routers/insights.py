# portfolio\adapters\api\routers\insights.py
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
import structlog

from portfolio.core.domain.exceptions import PostNotFoundError
from portfolio.core.domain.models import CommentSubmission
from portfolio.core.use_cases.get_insight import AddComment, GetInsight
from portfolio.core.use_cases.list_insights import ListInsights
from portfolio.adapters.api.dependencies import (
    get_add_comment_use_case,
    get_insight_use_case,
    get_list_insights_use_case,
)
from portfolio.adapters.api.routers.pages import cache_control
from portfolio.adapters.api.templating import templates
from portfolio.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/insights", tags=["Insights"], default_response_class=HTMLResponse)


def _post_not_found(request: Request, error: PostNotFoundError):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"title": "Insight Not Found", "message": error.message, "back_url": "/insights", "back_label": "Back to Insights"},
        status_code=status.HTTP_404_NOT_FOUND,
    )


@router.get("", name="insights", summary="Published insights")
async def list_insights(
    request: Request,
    use_case: ListInsights = Depends(get_list_insights_use_case),
):
    page = await use_case.execute()
    response = templates.TemplateResponse(request, "insights.html", {"page": page})
    response.headers["Cache-Control"] = cache_control(settings.REVALIDATE_SECONDS)
    return response


@router.get("/{slug}", name="insight_detail", summary="Insight with comments")
async def insight_detail(
    request: Request,
    slug: str,
    use_case: GetInsight = Depends(get_insight_use_case),
):
    try:
        page = await use_case.execute(slug)
    except PostNotFoundError as e:
        return _post_not_found(request, e)

    response = templates.TemplateResponse(request, "insight_detail.html", {"page": page, "form": {}})
    response.headers["Cache-Control"] = cache_control(settings.REVALIDATE_SECONDS)
    return response


@router.post("/{slug}/comments", name="insight_comment", summary="Post a comment")
async def post_comment(
    request: Request,
    slug: str,
    author_name: str = Form(...),
    content: str = Form(...),
    author_email: Optional[str] = Form(None),
    parent_comment_id: Optional[str] = Form(None),
    add_comment: AddComment = Depends(get_add_comment_use_case),
    get_insight: GetInsight = Depends(get_insight_use_case),
):
    """
    Forwards the comment, then redirects back to the thread (303).
    A rejected comment re-renders the post with the API's message and
    the visitor's input kept.
    """
    submission = CommentSubmission(
        author_name=author_name,
        content=content,
        author_email=author_email or None,
        parent_comment_id=parent_comment_id or None,
    )
    result = await add_comment.execute(slug, submission)
    if result.ok:
        return RedirectResponse(f"/insights/{quote(slug, safe='')}#comments", status_code=status.HTTP_303_SEE_OTHER)

    try:
        page = await get_insight.execute(slug)
    except PostNotFoundError as e:
        return _post_not_found(request, e)

    return templates.TemplateResponse(
        request,
        "insight_detail.html",
        {"page": page, "comment_error": result.message, "form": submission.model_dump()},
    )
