# portfolio\adapters\api\routers\admin.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
import structlog

from portfolio.core.use_cases.load_dashboard import LoadDashboard
from portfolio.adapters.api.dependencies import get_dashboard_use_case
from portfolio.adapters.api.templating import templates

logger = structlog.get_logger()

router = APIRouter(prefix="/admin", tags=["Admin"], default_response_class=HTMLResponse)

# Both auth forms submit here; there is no credential check behind it.
DASHBOARD_PATH = "/admin/dashboard"


@router.get("/login", name="admin_login")
async def login(request: Request):
    """Sign-in form. Its plain form action points at the dashboard."""
    return templates.TemplateResponse(
        request,
        "admin/login.html",
        {"title": "Welcome Back", "form_action": DASHBOARD_PATH},
    )


@router.get("/register", name="admin_register")
async def register(request: Request):
    return templates.TemplateResponse(
        request,
        "admin/register.html",
        {"title": "Create Account", "form_action": DASHBOARD_PATH},
    )


@router.api_route("/dashboard", methods=["GET", "POST"], name="admin_dashboard")
async def dashboard(
    request: Request,
    use_case: LoadDashboard = Depends(get_dashboard_use_case),
):
    """
    Admin overview. Any submitted form body is ignored.
    """
    logger.info("admin_dashboard_viewed", method=request.method)
    summary = await use_case.execute()
    return templates.TemplateResponse(request, "admin/dashboard.html", {"summary": summary})
