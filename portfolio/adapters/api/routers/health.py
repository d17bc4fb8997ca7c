# portfolio\adapters\api\routers\health.py
from fastapi import APIRouter, Depends, status, Response
from typing import Dict
import structlog

from portfolio.core.ports.content_source import IContentSource
from portfolio.adapters.api.dependencies import get_content_source

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check():
    """
    Liveness check.
    Returns 200 OK while the process serves requests.
    """
    return {"status": "ok", "service": "portfolio-site"}

@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check(
    response: Response,
    source: IContentSource = Depends(get_content_source),
) -> Dict[str, str]:
    """
    Readiness check.
    Checks the upstream content API; 503 when it cannot be reached.
    Pages still render (empty) in that state.
    """
    health_status = {"content_api": "down"}

    if await source.health_check():
        health_status["content_api"] = "up"

    if health_status["content_api"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_check_failed", status=health_status)

    return health_status
