"""
Home page router.

Renders the landing page from a Jinja2 template with the API version,
uptime and current server time.
"""

from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.src.config import Settings
from api.src.dependencies import get_app_settings
from api.src.models import HomePageContext

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Uptime is not tracked; the page shows a fixed placeholder.
UPTIME_PLACEHOLDER = "0 days, 0 hours, 0 minutes"

router = APIRouter(tags=["Home"])


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Home Page",
    responses={
        200: {"description": "HTML landing page", "content": {"text/html": {}}}
    }
)
async def home_page(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    """Render the HTML landing page."""
    context = HomePageContext(
        version=settings.app_version,
        uptime=UPTIME_PLACEHOLDER,
        server_time=datetime.now(timezone.utc).isoformat(),
    )
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            **context.model_dump(),
            "app_name": settings.app_name,
            "docs_url": request.app.docs_url,
            "openapi_url": request.app.openapi_url,
        },
    )
