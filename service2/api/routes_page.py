"""Catch-all endpoint serving the static page."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from service2.page import HTML_RESPONSE

router = APIRouter(tags=["page"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def page_response() -> HTMLResponse:
    """Build the one response every request receives."""
    return HTMLResponse(content=HTML_RESPONSE, status_code=200)


@router.api_route("/{full_path:path}", methods=ALL_METHODS, response_class=HTMLResponse)
async def serve_page(full_path: str):
    """Return the fixed HTML document regardless of path or method."""
    return page_response()
