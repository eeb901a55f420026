"""Service 2 — static HTML responder."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from service2.config import settings
from service2.api.routes_page import router as page_router, page_response

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.service_name} v{settings.version} starting up...")
    yield
    logger.info(f"{settings.service_name} shutting down...")


# Docs routes disabled: /docs must get the same page as every other path
app = FastAPI(
    title=settings.service_name,
    description="Answers every request with one fixed HTML page.",
    version=settings.version,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


def request_line(request: Request) -> str:
    """Format the per-request log line: ``[timestamp] METHOD PATH``.

    PATH is the request target as sent, still percent-encoded, so encoded
    spaces and newlines cannot split or forge log lines.
    """
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    raw_path = request.scope.get("raw_path")
    target = raw_path.decode("latin-1") if raw_path else request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"[{timestamp}] {request.method} {target}"


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(request_line(request))
    return await call_next(request)


@app.exception_handler(StarletteHTTPException)
async def absorb_http_errors(request: Request, exc: StarletteHTTPException):
    # Unknown methods and unmatched routes still get the page
    return page_response()


app.include_router(page_router)
