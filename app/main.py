"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse
from sqlalchemy import text

import app.modules  # noqa: F401
from app.core.config import get_settings
from app.core.database import SessionLocal, close_engine
from app.core.metrics import build_metrics_response, instrument_http_request
from app.modules.identity.router import router as identity_router
from app.modules.members.router import router as members_router
from app.shared.exceptions import register_exception_handlers
from app.shared.utils import utc_now

settings = get_settings()
logger = logging.getLogger(__name__)


def _landing_page_html() -> str:
    """Build minimal landing page for root path."""
    return f"""
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{settings.app_name} API</title>
  </head>
  <body>
    <main>
      <h1>{settings.app_name} API</h1>
      <p>Backend is running. Browse members at <code>{settings.api_prefix}/members</code>.</p>
      <ul>
        <li><a href="/docs">API documentation</a></li>
        <li><a href="/health">Health</a></li>
        <li><a href="/ready">Ready</a></li>
        <li><a href="/metrics">Metrics</a></li>
      </ul>
    </main>
  </body>
</html>
"""


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Application startup and shutdown hooks."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("Starting %s (%s)", settings.app_name, settings.app_env)

    yield

    logger.info("Shutting down %s", settings.app_name)
    await close_engine()


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
)
app.middleware("http")(instrument_http_request)

register_exception_handlers(app)

app.include_router(identity_router, prefix=settings.api_prefix)
app.include_router(members_router, prefix=settings.api_prefix)


@app.get("/", include_in_schema=False, response_class=HTMLResponse)
async def landing_page() -> HTMLResponse:
    """Root page with quick navigation links."""
    return HTMLResponse(content=_landing_page_html())


@app.get("/health")
async def healthcheck() -> dict[str, str]:
    """Liveness probe endpoint."""
    return {"status": "ok"}


async def _is_database_ready() -> bool:
    """Return True if DB accepts basic queries."""
    try:
        async with SessionLocal() as session:
            await session.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Database readiness check failed")
        return False


@app.get("/ready")
async def readiness_check() -> dict[str, str]:
    """Readiness probe endpoint with DB dependency check."""
    if not await _is_database_ready():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not ready",
        )
    return {
        "status": "ready",
        "database": "ok",
        "timestamp": utc_now().isoformat(),
    }


@app.get("/metrics", include_in_schema=False)
async def metrics_endpoint(_: Request) -> Response:
    """Prometheus metrics endpoint."""
    return build_metrics_response()
