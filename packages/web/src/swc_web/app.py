"""
FastAPI application factory — SWC Platform front page.

Run locally:
    uvicorn swc_web.app:app --reload --port 3000
    swc-web
"""

from __future__ import annotations

from html import escape

import structlog
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from swc_shared import __version__
from swc_shared.config import settings
from swc_shared.logging import configure_logging

from swc_web.health import fetch_api_status

logger = structlog.get_logger()

TECH_STACK: tuple[str, ...] = (
    "FastAPI for the API",
    "FastAPI + httpx for the web front page",
    "SQLAlchemy for the database ORM",
    "Click for the seed command",
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>SWC Platform</title>
    <meta name="description" content="SWC Platform - Full Stack Application">
    <link rel="icon" href="/favicon.ico">
  </head>
  <body>
    <main>
      <h1>Welcome to SWC Platform</h1>
      <p>A full-stack monorepo for land-conservation sites, designs and bills of quantities</p>
      <div>
        <h2>API Status: {status}</h2>
      </div>
      <div style="margin-top: 2rem">
        <h3>Tech Stack</h3>
        <ul>
{stack}
        </ul>
      </div>
    </main>
  </body>
</html>
"""


def render_home(status: str) -> str:
    stack = "\n".join(f"          <li>{escape(item)}</li>" for item in TECH_STACK)
    return PAGE_TEMPLATE.format(status=escape(status), stack=stack)


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="SWC Platform",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )

    @app.get("/", response_class=HTMLResponse)
    async def home() -> str:
        status = await fetch_api_status()
        return render_home(status)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    logger.info("web_app_created", api_url=settings.api_url)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("swc_web.app:app", host=settings.web_host, port=settings.web_port)


if __name__ == "__main__":
    main()
