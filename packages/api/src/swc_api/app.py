"""
FastAPI application factory — SWC Platform API.

Run locally:
    uvicorn swc_api.app:app --reload --port 3001
    swc-api
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from swc_shared import __version__
from swc_shared.config import settings
from swc_shared.db import dispose_engine, init_db
from swc_shared.logging import configure_logging

from swc_api.middleware.logging import LoggingMiddleware
from swc_api.responses import INTEGRITY_ERROR, MISSING_REFERENCE, error_response
from swc_api.routers.health import router as health_router
from swc_api.routers.v1 import v1_router
from swc_api.services.crud import MissingReferenceError

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables on startup (idempotent)
    await init_db()
    logger.info("database_ready")
    yield
    await dispose_engine()


async def _missing_reference_handler(request: Request, exc: MissingReferenceError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=error_response(
            MISSING_REFERENCE,
            str(exc),
            details={"field": exc.field, "table": exc.table, "id": exc.ref_id},
        ),
    )


async def _integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    return JSONResponse(
        status_code=409,
        content=error_response(
            INTEGRITY_ERROR,
            "The change conflicts with existing records.",
            details={"reason": str(exc.orig)},
        ),
    )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="SWC Platform API",
        description="Land-conservation sites, designs and bills of quantities",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(MissingReferenceError, _missing_reference_handler)
    app.add_exception_handler(IntegrityError, _integrity_error_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(v1_router)

    logger.info("app_created", cors_origins=settings.cors_origins_list)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("swc_api.app:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
