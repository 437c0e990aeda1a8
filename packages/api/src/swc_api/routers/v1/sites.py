"""Site endpoints, plus the site-technique junction and site metrics."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from swc_shared.db import get_session

from swc_api.dependencies import PaginationParams
from swc_api.routers.v1.crud import build_crud_router, list_response, require
from swc_api.services.resources import DESIGNS, METRICS, SITE_TECHNIQUES, SITES

sites = build_crud_router(SITES)
site_techniques = build_crud_router(SITE_TECHNIQUES)
metrics = build_crud_router(METRICS)


@sites.get("/{site_id}/techniques")
async def list_site_techniques(
    site_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, SITES, site_id)
    return await list_response(
        session, SITE_TECHNIQUES, path=f"/v1/sites/{site_id}/techniques",
        pagination=pagination, filters={"site_id": site_id},
    )


@sites.get("/{site_id}/designs")
async def list_site_designs(
    site_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, SITES, site_id)
    return await list_response(
        session, DESIGNS, path=f"/v1/sites/{site_id}/designs",
        pagination=pagination, filters={"site_id": site_id},
    )


@sites.get("/{site_id}/metrics")
async def list_site_metrics(
    site_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, SITES, site_id)
    return await list_response(
        session, METRICS, path=f"/v1/sites/{site_id}/metrics",
        pagination=pagination, filters={"site_id": site_id},
    )


routers: list[APIRouter] = [sites, site_techniques, metrics]
