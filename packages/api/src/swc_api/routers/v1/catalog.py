"""Catalogue endpoints: techniques, design templates, maintenance templates, materials."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from swc_shared.db import get_session

from swc_api.dependencies import PaginationParams
from swc_api.routers.v1.crud import build_crud_router, list_response, require
from swc_api.services.resources import (
    DESIGN_TEMPLATES,
    MAINTENANCE_TEMPLATES,
    MATERIALS,
    TECHNIQUES,
)

techniques = build_crud_router(TECHNIQUES)
design_templates = build_crud_router(DESIGN_TEMPLATES)
maintenance_templates = build_crud_router(MAINTENANCE_TEMPLATES)
materials = build_crud_router(MATERIALS)


@techniques.get("/{technique_id}/design-templates")
async def list_technique_design_templates(
    technique_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, TECHNIQUES, technique_id)
    return await list_response(
        session, DESIGN_TEMPLATES,
        path=f"/v1/techniques/{technique_id}/design-templates",
        pagination=pagination, filters={"technique_id": technique_id},
    )


@techniques.get("/{technique_id}/maintenance-templates")
async def list_technique_maintenance_templates(
    technique_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, TECHNIQUES, technique_id)
    return await list_response(
        session, MAINTENANCE_TEMPLATES,
        path=f"/v1/techniques/{technique_id}/maintenance-templates",
        pagination=pagination, filters={"technique_id": technique_id},
    )


routers: list[APIRouter] = [techniques, design_templates, maintenance_templates, materials]
