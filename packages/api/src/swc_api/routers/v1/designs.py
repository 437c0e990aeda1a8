"""Design and design-layer endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from swc_shared.db import get_session

from swc_api.dependencies import PaginationParams
from swc_api.routers.v1.crud import build_crud_router, list_response, require
from swc_api.services.resources import BOQS, DESIGN_LAYERS, DESIGNS

designs = build_crud_router(DESIGNS)
design_layers = build_crud_router(DESIGN_LAYERS)


@designs.get("/{design_id}/layers")
async def list_design_layers(
    design_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, DESIGNS, design_id)
    return await list_response(
        session, DESIGN_LAYERS, path=f"/v1/designs/{design_id}/layers",
        pagination=pagination, filters={"design_id": design_id},
    )


@designs.get("/{design_id}/boqs")
async def list_design_boqs(
    design_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, DESIGNS, design_id)
    return await list_response(
        session, BOQS, path=f"/v1/designs/{design_id}/boqs",
        pagination=pagination, filters={"design_id": design_id},
    )


routers: list[APIRouter] = [designs, design_layers]
