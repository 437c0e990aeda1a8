"""Bill of quantities endpoints: BOQs, BOQ items, cost records."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from swc_shared.db import get_session

from swc_api.dependencies import PaginationParams
from swc_api.responses import wrap_response
from swc_api.routers.v1.crud import build_crud_router, list_response, require
from swc_api.services import boq_service
from swc_api.services.resources import BOQ_ITEMS, BOQS, COST_RECORDS

boqs = build_crud_router(BOQS)
boq_items = build_crud_router(BOQ_ITEMS)
cost_records = build_crud_router(COST_RECORDS)


@boqs.get("/{boq_id}/items")
async def list_boq_items(
    boq_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, BOQS, boq_id)
    return await list_response(
        session, BOQ_ITEMS, path=f"/v1/boqs/{boq_id}/items",
        pagination=pagination, filters={"boq_id": boq_id},
    )


@boqs.get("/{boq_id}/cost-records")
async def list_boq_cost_records(
    boq_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_session),
):
    await require(session, BOQS, boq_id)
    return await list_response(
        session, COST_RECORDS, path=f"/v1/boqs/{boq_id}/cost-records",
        pagination=pagination, filters={"boq_id": boq_id},
    )


@boqs.get("/{boq_id}/summary")
async def get_boq_summary(boq_id: str, session: AsyncSession = Depends(get_session)):
    data = await boq_service.get_boq_summary(session, boq_id)
    if data is None:
        raise HTTPException(status_code=404, detail="BOQ not found")
    return wrap_response(data)


routers: list[APIRouter] = [boqs, boq_items, cost_records]
