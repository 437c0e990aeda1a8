"""CRUD router factory shared by every /v1 collection."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from swc_shared.db import get_session

from swc_api.dependencies import PaginationParams
from swc_api.responses import WRITE_ERRORS, wrap_response
from swc_api.services import crud
from swc_api.services.resources import Resource
from swc_api.utils.pagination import build_links, next_cursor


async def require(session: AsyncSession, resource: Resource, row_id: str) -> None:
    """404 unless the row exists."""
    if not await crud.exists(session, resource, row_id):
        raise HTTPException(status_code=404, detail=f"{resource.label} not found")


async def list_response(
    session: AsyncSession,
    resource: Resource,
    *,
    path: str,
    pagination: PaginationParams,
    filters: dict[str, Any] | None = None,
    q: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> dict[str, Any]:
    data, total = await crud.list_rows(
        session,
        resource,
        filters=filters,
        q=q,
        start_date=start_date,
        end_date=end_date,
        page_size=pagination.page_size,
        last_id=pagination.last_id,
    )
    cursor = next_cursor(data, pagination.page_size)
    link_params = {
        **(filters or {}), "q": q, "start_date": start_date, "end_date": end_date,
        "page_size": pagination.page_size,
    }
    links = build_links(path, link_params, data, pagination.page_size)
    return wrap_response(
        data, total_count=total, page_size=pagination.page_size, cursor=cursor,
        links=links,
    )


def build_crud_router(resource: Resource) -> APIRouter:
    """List / create / get / update / delete endpoints for one collection."""
    router = APIRouter(prefix=f"/{resource.name}", tags=[resource.name])
    create_model = resource.create_model
    update_model = resource.update_model
    filter_help = ", ".join(resource.filters) or "none"
    date_help = (
        f"Inclusive bound on {resource.date_column}" if resource.date_column
        else "Ignored; this collection has no date column"
    )

    @router.get("", description=f"Equality filters: {filter_help}.")
    async def list_collection(
        request: Request,
        pagination: PaginationParams = Depends(),
        q: str | None = Query(None, description="Case-insensitive text search"),
        start_date: date | None = Query(None, description=date_help),
        end_date: date | None = Query(None, description=date_help),
        session: AsyncSession = Depends(get_session),
    ):
        filters = {
            name: request.query_params[name]
            for name in resource.filters
            if request.query_params.get(name)
        }
        return await list_response(
            session, resource, path=resource.path, pagination=pagination,
            filters=filters, q=q, start_date=start_date, end_date=end_date,
        )

    @router.post("", status_code=status.HTTP_201_CREATED, responses=WRITE_ERRORS)
    async def create_item(
        payload: create_model,
        session: AsyncSession = Depends(get_session),
    ):
        data = await crud.create_row(session, resource, payload)
        return wrap_response(data)

    @router.get("/{row_id}")
    async def get_item(row_id: str, session: AsyncSession = Depends(get_session)):
        data = await crud.get_row(session, resource, row_id)
        if data is None:
            raise HTTPException(status_code=404, detail=f"{resource.label} not found")
        return wrap_response(data)

    @router.patch("/{row_id}", responses=WRITE_ERRORS)
    async def update_item(
        row_id: str,
        payload: update_model,
        session: AsyncSession = Depends(get_session),
    ):
        data = await crud.update_row(session, resource, row_id, payload)
        if data is None:
            raise HTTPException(status_code=404, detail=f"{resource.label} not found")
        return wrap_response(data)

    @router.delete("/{row_id}", status_code=status.HTTP_204_NO_CONTENT, responses=WRITE_ERRORS)
    async def delete_item(row_id: str, session: AsyncSession = Depends(get_session)):
        if not await crud.delete_row(session, resource, row_id):
            raise HTTPException(status_code=404, detail=f"{resource.label} not found")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
