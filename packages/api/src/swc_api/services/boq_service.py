"""BOQ read helpers."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from swc_shared.models import BOQSummary
from swc_shared.orm import BOQ, BOQItem, CostRecord


async def get_boq_summary(session: AsyncSession, boq_id: str) -> dict[str, Any] | None:
    """
    Return the recorded BOQ total alongside the plain sums of its item totals
    and cost-record amounts. The figures are reported side by side and never
    reconciled.
    """
    boq = await session.get(BOQ, boq_id)
    if boq is None:
        return None

    items_total, item_count = (
        await session.execute(
            select(func.coalesce(func.sum(BOQItem.total_cost), 0), func.count(BOQItem.id))
            .where(BOQItem.boq_id == boq_id)
        )
    ).one()
    records_total, record_count = (
        await session.execute(
            select(func.coalesce(func.sum(CostRecord.amount), 0), func.count(CostRecord.id))
            .where(CostRecord.boq_id == boq_id)
        )
    ).one()

    summary = BOQSummary(
        id=boq.id,
        created_at=boq.created_at,
        updated_at=boq.updated_at,
        design_id=boq.design_id,
        currency=boq.currency,
        total_cost=boq.total_cost,
        items_total=float(items_total),
        item_count=item_count,
        cost_records_total=float(records_total),
        cost_record_count=record_count,
    )
    return summary.to_json_dict()
