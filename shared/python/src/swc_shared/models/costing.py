"""
models/costing.py — Pydantic models for boqs, boq_items and cost_records.

Totals are hand-entered values; nothing here recomputes or cross-checks
them.
"""

from __future__ import annotations

import datetime as dt

from pydantic import Field

from swc_shared.constants import DEFAULT_CURRENCY, CostCategory
from swc_shared.models.base import InsertModel, RecordModel, UpdateModel

# ---------------------------------------------------------------------------
# BOQ
# ---------------------------------------------------------------------------


class BOQCreate(InsertModel):
    design_id: str
    total_cost: float = Field(0, ge=0)
    currency: str = Field(DEFAULT_CURRENCY, min_length=3, max_length=3)
    notes: str | None = None


class BOQUpdate(UpdateModel):
    not_null = ("total_cost", "currency")

    total_cost: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    notes: str | None = None


class BOQ(RecordModel):
    """Matches the boqs table row."""

    design_id: str
    total_cost: float
    currency: str
    notes: str | None = None


# ---------------------------------------------------------------------------
# BOQItem
# ---------------------------------------------------------------------------


class BOQItemCreate(InsertModel):
    boq_id: str
    design_layer_id: str
    material_id: str | None = None
    technique_id: str | None = None
    description: str = Field(min_length=1)
    quantity: float = Field(ge=0)
    unit_cost: float = Field(ge=0)
    total_cost: float = Field(ge=0)


class BOQItemUpdate(UpdateModel):
    not_null = (
        "design_layer_id", "description", "quantity", "unit_cost", "total_cost",
    )

    design_layer_id: str | None = None
    material_id: str | None = None
    technique_id: str | None = None
    description: str | None = Field(None, min_length=1)
    quantity: float | None = Field(None, ge=0)
    unit_cost: float | None = Field(None, ge=0)
    total_cost: float | None = Field(None, ge=0)


class BOQItem(RecordModel):
    """Matches the boq_items table row."""

    boq_id: str
    design_layer_id: str
    material_id: str | None = None
    technique_id: str | None = None
    description: str
    quantity: float
    unit_cost: float
    total_cost: float


# ---------------------------------------------------------------------------
# CostRecord
# ---------------------------------------------------------------------------


class CostRecordCreate(InsertModel):
    boq_id: str
    amount: float = Field(ge=0)
    description: str | None = None
    date: dt.date
    category: CostCategory


class CostRecordUpdate(UpdateModel):
    not_null = ("amount", "date", "category")

    amount: float | None = Field(None, ge=0)
    description: str | None = None
    date: dt.date | None = None
    category: CostCategory | None = None


class CostRecord(RecordModel):
    """Matches the cost_records table row."""

    boq_id: str
    amount: float
    description: str | None = None
    date: dt.date
    category: CostCategory


class BOQSummary(RecordModel):
    """Recorded BOQ total next to plain sums of its items and cost records."""

    design_id: str
    currency: str
    total_cost: float
    items_total: float
    item_count: int
    cost_records_total: float
    cost_record_count: int
