"""
models/designs.py — Pydantic models for designs and design_layers.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from swc_shared.constants import DesignStatus
from swc_shared.models.base import InsertModel, RecordModel, UpdateModel


class DesignCreate(InsertModel):
    site_id: str
    code: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    status: DesignStatus = "DRAFT"
    technical_specs: dict[str, Any] = Field(default_factory=dict)
    safety_notes: dict[str, Any] | None = None


class DesignUpdate(UpdateModel):
    not_null = ("code", "name", "status", "technical_specs")

    code: str | None = Field(None, min_length=1, max_length=32)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: DesignStatus | None = None
    technical_specs: dict[str, Any] | None = None
    safety_notes: dict[str, Any] | None = None


class Design(RecordModel):
    """Matches the designs table row."""

    site_id: str
    code: str
    name: str
    description: str | None = None
    status: DesignStatus
    technical_specs: dict[str, Any] = Field(default_factory=dict)
    safety_notes: dict[str, Any] | None = None


class DesignLayerCreate(InsertModel):
    design_id: str
    template_id: str | None = None
    technique_id: str
    layer_number: int = Field(1, ge=1)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    technical_specs: dict[str, Any] = Field(default_factory=dict)
    workflow_steps: list[dict[str, Any]] | None = None


class DesignLayerUpdate(UpdateModel):
    not_null = (
        "technique_id", "layer_number", "name", "parameters", "technical_specs",
    )

    template_id: str | None = None
    technique_id: str | None = None
    layer_number: int | None = Field(None, ge=1)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    parameters: dict[str, Any] | None = None
    technical_specs: dict[str, Any] | None = None
    workflow_steps: list[dict[str, Any]] | None = None


class DesignLayer(RecordModel):
    """
    Matches the design_layers table row.

    parameters holds the values entered against the template's
    parameter_schema; technical_specs holds the computed outputs.
    Unique on (design_id, layer_number).
    """

    design_id: str
    template_id: str | None = None
    technique_id: str
    layer_number: int
    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    technical_specs: dict[str, Any] = Field(default_factory=dict)
    workflow_steps: list[dict[str, Any]] | None = None
