"""
models/catalog.py — Pydantic models for techniques, design_templates,
maintenance_templates and materials.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from swc_shared.models.base import InsertModel, RecordModel, UpdateModel


class WorkflowStep(BaseModel):
    """One entry of a maintenance template's workflow_steps list."""

    model_config = ConfigDict(extra="allow")

    step: int
    task: str
    frequency: str
    description: str | None = None


class Supplier(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    contact: str | None = None


# ---------------------------------------------------------------------------
# Technique
# ---------------------------------------------------------------------------

class TechniqueCreate(InsertModel):
    code: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    category: str | None = None
    technical_specs: dict[str, Any] = Field(default_factory=dict)


class TechniqueUpdate(UpdateModel):
    not_null = ("code", "name", "technical_specs")

    code: str | None = Field(None, min_length=1, max_length=32)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category: str | None = None
    technical_specs: dict[str, Any] | None = None


class Technique(RecordModel):
    """Matches the techniques table row."""

    code: str
    name: str
    description: str | None = None
    category: str | None = None
    technical_specs: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# DesignTemplate
# ---------------------------------------------------------------------------

class DesignTemplateCreate(InsertModel):
    code: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    technique_id: str | None = None
    parameter_schema: dict[str, Any] = Field(default_factory=dict)
    outputs: dict[str, Any] = Field(default_factory=dict)


class DesignTemplateUpdate(UpdateModel):
    not_null = ("code", "name", "parameter_schema", "outputs")

    code: str | None = Field(None, min_length=1, max_length=32)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    technique_id: str | None = None
    parameter_schema: dict[str, Any] | None = None
    outputs: dict[str, Any] | None = None


class DesignTemplate(RecordModel):
    """
    Matches the design_templates table row.

    parameter_schema is a JSON-Schema-shaped object:
    {"type": "object", "properties": {name: {type, description, minimum,
    maximum}}, "required": [...]}. outputs maps output names to
    {"type", "unit"}.
    """

    code: str
    name: str
    description: str | None = None
    technique_id: str | None = None
    parameter_schema: dict[str, Any] = Field(default_factory=dict)
    outputs: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# MaintenanceTemplate
# ---------------------------------------------------------------------------

class MaintenanceTemplateCreate(InsertModel):
    code: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    technique_id: str | None = None
    workflow_steps: list[WorkflowStep] = Field(default_factory=list)
    technical_specs: dict[str, Any] = Field(default_factory=dict)


class MaintenanceTemplateUpdate(UpdateModel):
    not_null = ("code", "name", "workflow_steps", "technical_specs")

    code: str | None = Field(None, min_length=1, max_length=32)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    technique_id: str | None = None
    workflow_steps: list[WorkflowStep] | None = None
    technical_specs: dict[str, Any] | None = None


class MaintenanceTemplate(RecordModel):
    """Matches the maintenance_templates table row."""

    code: str
    name: str
    description: str | None = None
    technique_id: str | None = None
    workflow_steps: list[WorkflowStep] = Field(default_factory=list)
    technical_specs: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Material
# ---------------------------------------------------------------------------

class MaterialCreate(InsertModel):
    code: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    unit: str = Field(min_length=1, max_length=32)
    unit_cost: float = Field(ge=0)
    suppliers: list[Supplier] = Field(default_factory=list)


class MaterialUpdate(UpdateModel):
    not_null = ("code", "name", "unit", "unit_cost", "suppliers")

    code: str | None = Field(None, min_length=1, max_length=32)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    unit: str | None = Field(None, min_length=1, max_length=32)
    unit_cost: float | None = Field(None, ge=0)
    suppliers: list[Supplier] | None = None


class Material(RecordModel):
    """Matches the materials table row."""

    code: str
    name: str
    description: str | None = None
    unit: str
    unit_cost: float
    suppliers: list[Supplier] = Field(default_factory=list)
