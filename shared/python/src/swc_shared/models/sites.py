"""
models/sites.py — Pydantic models for sites, site_techniques and metrics.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import Field

from swc_shared.constants import (
    Drainage,
    GullyState,
    LandUse,
    RainfallBand,
    SiteTechniqueStatus,
    SlopeClass,
    SoilTexture,
)
from swc_shared.models.base import InsertModel, RecordModel, UpdateModel

# ---------------------------------------------------------------------------
# Site
# ---------------------------------------------------------------------------


class SiteCreate(InsertModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    location: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    slope_class: SlopeClass
    soil_texture: SoilTexture
    land_use: LandUse
    drainage: Drainage
    rainfall_band: RainfallBand
    gully_state: GullyState
    technical_specs: dict[str, Any] = Field(default_factory=dict)
    safety_notes: dict[str, Any] | None = None


class SiteUpdate(UpdateModel):
    not_null = (
        "name", "slope_class", "soil_texture", "land_use", "drainage",
        "rainfall_band", "gully_state", "technical_specs",
    )

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    location: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    slope_class: SlopeClass | None = None
    soil_texture: SoilTexture | None = None
    land_use: LandUse | None = None
    drainage: Drainage | None = None
    rainfall_band: RainfallBand | None = None
    gully_state: GullyState | None = None
    technical_specs: dict[str, Any] | None = None
    safety_notes: dict[str, Any] | None = None


class Site(RecordModel):
    """Matches the sites table row."""

    name: str
    description: str | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    slope_class: SlopeClass
    soil_texture: SoilTexture
    land_use: LandUse
    drainage: Drainage
    rainfall_band: RainfallBand
    gully_state: GullyState
    technical_specs: dict[str, Any] = Field(default_factory=dict)
    safety_notes: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# SiteTechnique (junction)
# ---------------------------------------------------------------------------


class SiteTechniqueCreate(InsertModel):
    site_id: str
    technique_id: str
    status: SiteTechniqueStatus = "PLANNED"
    planned_date: date | None = None
    implementation_date: date | None = None
    completion_date: date | None = None
    maintenance_schedule: dict[str, Any] | None = None
    workflow_steps: list[dict[str, Any]] | None = None
    notes: str | None = None


class SiteTechniqueUpdate(UpdateModel):
    not_null = ("status",)

    status: SiteTechniqueStatus | None = None
    planned_date: date | None = None
    implementation_date: date | None = None
    completion_date: date | None = None
    maintenance_schedule: dict[str, Any] | None = None
    workflow_steps: list[dict[str, Any]] | None = None
    notes: str | None = None


class SiteTechnique(RecordModel):
    """Matches the site_techniques table row. Unique on (site_id, technique_id)."""

    site_id: str
    technique_id: str
    status: SiteTechniqueStatus
    planned_date: date | None = None
    implementation_date: date | None = None
    completion_date: date | None = None
    maintenance_schedule: dict[str, Any] | None = None
    workflow_steps: list[dict[str, Any]] | None = None
    notes: str | None = None


# ---------------------------------------------------------------------------
# Metric
# ---------------------------------------------------------------------------


class MetricCreate(InsertModel):
    site_id: str
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    unit: str = Field(min_length=1, max_length=32)
    value: float
    measured_date: date
    technical_specs: dict[str, Any] | None = None


class MetricUpdate(UpdateModel):
    not_null = ("name", "unit", "value", "measured_date")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    unit: str | None = Field(None, min_length=1, max_length=32)
    value: float | None = None
    measured_date: date | None = None
    technical_specs: dict[str, Any] | None = None


class Metric(RecordModel):
    """Matches the metrics table row."""

    site_id: str
    name: str
    description: str | None = None
    unit: str
    value: float
    measured_date: date
    technical_specs: dict[str, Any] | None = None
