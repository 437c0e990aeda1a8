"""
SQLAlchemy ORM models -- relational schema for the SWC platform.

Tables
------
techniques             -- conservation / land-management methods
design_templates       -- parameter schema + expected outputs per technique
maintenance_templates  -- ordered maintenance workflow steps
materials              -- materials library (unit cost, suppliers)
sites                  -- field sites with classification enums
site_techniques        -- site <-> technique junction with status and schedule
designs                -- site designs
design_layers          -- one parameterised technique application per design
boqs                   -- bills of quantities per design
boq_items              -- BOQ line items
metrics                -- site measurements
cost_records           -- incurred costs against a BOQ
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from swc_shared.constants import DEFAULT_CURRENCY
from swc_shared.db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Record:
    """Columns shared by every table."""

    id = Column(String(36), primary_key=True, default=_new_id)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False,
    )


# ---------------------------------------------------------------------------
# Catalogue: techniques, templates, materials
# ---------------------------------------------------------------------------

class Technique(_Record, Base):
    __tablename__ = "techniques"

    code = Column(String(32), unique=True, nullable=False)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    category = Column(String(128), nullable=True, index=True)
    technical_specs = Column(JSON, nullable=False, default=dict)

    site_techniques = relationship("SiteTechnique", back_populates="technique")
    design_layers = relationship("DesignLayer", back_populates="technique")


class DesignTemplate(_Record, Base):
    __tablename__ = "design_templates"

    code = Column(String(32), unique=True, nullable=False)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    technique_id = Column(String(36), ForeignKey("techniques.id"), nullable=True, index=True)
    parameter_schema = Column(JSON, nullable=False, default=dict)
    outputs = Column(JSON, nullable=False, default=dict)

    design_layers = relationship("DesignLayer", back_populates="template")


class MaintenanceTemplate(_Record, Base):
    __tablename__ = "maintenance_templates"

    code = Column(String(32), unique=True, nullable=False)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    technique_id = Column(String(36), ForeignKey("techniques.id"), nullable=True, index=True)
    workflow_steps = Column(JSON, nullable=False, default=list)
    technical_specs = Column(JSON, nullable=False, default=dict)


class Material(_Record, Base):
    __tablename__ = "materials"

    code = Column(String(32), unique=True, nullable=False)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    unit = Column(String(32), nullable=False)
    unit_cost = Column(Float, nullable=False)
    suppliers = Column(JSON, nullable=False, default=list)

    boq_items = relationship("BOQItem", back_populates="material")


# ---------------------------------------------------------------------------
# Sites
# ---------------------------------------------------------------------------

class Site(_Record, Base):
    __tablename__ = "sites"

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    # Classification (values from swc_shared.constants)
    slope_class = Column(String(32), nullable=False, index=True)
    soil_texture = Column(String(32), nullable=False)
    land_use = Column(String(32), nullable=False)
    drainage = Column(String(32), nullable=False)
    rainfall_band = Column(String(32), nullable=False, index=True)
    gully_state = Column(String(32), nullable=False)

    technical_specs = Column(JSON, nullable=False, default=dict)
    safety_notes = Column(JSON, nullable=True)

    site_techniques = relationship("SiteTechnique", back_populates="site")
    designs = relationship("Design", back_populates="site")
    metrics = relationship("Metric", back_populates="site")


class SiteTechnique(_Record, Base):
    __tablename__ = "site_techniques"

    site_id = Column(String(36), ForeignKey("sites.id"), nullable=False, index=True)
    technique_id = Column(String(36), ForeignKey("techniques.id"), nullable=False, index=True)
    status = Column(String(32), nullable=False, default="PLANNED", index=True)
    planned_date = Column(Date, nullable=True)
    implementation_date = Column(Date, nullable=True)
    completion_date = Column(Date, nullable=True)
    maintenance_schedule = Column(JSON, nullable=True)
    workflow_steps = Column(JSON, nullable=True)
    notes = Column(Text, nullable=True)

    site = relationship("Site", back_populates="site_techniques")
    technique = relationship("Technique", back_populates="site_techniques")

    __table_args__ = (
        UniqueConstraint("site_id", "technique_id", name="uq_site_technique"),
    )


class Metric(_Record, Base):
    __tablename__ = "metrics"

    site_id = Column(String(36), ForeignKey("sites.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    unit = Column(String(32), nullable=False)
    value = Column(Float, nullable=False)
    measured_date = Column(Date, nullable=False)
    technical_specs = Column(JSON, nullable=True)

    site = relationship("Site", back_populates="metrics")


# ---------------------------------------------------------------------------
# Designs
# ---------------------------------------------------------------------------

class Design(_Record, Base):
    __tablename__ = "designs"

    site_id = Column(String(36), ForeignKey("sites.id"), nullable=False, index=True)
    code = Column(String(32), unique=True, nullable=False)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="DRAFT", index=True)
    technical_specs = Column(JSON, nullable=False, default=dict)
    safety_notes = Column(JSON, nullable=True)

    site = relationship("Site", back_populates="designs")
    layers = relationship("DesignLayer", back_populates="design")
    boqs = relationship("BOQ", back_populates="design")


class DesignLayer(_Record, Base):
    __tablename__ = "design_layers"

    design_id = Column(String(36), ForeignKey("designs.id"), nullable=False, index=True)
    template_id = Column(String(36), ForeignKey("design_templates.id"), nullable=True)
    technique_id = Column(String(36), ForeignKey("techniques.id"), nullable=False)
    layer_number = Column(Integer, nullable=False, default=1)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    parameters = Column(JSON, nullable=False, default=dict)
    technical_specs = Column(JSON, nullable=False, default=dict)
    workflow_steps = Column(JSON, nullable=True)

    design = relationship("Design", back_populates="layers")
    template = relationship("DesignTemplate", back_populates="design_layers")
    technique = relationship("Technique", back_populates="design_layers")

    __table_args__ = (
        UniqueConstraint("design_id", "layer_number", name="uq_design_layer_number"),
    )


# ---------------------------------------------------------------------------
# Costing
# ---------------------------------------------------------------------------

class BOQ(_Record, Base):
    __tablename__ = "boqs"

    design_id = Column(String(36), ForeignKey("designs.id"), nullable=False, index=True)
    total_cost = Column(Float, nullable=False, default=0)
    currency = Column(String(3), nullable=False, default=DEFAULT_CURRENCY)
    notes = Column(Text, nullable=True)

    design = relationship("Design", back_populates="boqs")
    items = relationship("BOQItem", back_populates="boq")
    cost_records = relationship("CostRecord", back_populates="boq")


class BOQItem(_Record, Base):
    __tablename__ = "boq_items"

    boq_id = Column(String(36), ForeignKey("boqs.id"), nullable=False, index=True)
    design_layer_id = Column(String(36), ForeignKey("design_layers.id"), nullable=False, index=True)
    material_id = Column(String(36), ForeignKey("materials.id"), nullable=True)
    technique_id = Column(String(36), ForeignKey("techniques.id"), nullable=True)
    description = Column(Text, nullable=False)
    quantity = Column(Float, nullable=False)
    unit_cost = Column(Float, nullable=False)
    total_cost = Column(Float, nullable=False)

    boq = relationship("BOQ", back_populates="items")
    material = relationship("Material", back_populates="boq_items")


class CostRecord(_Record, Base):
    __tablename__ = "cost_records"

    boq_id = Column(String(36), ForeignKey("boqs.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    category = Column(String(32), nullable=False, index=True)

    boq = relationship("BOQ", back_populates="cost_records")


# Child tables first; the seed routine deletes in this order
DELETE_ORDER: tuple[type[Base], ...] = (
    CostRecord,
    BOQItem,
    BOQ,
    DesignLayer,
    Design,
    Metric,
    SiteTechnique,
    Site,
    DesignTemplate,
    MaintenanceTemplate,
    Technique,
    Material,
)
