"""
Resource registry — one entry per REST collection.

Each Resource ties a URL collection name to its ORM table, its record
models, the parent tables its foreign-key fields must point at, the
column used for `q` text search, the columns accepted as equality
filters on the list endpoint, and the date column `start_date` / `end_date`
bound where a table has one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from swc_shared import models, orm
from swc_shared.db import Base
from swc_shared.models.base import InsertModel, RecordModel, UpdateModel


@dataclass(frozen=True)
class Resource:
    name: str
    label: str
    table: type[Base]
    read_model: type[RecordModel]
    create_model: type[InsertModel]
    update_model: type[UpdateModel]
    references: dict[str, type[Base]] = field(default_factory=dict)
    search_column: str | None = "name"
    filters: tuple[str, ...] = ()
    date_column: str | None = None

    @property
    def path(self) -> str:
        return f"/v1/{self.name}"


TECHNIQUES = Resource(
    name="techniques",
    label="Technique",
    table=orm.Technique,
    read_model=models.Technique,
    create_model=models.TechniqueCreate,
    update_model=models.TechniqueUpdate,
    filters=("code", "category"),
)

DESIGN_TEMPLATES = Resource(
    name="design-templates",
    label="Design template",
    table=orm.DesignTemplate,
    read_model=models.DesignTemplate,
    create_model=models.DesignTemplateCreate,
    update_model=models.DesignTemplateUpdate,
    references={"technique_id": orm.Technique},
    filters=("code", "technique_id"),
)

MAINTENANCE_TEMPLATES = Resource(
    name="maintenance-templates",
    label="Maintenance template",
    table=orm.MaintenanceTemplate,
    read_model=models.MaintenanceTemplate,
    create_model=models.MaintenanceTemplateCreate,
    update_model=models.MaintenanceTemplateUpdate,
    references={"technique_id": orm.Technique},
    filters=("code", "technique_id"),
)

MATERIALS = Resource(
    name="materials",
    label="Material",
    table=orm.Material,
    read_model=models.Material,
    create_model=models.MaterialCreate,
    update_model=models.MaterialUpdate,
    filters=("code", "unit"),
)

SITES = Resource(
    name="sites",
    label="Site",
    table=orm.Site,
    read_model=models.Site,
    create_model=models.SiteCreate,
    update_model=models.SiteUpdate,
    filters=(
        "slope_class",
        "soil_texture",
        "land_use",
        "drainage",
        "rainfall_band",
        "gully_state",
    ),
)

SITE_TECHNIQUES = Resource(
    name="site-techniques",
    label="Site technique",
    table=orm.SiteTechnique,
    read_model=models.SiteTechnique,
    create_model=models.SiteTechniqueCreate,
    update_model=models.SiteTechniqueUpdate,
    references={"site_id": orm.Site, "technique_id": orm.Technique},
    search_column="notes",
    filters=("site_id", "technique_id", "status"),
    date_column="planned_date",
)

METRICS = Resource(
    name="metrics",
    label="Metric",
    table=orm.Metric,
    read_model=models.Metric,
    create_model=models.MetricCreate,
    update_model=models.MetricUpdate,
    references={"site_id": orm.Site},
    filters=("site_id", "unit"),
    date_column="measured_date",
)

DESIGNS = Resource(
    name="designs",
    label="Design",
    table=orm.Design,
    read_model=models.Design,
    create_model=models.DesignCreate,
    update_model=models.DesignUpdate,
    references={"site_id": orm.Site},
    filters=("site_id", "code", "status"),
)

DESIGN_LAYERS = Resource(
    name="design-layers",
    label="Design layer",
    table=orm.DesignLayer,
    read_model=models.DesignLayer,
    create_model=models.DesignLayerCreate,
    update_model=models.DesignLayerUpdate,
    references={
        "design_id": orm.Design,
        "template_id": orm.DesignTemplate,
        "technique_id": orm.Technique,
    },
    filters=("design_id", "template_id", "technique_id"),
)

BOQS = Resource(
    name="boqs",
    label="BOQ",
    table=orm.BOQ,
    read_model=models.BOQ,
    create_model=models.BOQCreate,
    update_model=models.BOQUpdate,
    references={"design_id": orm.Design},
    search_column="notes",
    filters=("design_id", "currency"),
)

BOQ_ITEMS = Resource(
    name="boq-items",
    label="BOQ item",
    table=orm.BOQItem,
    read_model=models.BOQItem,
    create_model=models.BOQItemCreate,
    update_model=models.BOQItemUpdate,
    references={
        "boq_id": orm.BOQ,
        "design_layer_id": orm.DesignLayer,
        "material_id": orm.Material,
        "technique_id": orm.Technique,
    },
    search_column="description",
    filters=("boq_id", "design_layer_id", "material_id", "technique_id"),
)

COST_RECORDS = Resource(
    name="cost-records",
    label="Cost record",
    table=orm.CostRecord,
    read_model=models.CostRecord,
    create_model=models.CostRecordCreate,
    update_model=models.CostRecordUpdate,
    references={"boq_id": orm.BOQ},
    search_column="description",
    filters=("boq_id", "category"),
    date_column="date",
)

ALL_RESOURCES: tuple[Resource, ...] = (
    TECHNIQUES,
    DESIGN_TEMPLATES,
    MAINTENANCE_TEMPLATES,
    MATERIALS,
    SITES,
    SITE_TECHNIQUES,
    METRICS,
    DESIGNS,
    DESIGN_LAYERS,
    BOQS,
    BOQ_ITEMS,
    COST_RECORDS,
)
