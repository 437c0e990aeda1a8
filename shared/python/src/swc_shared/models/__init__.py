"""
swc_shared.models — Pydantic models matching each database table.

These models are used by:
- packages/api: validate request bodies and serialize rows into responses
- packages/seed: validate sample records before they are inserted

Every table has three models:
  <Entity>Create.to_insert_dict() -> dict
  <Entity>Update.to_update_dict() -> dict   (only fields that were sent)
  <Entity>.from_db_row(row) -> Model        (ORM instance or dict)
"""

from swc_shared.models.catalog import (
    DesignTemplate,
    DesignTemplateCreate,
    DesignTemplateUpdate,
    MaintenanceTemplate,
    MaintenanceTemplateCreate,
    MaintenanceTemplateUpdate,
    Material,
    MaterialCreate,
    MaterialUpdate,
    Supplier,
    Technique,
    TechniqueCreate,
    TechniqueUpdate,
    WorkflowStep,
)
from swc_shared.models.costing import (
    BOQ,
    BOQCreate,
    BOQItem,
    BOQItemCreate,
    BOQItemUpdate,
    BOQSummary,
    BOQUpdate,
    CostRecord,
    CostRecordCreate,
    CostRecordUpdate,
)
from swc_shared.models.designs import (
    Design,
    DesignCreate,
    DesignLayer,
    DesignLayerCreate,
    DesignLayerUpdate,
    DesignUpdate,
)
from swc_shared.models.sites import (
    Metric,
    MetricCreate,
    MetricUpdate,
    Site,
    SiteCreate,
    SiteTechnique,
    SiteTechniqueCreate,
    SiteTechniqueUpdate,
    SiteUpdate,
)

__all__ = [
    "Technique",
    "TechniqueCreate",
    "TechniqueUpdate",
    "DesignTemplate",
    "DesignTemplateCreate",
    "DesignTemplateUpdate",
    "MaintenanceTemplate",
    "MaintenanceTemplateCreate",
    "MaintenanceTemplateUpdate",
    "WorkflowStep",
    "Material",
    "MaterialCreate",
    "MaterialUpdate",
    "Supplier",
    "Site",
    "SiteCreate",
    "SiteUpdate",
    "SiteTechnique",
    "SiteTechniqueCreate",
    "SiteTechniqueUpdate",
    "Metric",
    "MetricCreate",
    "MetricUpdate",
    "Design",
    "DesignCreate",
    "DesignUpdate",
    "DesignLayer",
    "DesignLayerCreate",
    "DesignLayerUpdate",
    "BOQ",
    "BOQCreate",
    "BOQUpdate",
    "BOQItem",
    "BOQItemCreate",
    "BOQItemUpdate",
    "BOQSummary",
    "CostRecord",
    "CostRecordCreate",
    "CostRecordUpdate",
]
