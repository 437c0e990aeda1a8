"""
data.py — sample records inserted by the seed routine.

Catalogue records (techniques, templates, materials, sites) are constants.
Records that point at other rows are built by functions that take the ids
produced by earlier groups. Figures such as BOQ totals are entered by hand,
exactly as an engineer would type them in.
"""

from __future__ import annotations

from datetime import date

from swc_shared.models import (
    BOQCreate,
    BOQItemCreate,
    CostRecordCreate,
    DesignCreate,
    DesignLayerCreate,
    DesignTemplateCreate,
    MaintenanceTemplateCreate,
    MaterialCreate,
    MetricCreate,
    SiteCreate,
    SiteTechniqueCreate,
    TechniqueCreate,
)

# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

TECHNIQUES: list[TechniqueCreate] = [
    TechniqueCreate(
        code="TECH-001",
        name="Half Moon Water Harvesting",
        description="Semi-circular pits for water harvesting in arid regions",
        category="Water Harvesting",
        technical_specs={"diameter": 2, "depth": 0.5, "spacing": 1},
    ),
    TechniqueCreate(
        code="TECH-002",
        name="Contour Lines",
        description="Bunds along contour lines to reduce runoff",
        category="Soil Conservation",
        technical_specs={"height": 0.3, "spacing": 20, "width": 0.5},
    ),
    TechniqueCreate(
        code="TECH-003",
        name="Grass Strips",
        description="Vegetated strips along contours to reduce erosion",
        category="Vegetation Management",
        technical_specs={"width": 2, "spacing": 30},
    ),
    TechniqueCreate(
        code="TECH-004",
        name="Pit Cultivation",
        description="Planting pits for water conservation",
        category="Water Harvesting",
        technical_specs={"width": 0.6, "depth": 0.4, "spacing": 2},
    ),
]

DESIGN_TEMPLATES: list[DesignTemplateCreate] = [
    DesignTemplateCreate(
        code="TMPL-001",
        name="Half Moon Template",
        description="Template for half moon water harvesting designs",
        parameter_schema={
            "type": "object",
            "properties": {
                "diameter": {"type": "number", "description": "Diameter in meters", "minimum": 1, "maximum": 5},
                "depth": {"type": "number", "description": "Depth in meters", "minimum": 0.3, "maximum": 1},
                "spacing": {"type": "number", "description": "Spacing between pits in meters", "minimum": 0.5, "maximum": 2},
                "numberOfPits": {"type": "integer", "description": "Total number of pits", "minimum": 1},
            },
            "required": ["diameter", "depth", "spacing", "numberOfPits"],
        },
        outputs={
            "volumePerPit": {"type": "number", "unit": "m3"},
            "totalVolume": {"type": "number", "unit": "m3"},
            "totalArea": {"type": "number", "unit": "m2"},
        },
    ),
    DesignTemplateCreate(
        code="TMPL-002",
        name="Contour Bund Template",
        description="Template for contour bund designs",
        parameter_schema={
            "type": "object",
            "properties": {
                "siteArea": {"type": "number", "description": "Site area in hectares"},
                "slope": {"type": "number", "description": "Average slope in percent"},
                "boundHeight": {"type": "number", "description": "Bund height in meters"},
            },
            "required": ["siteArea", "slope", "boundHeight"],
        },
        outputs={
            "numberOfBunds": {"type": "integer"},
            "totalBundLength": {"type": "number", "unit": "m"},
            "soilVolumeNeeded": {"type": "number", "unit": "m3"},
        },
    ),
]

MAINTENANCE_TEMPLATES: list[MaintenanceTemplateCreate] = [
    MaintenanceTemplateCreate(
        code="MAINT-001",
        name="Half Moon Maintenance",
        description="Regular maintenance schedule for half moon pits",
        workflow_steps=[
            {"step": 1, "task": "Inspection", "frequency": "monthly",
             "description": "Check pit integrity and sediment level"},
            {"step": 2, "task": "Sediment Removal", "frequency": "quarterly",
             "description": "Remove accumulated sediment"},
            {"step": 3, "task": "Vegetation Management", "frequency": "bi-annual",
             "description": "Manage vegetation around pits"},
        ],
        technical_specs={"toolsNeeded": ["shovel", "hoe", "measuring tape"]},
    ),
]

MATERIALS: list[MaterialCreate] = [
    MaterialCreate(
        code="MAT-001",
        name="Soil Fill",
        description="General soil fill material",
        unit="m3",
        unit_cost=50,
        suppliers=[
            {"name": "Local Supplier A", "contact": "supplier-a@example.com"},
            {"name": "Local Supplier B", "contact": "supplier-b@example.com"},
        ],
    ),
    MaterialCreate(
        code="MAT-002",
        name="Rocks/Stones",
        description="Large stones for lining and stabilization",
        unit="t",
        unit_cost=75,
        suppliers=[{"name": "Stone Quarry", "contact": "quarry@example.com"}],
    ),
    MaterialCreate(
        code="MAT-003",
        name="Grass Seeds",
        description="Native grass seeds for vegetation",
        unit="kg",
        unit_cost=100,
        suppliers=[{"name": "Seed Supplier", "contact": "seeds@example.com"}],
    ),
    MaterialCreate(
        code="MAT-004",
        name="Mulch",
        description="Organic mulch for moisture retention",
        unit="t",
        unit_cost=40,
        suppliers=[{"name": "Mulch Producer", "contact": "mulch@example.com"}],
    ),
]

SITES: list[SiteCreate] = [
    SiteCreate(
        name="Arid Region Test Site",
        description="Test site in arid region with steep slopes",
        location="Region A, District 1",
        latitude=12.5,
        longitude=45.3,
        slope_class="STEEP",
        soil_texture="SANDY",
        land_use="PASTURE",
        drainage="WELL",
        rainfall_band="ARID",
        gully_state="MODERATE",
        technical_specs={"elevation": 1200, "soilDepth": 0.8, "vegetationCover": 25},
        safety_notes={
            "hazards": ["flash floods", "rock falls"],
            "mitigations": ["early warning system", "stabilization works"],
        },
    ),
    SiteCreate(
        name="Sub-Humid Region Site",
        description="Site in sub-humid region with moderate slopes",
        location="Region B, District 2",
        latitude=15.2,
        longitude=48.5,
        slope_class="MODERATE",
        soil_texture="CLAY_LOAM",
        land_use="ARABLE",
        drainage="MODERATE",
        rainfall_band="SUB_HUMID",
        gully_state="MINOR",
        technical_specs={"elevation": 900, "soilDepth": 1.2, "vegetationCover": 60},
    ),
]

# ---------------------------------------------------------------------------
# Dependent records
# ---------------------------------------------------------------------------


def site_techniques(site_ids: list[str], technique_ids: list[str]) -> list[SiteTechniqueCreate]:
    return [
        SiteTechniqueCreate(
            site_id=site_ids[0],
            technique_id=technique_ids[0],
            status="PLANNED",
            planned_date=date(2024, 2, 15),
            maintenance_schedule={"frequency": "monthly", "nextDue": "2024-03-15"},
            workflow_steps=[
                {"step": 1, "description": "Site preparation", "status": "pending"},
                {"step": 2, "description": "Pit excavation", "status": "pending"},
                {"step": 3, "description": "Lining and stabilization", "status": "pending"},
            ],
        ),
        SiteTechniqueCreate(
            site_id=site_ids[1],
            technique_id=technique_ids[1],
            status="ACTIVE",
            implementation_date=date(2023, 12, 1),
            maintenance_schedule={"frequency": "quarterly", "nextDue": "2024-03-01"},
        ),
    ]


def designs(site_ids: list[str]) -> list[DesignCreate]:
    return [
        DesignCreate(
            site_id=site_ids[0],
            code="DES-001",
            name="Half Moon Design for Arid Site",
            description="Half moon water harvesting design for arid region",
            status="APPROVED",
            technical_specs={"totalArea": 5.5, "designPeriod": 25, "numberOfElements": 42},
            safety_notes={
                "concerns": ["worker safety during excavation"],
                "mitigations": ["supervision", "safety equipment"],
            },
        ),
        DesignCreate(
            site_id=site_ids[1],
            code="DES-002",
            name="Contour Bund Design",
            description="Contour bund design for sub-humid site",
            status="DRAFT",
            technical_specs={"totalArea": 8.2, "designPeriod": 20},
        ),
    ]


def design_layers(
    design_ids: list[str],
    template_ids: list[str],
    technique_ids: list[str],
) -> list[DesignLayerCreate]:
    return [
        DesignLayerCreate(
            design_id=design_ids[0],
            template_id=template_ids[0],
            technique_id=technique_ids[0],
            layer_number=1,
            name="Main Half Moon Array",
            description="Primary water harvesting pits",
            parameters={"diameter": 2.5, "depth": 0.6, "spacing": 1.5, "numberOfPits": 42},
            technical_specs={"volumePerPit": 2.5, "totalVolume": 105, "totalArea": 5.5},
            workflow_steps=[
                {"step": 1, "description": "Site marking", "duration": 2},
                {"step": 2, "description": "Excavation", "duration": 8},
                {"step": 3, "description": "Compaction", "duration": 2},
            ],
        ),
        DesignLayerCreate(
            design_id=design_ids[1],
            template_id=template_ids[1],
            technique_id=technique_ids[1],
            layer_number=1,
            name="Contour Bunds",
            description="Main contour bund system",
            parameters={"siteArea": 8.2, "slope": 12, "boundHeight": 0.4},
            technical_specs={"numberOfBunds": 6, "totalBundLength": 520, "soilVolumeNeeded": 832},
        ),
    ]


def boqs(design_ids: list[str]) -> list[BOQCreate]:
    return [
        BOQCreate(
            design_id=design_ids[0],
            total_cost=5250,
            currency="USD",
            notes="Half moon implementation BOQ",
        ),
        BOQCreate(
            design_id=design_ids[1],
            total_cost=8320,
            currency="USD",
            notes="Contour bund implementation BOQ",
        ),
    ]


def boq_items(
    boq_ids: list[str],
    layer_ids: list[str],
    material_ids: list[str],
    technique_ids: list[str],
) -> list[BOQItemCreate]:
    return [
        BOQItemCreate(
            boq_id=boq_ids[0],
            design_layer_id=layer_ids[0],
            material_id=material_ids[0],
            technique_id=technique_ids[0],
            description="Soil fill for half moon pits",
            quantity=105,
            unit_cost=50,
            total_cost=5250,
        ),
        BOQItemCreate(
            boq_id=boq_ids[1],
            design_layer_id=layer_ids[1],
            material_id=material_ids[0],
            technique_id=technique_ids[1],
            description="Soil fill for contour bunds",
            quantity=832,
            unit_cost=10,
            total_cost=8320,
        ),
    ]


def metrics(site_ids: list[str]) -> list[MetricCreate]:
    return [
        MetricCreate(
            site_id=site_ids[0],
            name="Soil Moisture Content",
            description="Soil moisture measured at 30cm depth",
            unit="%",
            value=35.5,
            measured_date=date(2024, 1, 15),
            technical_specs={"method": "TDR probe", "depth": 30},
        ),
        MetricCreate(
            site_id=site_ids[0],
            name="Runoff Amount",
            description="Amount of water runoff during rainfall event",
            unit="mm",
            value=12.3,
            measured_date=date(2024, 1, 20),
            technical_specs={"method": "rain gauge", "location": "Site center"},
        ),
    ]


def cost_records(boq_ids: list[str]) -> list[CostRecordCreate]:
    return [
        CostRecordCreate(
            boq_id=boq_ids[0],
            amount=3000,
            description="Labor costs for excavation",
            date=date(2024, 1, 10),
            category="labor",
        ),
        CostRecordCreate(
            boq_id=boq_ids[0],
            amount=2250,
            description="Material costs",
            date=date(2024, 1, 15),
            category="materials",
        ),
    ]
