"""Shared test fixtures for swc-api."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def app(database_url):
    """Create test FastAPI app against a temporary SQLite database."""
    from swc_api.app import create_app
    return create_app()


@pytest.fixture()
def client(app):
    """HTTP test client; entering it runs startup, which creates the tables."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def create(client):
    """POST a payload to a collection and return the created row."""

    def _create(collection: str, payload: dict[str, Any]) -> dict[str, Any]:
        response = client.post(f"/v1/{collection}", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture()
def sample_technique() -> dict[str, Any]:
    return {
        "code": "TECH-001",
        "name": "Half Moon Water Harvesting",
        "description": "Semi-circular pits for water harvesting in arid regions",
        "category": "Water Harvesting",
        "technical_specs": {"diameter": 2, "depth": 0.5, "spacing": 1},
    }


@pytest.fixture()
def sample_site() -> dict[str, Any]:
    return {
        "name": "Arid Region Test Site",
        "location": "Region A, District 1",
        "latitude": 12.5,
        "longitude": 45.3,
        "slope_class": "STEEP",
        "soil_texture": "SANDY",
        "land_use": "PASTURE",
        "drainage": "WELL",
        "rainfall_band": "ARID",
        "gully_state": "MODERATE",
        "technical_specs": {"elevation": 1200, "soilDepth": 0.8},
        "safety_notes": {
            "hazards": ["flash floods", "rock falls"],
            "mitigations": ["early warning system"],
        },
    }


@pytest.fixture()
def sample_template() -> dict[str, Any]:
    return {
        "code": "TMPL-001",
        "name": "Half Moon Template",
        "parameter_schema": {
            "type": "object",
            "properties": {
                "diameter": {"type": "number", "minimum": 1, "maximum": 5},
                "numberOfPits": {"type": "integer", "minimum": 1},
            },
            "required": ["diameter", "numberOfPits"],
        },
        "outputs": {"totalVolume": {"type": "number", "unit": "m3"}},
    }


@pytest.fixture()
def design_chain(create, sample_technique, sample_site, sample_template) -> dict[str, dict]:
    """Technique, template, material, site, design, layer and BOQ wired together."""
    technique = create("techniques", sample_technique)
    template = create("design-templates", {**sample_template, "technique_id": technique["id"]})
    material = create("materials", {
        "code": "MAT-001", "name": "Soil Fill", "unit": "m3", "unit_cost": 50,
        "suppliers": [{"name": "Local Supplier A", "contact": "supplier-a@example.com"}],
    })
    site = create("sites", sample_site)
    design = create("designs", {
        "site_id": site["id"], "code": "DES-001", "name": "Half Moon Design",
        "status": "APPROVED", "technical_specs": {"totalArea": 5.5},
    })
    layer = create("design-layers", {
        "design_id": design["id"],
        "template_id": template["id"],
        "technique_id": technique["id"],
        "layer_number": 1,
        "name": "Main Half Moon Array",
        "parameters": {"diameter": 2.5, "numberOfPits": 42},
        "technical_specs": {"totalVolume": 105},
    })
    boq = create("boqs", {"design_id": design["id"], "total_cost": 5250, "notes": "Half moon BOQ"})
    return {
        "technique": technique,
        "template": template,
        "material": material,
        "site": site,
        "design": design,
        "layer": layer,
        "boq": boq,
    }
