"""Tests for technique, template and material endpoints."""

from __future__ import annotations


def test_create_technique_persists_fields(client, create, sample_technique):
    created = create("techniques", sample_technique)
    assert created["id"]
    assert created["created_at"] is not None

    response = client.get(f"/v1/techniques/{created['id']}")
    assert response.status_code == 200
    data = response.json()["data"]
    for key, value in sample_technique.items():
        assert data[key] == value


def test_technique_requires_code_and_name(client):
    response = client.post("/v1/techniques", json={"description": "no code"})
    assert response.status_code == 422


def test_unknown_fields_are_rejected(client, sample_technique):
    response = client.post("/v1/techniques", json={**sample_technique, "colour": "red"})
    assert response.status_code == 422


def test_duplicate_code_conflicts(client, create, sample_technique):
    create("techniques", sample_technique)
    response = client.post("/v1/techniques", json=sample_technique)
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INTEGRITY_ERROR"


def test_list_techniques_filters_by_category(client, create, sample_technique):
    create("techniques", sample_technique)
    create("techniques", {
        "code": "TECH-002", "name": "Contour Lines", "category": "Soil Conservation",
    })

    response = client.get("/v1/techniques", params={"category": "Soil Conservation"})
    assert response.status_code == 200
    body = response.json()
    assert body["meta"]["total_count"] == 1
    assert body["data"][0]["code"] == "TECH-002"


def test_list_techniques_text_search(client, create, sample_technique):
    create("techniques", sample_technique)
    create("techniques", {"code": "TECH-003", "name": "Grass Strips"})

    response = client.get("/v1/techniques", params={"q": "grass"})
    assert [t["code"] for t in response.json()["data"]] == ["TECH-003"]


def test_update_technique(client, create, sample_technique):
    created = create("techniques", sample_technique)
    response = client.patch(
        f"/v1/techniques/{created['id']}",
        json={"technical_specs": {"diameter": 3}},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["technical_specs"] == {"diameter": 3}
    assert data["name"] == sample_technique["name"]


def test_get_missing_technique_returns_404(client):
    response = client.get("/v1/techniques/does-not-exist")
    assert response.status_code == 404


def test_delete_technique(client, create, sample_technique):
    created = create("techniques", sample_technique)
    response = client.delete(f"/v1/techniques/{created['id']}")
    assert response.status_code == 204
    assert client.get(f"/v1/techniques/{created['id']}").status_code == 404
    assert client.delete(f"/v1/techniques/{created['id']}").status_code == 404


def test_design_template_schema_round_trips(client, create, sample_template):
    created = create("design-templates", sample_template)
    data = client.get(f"/v1/design-templates/{created['id']}").json()["data"]
    assert data["parameter_schema"] == sample_template["parameter_schema"]
    assert data["outputs"] == sample_template["outputs"]


def test_design_template_with_unknown_technique(client, sample_template):
    response = client.post(
        "/v1/design-templates", json={**sample_template, "technique_id": "missing"},
    )
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "MISSING_REFERENCE"
    assert error["details"]["field"] == "technique_id"


def test_maintenance_template_keeps_extra_step_fields(client, create):
    steps = [
        {"step": 1, "task": "Inspection", "frequency": "monthly",
         "description": "Check pit integrity", "crew": 2},
    ]
    created = create("maintenance-templates", {
        "code": "MAINT-001", "name": "Half Moon Maintenance", "workflow_steps": steps,
        "technical_specs": {"toolsNeeded": ["shovel", "hoe"]},
    })
    assert created["workflow_steps"] == steps
    assert created["technical_specs"] == {"toolsNeeded": ["shovel", "hoe"]}


def test_technique_templates_listing(client, create, sample_technique, sample_template):
    technique = create("techniques", sample_technique)
    create("design-templates", {**sample_template, "technique_id": technique["id"]})
    create("design-templates", {**sample_template, "code": "TMPL-OTHER"})

    response = client.get(f"/v1/techniques/{technique['id']}/design-templates")
    assert response.status_code == 200
    assert [t["code"] for t in response.json()["data"]] == ["TMPL-001"]


def test_material_suppliers_round_trip(client, create):
    suppliers = [
        {"name": "Local Supplier A", "contact": "supplier-a@example.com"},
        {"name": "Local Supplier B", "contact": "supplier-b@example.com"},
    ]
    created = create("materials", {
        "code": "MAT-001", "name": "Soil Fill", "unit": "m3", "unit_cost": 50,
        "suppliers": suppliers,
    })
    assert created["suppliers"] == suppliers
    assert created["unit_cost"] == 50


def test_material_rejects_negative_cost(client):
    response = client.post("/v1/materials", json={
        "code": "MAT-X", "name": "Bad", "unit": "t", "unit_cost": -1,
    })
    assert response.status_code == 422


def test_update_rejects_null_for_required_field(client, create, sample_technique):
    created = create("techniques", sample_technique)
    response = client.patch(f"/v1/techniques/{created['id']}", json={"name": None})
    assert response.status_code == 422

    data = client.get(f"/v1/techniques/{created['id']}").json()["data"]
    assert data["name"] == sample_technique["name"]


def test_update_allows_null_for_optional_field(client, create, sample_technique):
    created = create("techniques", sample_technique)
    response = client.patch(f"/v1/techniques/{created['id']}", json={"category": None})
    assert response.status_code == 200
    assert response.json()["data"]["category"] is None


def test_text_search_wildcards_match_literally(client, create):
    create("techniques", {"code": "TECH-001", "name": "Half Moon"})
    create("techniques", {"code": "TECH-002", "name": "Grass 100% cover"})

    assert client.get("/v1/techniques", params={"q": "%"}).json()["meta"]["total_count"] == 1
    assert client.get("/v1/techniques", params={"q": "_"}).json()["meta"]["total_count"] == 0
