"""Tests for BOQ, BOQ item and cost record endpoints."""

from __future__ import annotations


def _item(chain, **overrides):
    payload = {
        "boq_id": chain["boq"]["id"],
        "design_layer_id": chain["layer"]["id"],
        "material_id": chain["material"]["id"],
        "technique_id": chain["technique"]["id"],
        "description": "Soil fill for half moon pits",
        "quantity": 105,
        "unit_cost": 50,
        "total_cost": 5250,
    }
    payload.update(overrides)
    return payload


def test_create_boq_item(client, create, design_chain):
    item = create("boq-items", _item(design_chain))
    assert item["total_cost"] == 5250

    listed = client.get(f"/v1/boqs/{design_chain['boq']['id']}/items").json()
    assert listed["meta"]["total_count"] == 1


def test_boq_item_requires_existing_material(client, design_chain):
    response = client.post("/v1/boq-items", json=_item(design_chain, material_id="missing"))
    assert response.status_code == 422
    assert response.json()["error"]["details"] == {
        "field": "material_id", "table": "materials", "id": "missing",
    }


def test_boq_item_totals_are_not_reconciled(client, create, design_chain):
    """Hand-entered totals are stored as given."""
    item = create("boq-items", _item(design_chain, quantity=2, unit_cost=3, total_cost=100))
    assert item["total_cost"] == 100


def test_cost_record_category_validated(client, design_chain):
    response = client.post("/v1/cost-records", json={
        "boq_id": design_chain["boq"]["id"], "amount": 10, "date": "2024-01-10",
        "category": "snacks",
    })
    assert response.status_code == 422


def test_boq_summary(client, create, design_chain):
    boq_id = design_chain["boq"]["id"]
    create("boq-items", _item(design_chain))
    create("cost-records", {
        "boq_id": boq_id, "amount": 3000, "date": "2024-01-10", "category": "labor",
        "description": "Labor costs for excavation",
    })
    create("cost-records", {
        "boq_id": boq_id, "amount": 2250, "date": "2024-01-15", "category": "materials",
    })

    response = client.get(f"/v1/boqs/{boq_id}/summary")
    assert response.status_code == 200
    summary = response.json()["data"]
    assert summary["total_cost"] == 5250
    assert summary["items_total"] == 5250
    assert summary["item_count"] == 1
    assert summary["cost_records_total"] == 5250
    assert summary["cost_record_count"] == 2

    records = client.get(f"/v1/boqs/{boq_id}/cost-records").json()
    assert records["meta"]["total_count"] == 2


def test_empty_boq_summary(client, design_chain):
    summary = client.get(f"/v1/boqs/{design_chain['boq']['id']}/summary").json()["data"]
    assert summary["items_total"] == 0
    assert summary["cost_record_count"] == 0


def test_summary_for_missing_boq(client):
    assert client.get("/v1/boqs/missing/summary").status_code == 404


def test_boq_delete_blocked_by_items(client, create, design_chain):
    create("boq-items", _item(design_chain))
    response = client.delete(f"/v1/boqs/{design_chain['boq']['id']}")
    assert response.status_code == 409


def test_cost_records_date_range(client, create, design_chain):
    boq_id = design_chain["boq"]["id"]
    for day in ("2024-01-10", "2024-01-15", "2024-01-31"):
        create("cost-records", {"boq_id": boq_id, "amount": 100, "date": day, "category": "labor"})

    response = client.get("/v1/cost-records", params={"start_date": "2024-01-15"})
    assert sorted(r["date"] for r in response.json()["data"]) == ["2024-01-15", "2024-01-31"]

    response = client.get("/v1/cost-records", params={"end_date": "2024-01-15"})
    assert sorted(r["date"] for r in response.json()["data"]) == ["2024-01-10", "2024-01-15"]
