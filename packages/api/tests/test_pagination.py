"""Tests for cursor pagination helpers and list envelopes."""

from __future__ import annotations

import base64
import json

from swc_api.utils.pagination import build_links, decode_cursor, encode_cursor, next_cursor


def _raw_cursor(payload) -> str:
    return base64.urlsafe_b64encode(json.dumps(payload).encode()).decode()


def test_cursor_round_trip():
    assert decode_cursor(encode_cursor("abc"))["last_id"] == "abc"


def test_malformed_cursor_decodes_empty():
    assert decode_cursor("%%%not-base64") == {}
    assert decode_cursor(encode_cursor("x")[:-4] + "!!!!") == {}
    assert decode_cursor(_raw_cursor({"last_id": {"x": 1}})) == {}
    assert decode_cursor(_raw_cursor(["abc"])) == {}


def test_next_link_only_on_full_page():
    items = [{"id": "a"}, {"id": "b"}]
    assert "next" in build_links("/v1/sites", {"q": None}, items, page_size=2)
    assert "next" not in build_links("/v1/sites", {}, items, page_size=3)


def test_paging_through_collection(client, create):
    for i in range(5):
        create("techniques", {"code": f"TECH-{i:03d}", "name": f"Technique {i}"})

    seen: list[str] = []
    first = client.get("/v1/techniques", params={"page_size": 2}).json()
    assert first["meta"]["total_count"] == 5
    seen += [t["id"] for t in first["data"]]

    cursor = first["meta"]["cursor"]
    while cursor:
        page = client.get("/v1/techniques", params={"page_size": 2, "cursor": cursor}).json()
        seen += [t["id"] for t in page["data"]]
        cursor = page["meta"].get("cursor") if page["data"] else None

    assert len(seen) == 5
    assert len(set(seen)) == 5


def test_short_page_has_no_cursor():
    assert next_cursor([{"id": "a"}], page_size=2) is None
    assert next_cursor([], page_size=2) is None
    assert decode_cursor(next_cursor([{"id": "a"}, {"id": "b"}], page_size=2)) == {"last_id": "b"}


def test_cursor_with_non_string_id_restarts_listing(client, create):
    create("techniques", {"code": "TECH-001", "name": "Half Moon"})
    cursor = _raw_cursor({"last_id": {"x": 1}})

    response = client.get("/v1/techniques", params={"cursor": cursor})
    assert response.status_code == 200
    assert response.json()["meta"]["total_count"] == 1
    assert len(response.json()["data"]) == 1
