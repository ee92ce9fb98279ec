"""Integration tests for the ND/NE endpoints."""
import pytest

HEADERS = {"X-User-Id": "tech-lead"}


@pytest.fixture
def contract_id(client):
    lic = client.post("/licenses", json={
        "license_number": "OUT-API-1", "act_type": "groundwater", "municipality": "Parnaíba",
        "start_date": "2023-01-01", "end_date": "2026-12-31",
    }).json()
    contract = client.post(f"/licenses/{lic['id']}/contracts", json={
        "number": "C-9", "signed_on": "2023-03-01", "purpose": "irrigation",
    }).json()
    return contract["id"]


def _body(**overrides):
    body = {
        "period": "wet",
        "technician_id": "tech-7",
        "measured_on": "2024-01-15",
        "static_level": "8",
        "dynamic_level": "10.5",
    }
    body.update(overrides)
    return body


def test_create_returns_201(client, contract_id):
    resp = client.post(f"/contracts/{contract_id}/ndne", json=_body(), headers=HEADERS)
    assert resp.status_code == 201
    body = resp.json()
    assert body["origin"] == "manual"
    assert body["original_origin"] is None
    assert body["created_by"] == "tech-lead"
    assert body["dynamic_level"] == 10.5
    assert body["edited"] is False


def test_create_requires_user_header(client, contract_id):
    resp = client.post(f"/contracts/{contract_id}/ndne", json=_body())
    assert resp.status_code == 422


def test_field_errors_are_keyed(client, contract_id):
    resp = client.post(
        f"/contracts/{contract_id}/ndne",
        json=_body(period="dry", static_level="10", dynamic_level="8", technician_id=""),
        headers=HEADERS,
    )
    assert resp.status_code == 422
    errors = resp.json()["errors"]
    assert set(errors) == {"technician_id", "measured_on", "dynamic_level"}
    assert errors["measured_on"] == "date does not correspond to the measurement period"


def test_duplicate_automated_returns_409(client, contract_id):
    url = f"/contracts/{contract_id}/ndne"
    first = client.post(url, json=_body(origin="automated"), headers=HEADERS)
    assert first.status_code == 201

    second = client.post(url, json=_body(origin="automated"), headers=HEADERS)
    assert second.status_code == 409
    assert "period" in second.json()["errors"]

    listed = client.get(url, params={"origin": "automated", "period": "wet"}).json()
    assert listed["total"] == 1


def test_patch_tracks_provenance(client, contract_id):
    created = client.post(
        f"/contracts/{contract_id}/ndne", json=_body(origin="automated"), headers=HEADERS,
    ).json()

    resp = client.patch(f"/ndne/{created['id']}", json={"dynamic_level": 11}, headers={"X-User-Id": "editor"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["origin"] == "manual"
    assert body["original_origin"] == "automated"
    assert body["edited_by"] == "editor"
    assert body["edited"] is True


def test_patch_invalid_returns_422(client, contract_id):
    created = client.post(f"/contracts/{contract_id}/ndne", json=_body(), headers=HEADERS).json()
    resp = client.patch(f"/ndne/{created['id']}", json={"measured_on": "2024-06-01"}, headers=HEADERS)
    assert resp.status_code == 422
    assert "measured_on" in resp.json()["errors"]


def test_get_missing_record_returns_404(client):
    assert client.get("/ndne/999").status_code == 404


def test_list_for_missing_contract_returns_404(client):
    assert client.get("/contracts/999/ndne").status_code == 404


def test_list_rejects_unknown_period_filter(client, contract_id):
    assert client.get(f"/contracts/{contract_id}/ndne", params={"period": "monsoon"}).status_code == 422


def test_automated_lookup(client, contract_id):
    url = f"/contracts/{contract_id}/ndne/automated"
    assert client.get(url, params={"period": "wet"}).json() is None
    created = client.post(
        f"/contracts/{contract_id}/ndne", json=_body(origin="automated"), headers=HEADERS,
    ).json()
    assert client.get(url, params={"period": "wet"}).json()["id"] == created["id"]


def test_validate_endpoint_does_not_write(client, contract_id):
    resp = client.post("/ndne/validate", json=_body(static_level="x"))
    assert resp.status_code == 200
    assert resp.json() == {"valid": False, "errors": {"static_level": "must be a positive number"}}
    assert client.get(f"/contracts/{contract_id}/ndne").json()["total"] == 0
