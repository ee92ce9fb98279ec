"""Integration tests for the water analysis endpoints."""
import pytest

HEADERS = {"X-User-Id": "lab-tech"}


@pytest.fixture
def contract_id(client):
    lic = client.post("/licenses", json={
        "license_number": "OUT-WQ-1", "act_type": "groundwater", "municipality": "Picos",
        "start_date": "2023-01-01", "end_date": "2026-12-31",
    }).json()
    contract = client.post(f"/licenses/{lic['id']}/contracts", json={
        "number": "C-WQ", "signed_on": "2023-03-01", "purpose": "supply",
    }).json()
    return contract["id"]


def _body(**overrides):
    body = {
        "collected_on": "2024-04-02",
        "collected_at": "08:15:00",
        "collection_type": "simple",
        "laboratory": "Lab Norte",
        "parameters": {"ph": 6.8, "total_coliforms": 0},
    }
    body.update(overrides)
    return body


def test_parameter_catalogue(client):
    resp = client.get("/analysis-parameters")
    assert resp.status_code == 200
    groups = {g["group"]: g["parameters"] for g in resp.json()}
    assert "bacteriological" in groups
    assert {p["key"] for p in groups["btex"]} == {"benzene", "toluene", "ethylbenzene", "xylene"}


def test_create_and_fetch(client, contract_id):
    resp = client.post(f"/contracts/{contract_id}/analyses", json=_body(), headers=HEADERS)
    assert resp.status_code == 201
    created = resp.json()
    assert created["created_by"] == "lab-tech"
    assert created["parameters"] == {"ph": 6.8, "total_coliforms": 0.0}

    fetched = client.get(f"/analyses/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["collection_type"] == "simple"

    listed = client.get(f"/contracts/{contract_id}/analyses").json()
    assert listed["total"] == 1


def test_create_requires_actor(client, contract_id):
    assert client.post(f"/contracts/{contract_id}/analyses", json=_body()).status_code == 422


def test_missing_collection_date_is_a_request_error(client, contract_id):
    body = _body()
    del body["collected_on"]
    assert client.post(f"/contracts/{contract_id}/analyses", json=body, headers=HEADERS).status_code == 422


def test_bad_results_return_field_errors(client, contract_id):
    resp = client.post(
        f"/contracts/{contract_id}/analyses",
        json=_body(parameters={"ph": 15, "arsenic": 0.01}),
        headers=HEADERS,
    )
    assert resp.status_code == 422
    assert resp.json()["errors"] == {
        "parameters.ph": "must be between 0 and 14",
        "parameters.arsenic": "unknown parameter",
    }


def test_patch_analysis(client, contract_id):
    created = client.post(f"/contracts/{contract_id}/analyses", json=_body(), headers=HEADERS).json()
    resp = client.patch(
        f"/analyses/{created['id']}",
        json={"sample_code": "S-9", "parameters": {"ph": 7.0}},
        headers={"X-User-Id": "reviewer"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["sample_code"] == "S-9"
    assert body["parameters"] == {"ph": 7.0}
    assert body["updated_by"] == "reviewer"


def test_unknown_contract_and_analysis(client):
    assert client.get("/contracts/9999/analyses").status_code == 404
    assert client.get("/analyses/9999").status_code == 404
    assert client.post("/contracts/9999/analyses", json=_body(), headers=HEADERS).status_code == 404
