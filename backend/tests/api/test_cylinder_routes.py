"""Cylinder routes — full CRUD surface under /api/cylinder.

Invariants:
    - PUT rejects a body id differing from the URL id before any lookup
    - PUT/DELETE on an unknown id return 404
    - Successful PUT/DELETE return 204 with an empty body
    - Infinity and NaN dimensions return 400 and leave stored values unchanged
"""

import logging
from uuid import UUID, uuid4

import pytest

from geometry.api.routes.cylinder import get_cylinder_service
from geometry.core.errors import DimensionValidationError
from geometry.main import app


async def _create(client, radius=5.0, height=10.0) -> UUID:
    res = await client.post("/api/cylinder", json={"radius": radius, "height": height})
    assert res.status_code == 201
    return UUID(res.json())


async def test_create_then_get_cylinder(client):
    cylinder_id = await _create(client, 2.5, 4.0)
    res = await client.get(f"/api/cylinder/{cylinder_id}")
    assert res.status_code == 200
    assert res.json() == {"id": str(cylinder_id), "radius": 2.5, "height": 4.0}


async def test_create_sets_location_header(client):
    res = await client.post("/api/cylinder", json={"radius": 1.0, "height": 1.0})
    assert res.headers["location"].endswith(f"/api/cylinder/{res.json()}")


@pytest.mark.parametrize("payload,field", [
    ({"radius": 0, "height": 10}, "radius"),
    ({"radius": -1, "height": 10}, "radius"),
    ({"radius": 3, "height": 0}, "height"),
])
async def test_create_with_non_positive_dimension_returns_400(client, payload, field):
    res = await client.post("/api/cylinder", json=payload)
    assert res.status_code == 400
    assert res.json()["error"]["message"] == f"{field} must be greater than 0."


async def test_create_without_body_returns_400(client):
    res = await client.post("/api/cylinder")
    assert res.status_code == 400


async def test_get_unknown_cylinder_returns_404(client):
    missing = uuid4()
    res = await client.get(f"/api/cylinder/{missing}")
    assert res.status_code == 404
    assert str(missing) in res.json()["error"]["message"]


async def test_update_replaces_dimensions(client):
    cylinder_id = await _create(client)
    res = await client.put(
        f"/api/cylinder/{cylinder_id}",
        json={"id": str(cylinder_id), "radius": 7.0, "height": 3.0},
    )
    assert res.status_code == 204
    assert res.content == b""

    res = await client.get(f"/api/cylinder/{cylinder_id}")
    assert res.json() == {"id": str(cylinder_id), "radius": 7.0, "height": 3.0}


async def test_update_with_mismatched_id_returns_400(client):
    cylinder_id = await _create(client)
    res = await client.put(
        f"/api/cylinder/{cylinder_id}",
        json={"id": str(uuid4()), "radius": 7.0, "height": 3.0},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == (
        "The Id in the URL does not match the Id in the request body."
    )


async def test_update_without_body_returns_400(client):
    res = await client.put(f"/api/cylinder/{uuid4()}")
    assert res.status_code == 400


async def test_update_with_non_positive_height_returns_400(client):
    cylinder_id = await _create(client)
    res = await client.put(
        f"/api/cylinder/{cylinder_id}",
        json={"id": str(cylinder_id), "radius": 1.0, "height": -2.0},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "height must be greater than 0."


async def test_update_unknown_cylinder_returns_404(client):
    missing = uuid4()
    res = await client.put(
        f"/api/cylinder/{missing}",
        json={"id": str(missing), "radius": 1.0, "height": 1.0},
    )
    assert res.status_code == 404


async def test_delete_removes_cylinder(client):
    cylinder_id = await _create(client)
    res = await client.delete(f"/api/cylinder/{cylinder_id}")
    assert res.status_code == 204

    res = await client.get(f"/api/cylinder/{cylinder_id}")
    assert res.status_code == 404


async def test_delete_unknown_cylinder_returns_404(client):
    res = await client.delete(f"/api/cylinder/{uuid4()}")
    assert res.status_code == 404


class _ValidationFailingService:
    async def insert(self, cylinder):
        raise DimensionValidationError("radius")


class _BrokenService:
    async def read_by_id(self, cylinder_id):
        raise RuntimeError("connection reset")


async def test_deeper_validation_error_returns_400(client):
    app.dependency_overrides[get_cylinder_service] = _ValidationFailingService
    res = await client.post("/api/cylinder", json={"radius": 1.0, "height": 1.0})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize("method,message", [
    ("get", "An error occurred while retrieving the cylinder."),
    ("delete", "An error occurred while deleting the cylinder."),
])
async def test_unexpected_error_returns_generic_500(client, method, message):
    app.dependency_overrides[get_cylinder_service] = _BrokenService
    res = await getattr(client, method)(f"/api/cylinder/{uuid4()}")
    assert res.status_code == 500
    assert res.json()["error"]["message"] == message
    assert "connection reset" not in res.text


async def test_unexpected_error_on_update_returns_generic_500(client):
    app.dependency_overrides[get_cylinder_service] = _BrokenService
    cylinder_id = uuid4()
    res = await client.put(
        f"/api/cylinder/{cylinder_id}",
        json={"id": str(cylinder_id), "radius": 1.0, "height": 1.0},
    )
    assert res.status_code == 500
    assert res.json()["error"]["message"] == "An error occurred while updating the cylinder."


@pytest.mark.parametrize("raw", [
    '{"radius": Infinity, "height": 1}',
    '{"radius": 2, "height": NaN}',
    '{"radius": -Infinity, "height": 1}',
])
async def test_create_with_non_finite_dimension_returns_400(client, raw):
    res = await client.post(
        "/api/cylinder", content=raw, headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_with_non_finite_dimension_returns_400(client):
    cylinder_id = await _create(client, 2.0, 3.0)
    raw = f'{{"id": "{cylinder_id}", "radius": 1, "height": Infinity}}'
    res = await client.put(
        f"/api/cylinder/{cylinder_id}",
        content=raw, headers={"content-type": "application/json"},
    )
    assert res.status_code == 400

    res = await client.get(f"/api/cylinder/{cylinder_id}")
    assert res.json() == {"id": str(cylinder_id), "radius": 2.0, "height": 3.0}


async def test_rejected_update_dimension_logs_url_id(client, caplog):
    cylinder_id = await _create(client)
    with caplog.at_level(logging.WARNING, logger="geometry.api.routes.cylinder"):
        res = await client.put(
            f"/api/cylinder/{cylinder_id}",
            json={"id": str(cylinder_id), "radius": 0.0, "height": 3.0},
        )
    assert res.status_code == 400
    rejected = [r for r in caplog.records if getattr(r, "outcome", None) == "rejected"]
    assert len(rejected) == 1
    assert rejected[0].entity_id == str(cylinder_id)
    assert rejected[0].operation == "update_cylinder"
