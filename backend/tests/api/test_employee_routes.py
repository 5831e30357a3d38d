"""Employee Routes — HTTP status mapping and wire format over ASGI.

Tests cover:
    - The full create / conflict / read / invalid update / delete / 404 scenario
    - camelCase JSON shape with no timestamps
    - 400 for missing or malformed fields, with field-level details
    - 404 for unknown ids on GET, PUT and DELETE
    - ids beyond the store's integer range are 404, not a driver fault
    - concurrent creates with one email: exactly one 201, the rest 409
    - 500 for store faults and unexpected exceptions, without leaking detail
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from ems.api.routes.employees import get_employee_repository
from ems.core.errors import StoreUnavailableError

JANE = {"firstName": "Jane", "lastName": "Doe", "email": "jane@x.com"}
OUT_OF_RANGE_ID = 99999999999999999999


async def test_scenario_create_conflict_read_invalid_update_delete(client):
    res = await client.post("/employees", json=JANE)
    assert res.status_code == 201
    assert res.json() == {"id": 1, **JANE}

    res = await client.post("/employees", json=JANE)
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "EMAIL_CONFLICT"

    res = await client.get("/employees/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, **JANE}

    res = await client.put("/employees/1", json={"firstName": "J"})
    assert res.status_code == 400

    res = await client.delete("/employees/1")
    assert res.status_code == 200
    assert res.json() == {"message": "Employee deleted successfully!"}

    res = await client.get("/employees/1")
    assert res.status_code == 404


async def test_list_is_id_ascending(client):
    for email in ("c@x.com", "a@x.com", "b@x.com"):
        await client.post("/employees", json={**JANE, "email": email})
    await client.put("/employees/1", json={**JANE, "email": "c@x.com", "firstName": "Zoe"})

    res = await client.get("/employees")
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [1, 2, 3]


async def test_list_empty(client):
    res = await client.get("/employees")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_echoes_submitted_values(client):
    body = {"firstName": "  Ann ", "lastName": "Lee", "email": "ann@x.com"}
    res = await client.post("/employees", json=body)
    assert res.status_code == 201
    assert res.json()["firstName"] == "  Ann "


async def test_create_missing_field_is_400(client):
    res = await client.post("/employees", json={"firstName": "Jane", "lastName": "Doe"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"] == "body.email" for d in error["details"])


async def test_create_short_name_reports_message(client):
    res = await client.post("/employees", json={**JANE, "lastName": "D"})
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert details[0]["field"] == "body.lastName"
    assert details[0]["message"] == "Last name must be at least 2 characters"


async def test_create_bad_email_is_400(client):
    res = await client.post("/employees", json={**JANE, "email": "not-an-email"})
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["message"] == "Please enter a valid email address"


async def test_update_replaces_fields(client):
    await client.post("/employees", json=JANE)
    changed = {"firstName": "Janet", "lastName": "Dough", "email": "janet@x.com"}
    res = await client.put("/employees/1", json=changed)
    assert res.status_code == 200
    assert res.json() == {"id": 1, **changed}


async def test_update_unknown_id_is_404_and_creates_nothing(client):
    res = await client.put("/employees/9", json=JANE)
    assert res.status_code == 404
    assert (await client.get("/employees")).json() == []


async def test_update_email_collision_is_409(client):
    await client.post("/employees", json=JANE)
    await client.post("/employees", json={**JANE, "email": "other@x.com"})
    res = await client.put("/employees/2", json=JANE)
    assert res.status_code == 409


async def test_delete_unknown_id_is_404(client):
    res = await client.delete("/employees/3")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
async def test_out_of_range_id_is_404(client, method):
    body = JANE if method == "PUT" else None
    res = await client.request(method, f"/employees/{OUT_OF_RANGE_ID}", json=body)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_concurrent_duplicate_creates_one_wins(client):
    responses = await asyncio.gather(
        *(client.post("/employees", json=JANE) for _ in range(5)),
    )
    codes = sorted(r.status_code for r in responses)
    assert codes == [201, 409, 409, 409, 409]
    assert len((await client.get("/employees")).json()) == 1


async def test_non_integer_id_is_400(client):
    res = await client.get("/employees/abc")
    assert res.status_code == 400


class _BrokenRepository:
    def __init__(self, exc: Exception):
        self._exc = exc

    async def list_all(self):
        raise self._exc


async def test_store_fault_is_500_without_detail(app):
    app.dependency_overrides[get_employee_repository] = (
        lambda: _BrokenRepository(StoreUnavailableError("query"))
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/employees")
    app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DATABASE_ERROR"
    assert res.json()["error"]["message"] == "Database query failed"


async def test_unexpected_exception_is_generic_500(app):
    app.dependency_overrides[get_employee_repository] = (
        lambda: _BrokenRepository(RuntimeError("password=secret"))
    )
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/employees")
    app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text
