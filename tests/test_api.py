"""End-to-end tests through the FastAPI app (HTTP -> services -> SQLite)."""

from __future__ import annotations

import pytest

API = "/api/v1"

ACME = {
    "name": "Acme",
    "category": "Retail",
    "address": "1 Main St",
    "city": "Springfield",
    "province": "IL",
    "country": "US",
    "postalCode": "62701",
    "email": "ops@acme.test",
    "phone": "5550100",
    "divisionNames": ["Finance"],
}


def _as(user_id: str) -> dict[str, str]:
    return {"X-User-Id": user_id}


async def _create_company(client, **overrides) -> dict:
    resp = await client.post(f"{API}/companies", json={**ACME, **overrides})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


async def test_create_and_get_company(client):
    created = await _create_company(client)

    resp = await client.get(f"{API}/companies/{created['companyId']}")
    assert resp.status_code == 200
    company = resp.json()["data"]
    assert company["name"] == "Acme"
    assert company["postalCode"] == "62701"
    assert company["divisionNames"] == ["Finance"]
    assert company["createdAt"] == company["updatedAt"]

    resp = await client.get(f"{API}/users/{created['executiveId']}")
    assert resp.json()["data"]["role"] == "management"
    assert resp.json()["data"]["relatedId"] == created["companyId"]


async def test_create_company_bad_payload(client):
    resp = await client.post(f"{API}/companies", json={**ACME, "name": ""})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "BAD_PAYLOAD"


async def test_malformed_body_is_bad_payload(client):
    resp = await client.post(f"{API}/companies", json={**ACME, "divisionNames": "Finance"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "BAD_PAYLOAD"


async def test_update_company(client, clock):
    created = await _create_company(client)
    clock.advance(days=1)

    resp = await client.put(
        f"{API}/companies/{created['companyId']}", json={**ACME, "city": "Shelbyville"}
    )
    assert resp.status_code == 200
    company = resp.json()["data"]
    assert company["city"] == "Shelbyville"
    assert company["updatedAt"] > company["createdAt"]


async def test_unknown_company_is_not_found(client):
    resp = await client.get(f"{API}/companies/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"

    resp = await client.put(f"{API}/companies/does-not-exist", json=ACME)
    assert resp.status_code == 404


async def test_listing_without_caller_header_is_bad_payload(client):
    resp = await client.get(f"{API}/requests")
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "BAD_PAYLOAD"


async def test_division_workflow_end_to_end(client):
    company = await _create_company(client)
    executive = company["executiveId"]

    resp = await client.post(
        f"{API}/requests/division",
        json={"companyId": company["companyId"], "divisionName": "Finance"},
    )
    assert resp.status_code == 201
    submitted = resp.json()["data"]

    resp = await client.get(f"{API}/requests/waiting", headers=_as(executive))
    waiting = resp.json()["data"]
    assert [r["id"] for r in waiting] == [submitted["requestId"]]
    assert waiting[0]["status"] == "waiting"
    assert waiting[0]["kind"] == "division"

    resp = await client.post(
        f"{API}/requests/{submitted['requestId']}/accept", headers=_as(executive)
    )
    assert resp.status_code == 200
    accepted = resp.json()["data"]
    assert accepted["request"]["status"] == "accepted"
    assert accepted["userId"] == submitted["userId"]
    assert accepted["role"] == "division_manager"

    resp = await client.get(f"{API}/requests/waiting", headers=_as(executive))
    assert resp.json()["data"] == []

    resp = await client.get(f"{API}/users/{submitted['userId']}")
    assert resp.json()["data"]["relatedId"] == accepted["relatedId"]

    resp = await client.post(
        f"{API}/statements/financial",
        json={"url": "https://files.example.test/q1.pdf"},
        headers=_as(submitted["userId"]),
    )
    assert resp.status_code == 201
    statement = resp.json()["data"]
    assert statement["companyId"] == company["companyId"]
    assert statement["uploadedBy"] == accepted["relatedId"]

    resp = await client.get(f"{API}/statements/financial", headers=_as(executive))
    assert [s["id"] for s in resp.json()["data"]] == [statement["id"]]


async def test_auditor_workflow_end_to_end(client):
    company = await _create_company(client)
    executive = company["executiveId"]

    resp = await client.post(f"{API}/requests/auditor", json={"companyId": company["companyId"]})
    submitted = resp.json()["data"]

    resp = await client.post(
        f"{API}/requests/{submitted['requestId']}/accept", headers=_as(executive)
    )
    assert resp.json()["data"]["role"] == "auditor"

    resp = await client.post(
        f"{API}/statements/audit",
        json={"url": "https://files.example.test/audit.pdf"},
        headers=_as(submitted["userId"]),
    )
    assert resp.status_code == 201

    # An auditor is not a division manager
    resp = await client.post(
        f"{API}/statements/financial",
        json={"url": "https://files.example.test/audit.pdf"},
        headers=_as(submitted["userId"]),
    )
    assert resp.status_code == 403
    assert resp.json()["error"]["code"] == "FORBIDDEN"


async def test_second_accept_conflicts(client):
    company = await _create_company(client)
    executive = company["executiveId"]
    resp = await client.post(
        f"{API}/requests/division",
        json={"companyId": company["companyId"], "divisionName": "Finance"},
    )
    request_id = resp.json()["data"]["requestId"]

    first = await client.post(f"{API}/requests/{request_id}/accept", headers=_as(executive))
    second = await client.post(f"{API}/requests/{request_id}/accept", headers=_as(executive))

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "CONFLICT"


@pytest.mark.parametrize("action", ["accept", "reject"])
async def test_other_company_executive_is_forbidden(client, action):
    acme = await _create_company(client)
    globex = await _create_company(client, name="Globex")
    resp = await client.post(f"{API}/requests/auditor", json={"companyId": acme["companyId"]})
    request_id = resp.json()["data"]["requestId"]

    resp = await client.post(
        f"{API}/requests/{request_id}/{action}", headers=_as(globex["executiveId"])
    )
    assert resp.status_code == 403

    resp = await client.get(f"{API}/requests/{request_id}", headers=_as(acme["executiveId"]))
    assert resp.json()["data"]["status"] == "waiting"


async def test_reject_request(client):
    company = await _create_company(client)
    resp = await client.post(f"{API}/requests/auditor", json={"companyId": company["companyId"]})
    submitted = resp.json()["data"]

    resp = await client.post(
        f"{API}/requests/{submitted['requestId']}/reject", headers=_as(company["executiveId"])
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "rejected"

    resp = await client.get(f"{API}/requests", headers=_as(company["executiveId"]))
    assert [r["status"] for r in resp.json()["data"]] == ["rejected"]

    resp = await client.get(f"{API}/users/{submitted['userId']}")
    assert resp.json()["data"]["relatedId"] == ""


async def test_request_for_unknown_company(client):
    resp = await client.post(
        f"{API}/requests/division", json={"companyId": "missing", "divisionName": "Finance"}
    )
    assert resp.status_code == 404
