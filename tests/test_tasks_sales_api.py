"""Integration tests for the task and sale API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


def _create_client(api: TestClient, **fields) -> dict:
    payload = {"first_name": "Jane", "last_name": "Doe", **fields}
    response = api.post("/clients/", json=payload)
    assert response.status_code == 201
    return response.json()


def test_task_crud_flow(api: TestClient) -> None:
    client = _create_client(api)

    response = api.post(
        "/tasks/",
        json={
            "title": "Measure living room",
            "type": "measurement",
            "priority": "high",
            "dueDate": "2030-03-01T09:00:00Z",
            "clientId": client["id"],
        },
    )
    assert response.status_code == 201
    task = response.json()
    assert task["status"] == "not_started"
    assert task["client_id"] == client["id"]
    assert task["due_date"].startswith("2030-03-01T09:00:00")

    listing = api.get("/tasks/", params={"client_id": client["id"]}).json()
    assert [item["id"] for item in listing] == [task["id"]]

    assert api.delete(f"/tasks/{task['id']}").status_code == 204
    assert api.get(f"/tasks/{task['id']}").status_code == 404


def test_completing_a_task_stamps_completion_time(api: TestClient) -> None:
    task = api.post("/tasks/", json={"title": "Send quote"}).json()
    assert task["completed_at"] is None

    response = api.put(f"/tasks/{task['id']}", json={"status": "completed"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "completed"
    assert body["completed_at"] is not None
    assert body["title"] == "Send quote"


def test_task_rejects_unknown_links_and_blank_titles(api: TestClient) -> None:
    unknown_client = api.post("/tasks/", json={"title": "Call", "client_id": "missing"})
    assert unknown_client.status_code == 400
    assert unknown_client.json()["detail"] == "Linked client does not exist"

    unknown_sale = api.post("/tasks/", json={"title": "Call", "sale_id": "missing"})
    assert unknown_sale.status_code == 400

    assert api.post("/tasks/", json={"title": ""}).status_code == 422


def test_sale_crud_flow_reports_client_name(api: TestClient) -> None:
    client = _create_client(api)

    response = api.post(
        "/sales/",
        json={"clientId": client["id"], "amount": 2500, "status": "quote_sent"},
    )
    assert response.status_code == 201
    sale = response.json()
    assert sale["client_name"] == "Jane Doe"
    assert sale["amount"] == pytest.approx(2500)

    update = api.put(f"/sales/{sale['id']}", json={"status": "closed_won"})
    assert update.status_code == 200
    assert update.json()["status"] == "closed_won"
    assert update.json()["amount"] == pytest.approx(2500)

    assert api.delete(f"/sales/{sale['id']}").status_code == 204
    assert api.get(f"/sales/{sale['id']}").status_code == 404


def test_sale_validation_errors(api: TestClient) -> None:
    assert api.post("/sales/", json={"amount": 10, "status": "maybe"}).status_code == 400
    assert api.post("/sales/", json={"amount": -1}).status_code == 422
    assert api.post("/sales/", json={"client_id": "missing"}).status_code == 400


def test_sales_total_counts_won_sales_only(api: TestClient) -> None:
    api.post("/sales/", json={"amount": 1000, "status": "closed_won"})
    api.post("/sales/", json={"amount": 250.5, "status": "completed"})
    api.post("/sales/", json={"amount": 9999, "status": "lead"})

    response = api.get("/sales/total")

    assert response.status_code == 200
    body = response.json()
    assert body["period"] == "month"
    assert body["total"] == pytest.approx(1250.5)

    yearly = api.get("/sales/total", params={"period": "year"}).json()
    assert yearly["total"] == pytest.approx(1250.5)


def test_sales_total_rejects_unknown_period(api: TestClient) -> None:
    response = api.get("/sales/total", params={"period": "decade"})

    assert response.status_code == 400
    assert "Unsupported sales period" in response.json()["detail"]


def test_deleting_a_client_unlinks_its_sales_and_tasks(api: TestClient) -> None:
    client = _create_client(api)
    sale = api.post("/sales/", json={"client_id": client["id"], "amount": 10}).json()
    task = api.post("/tasks/", json={"title": "Call", "client_id": client["id"]}).json()

    assert api.delete(f"/clients/{client['id']}").status_code == 204

    orphan_sale = api.get(f"/sales/{sale['id']}").json()
    assert orphan_sale["client_id"] is None
    assert orphan_sale["client_name"] is None
    assert api.get(f"/tasks/{task['id']}").json()["client_id"] is None


@pytest.mark.parametrize(
    "field,value",
    [("priority", "whenever"), ("type", "lunch"), ("status", "blocked")],
)
def test_task_vocabularies_are_enforced(api: TestClient, field: str, value: str) -> None:
    created = api.post("/tasks/", json={"title": "x", field: value})
    assert created.status_code == 400
    assert created.json()["detail"] == f"Unsupported task {field} '{value}'"

    task = api.post("/tasks/", json={"title": "x"}).json()
    updated = api.put(f"/tasks/{task['id']}", json={field: value})
    assert updated.status_code == 400


def test_explicit_null_cannot_clear_required_fields(api: TestClient) -> None:
    task = api.post("/tasks/", json={"title": "x", "status": "in_progress"}).json()
    sale = api.post("/sales/", json={"amount": 10, "status": "negotiation"}).json()

    for field in ("title", "type", "status", "priority"):
        assert api.put(f"/tasks/{task['id']}", json={field: None}).status_code == 422
    assert api.put(f"/sales/{sale['id']}", json={"status": None}).status_code == 422

    assert api.get(f"/tasks/{task['id']}").json()["status"] == "in_progress"
    assert api.get(f"/sales/{sale['id']}").json()["status"] == "negotiation"
