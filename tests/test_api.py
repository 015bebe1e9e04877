"""
HTTP host tests through FastAPI's TestClient.
"""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from studio_erp.application.repositories.studio import StudioRepository
from studio_erp.application.use_cases.view_sync import ViewSynchronizer
from studio_erp.infrastructure.rendering.memory_document import MemoryDocument
from studio_erp.infrastructure.store.memory_store import MemoryKeyValueStore
from studio_erp.main import app
from studio_erp.wiring.dependencies import get_view_synchronizer


@pytest.fixture()
def store():
    return MemoryKeyValueStore()


@pytest.fixture()
def client(store):
    sync = ViewSynchronizer(
        repository=StudioRepository(store),
        renderer=MemoryDocument(),
        today=lambda: date(2023, 8, 12),
    )
    app.dependency_overrides[get_view_synchronizer] = lambda: sync
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_dashboard_page(client):
    response = client.get("/pages/dashboard")

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Dashboard"
    values = {row["key"]: row["fields"]["value"] for row in body["containers"]["statCards"]}
    assert values["lowStock"] == 2


def test_unknown_page(client):
    body = client.get("/pages/agenda").json()

    assert body["page"] == "unknown"
    assert body["placeholder"] == "Conteúdo em desenvolvimento"


def test_create_service(client):
    response = client.post("/services", json={"name": "Manicure", "price": "40"})

    assert response.status_code == 200
    body = response.json()
    assert body["page"] == "services"
    assert [row["title"] for row in body["containers"]["servicesGrid"]][-1] == "Manicure"
    assert body["notices"][0]["level"] == "success"


def test_create_service_validation_error(client):
    response = client.post("/services", json={"name": "", "price": "abc"})

    assert response.status_code == 422
    body = response.json()
    assert "price" in body["errors"]
    assert body["values"]["name"] == ""


def test_update_and_delete_client(client):
    response = client.put("/clients/1", json={"name": "Ana S.", "allergies": "Amônia, Parabenos"})
    assert response.status_code == 200
    titles = [row["title"] for row in response.json()["containers"]["clientsTableBody"]]
    assert titles == ["Ana S.", "Carlos Oliveira"]

    response = client.delete("/clients/1")
    assert [row["title"] for row in response.json()["containers"]["clientsTableBody"]] == ["Carlos Oliveira"]


def test_inventory_quantity(client):
    response = client.put("/inventory/1/quantity", json={"quantity": "10"})

    assert response.status_code == 200
    rows = response.json()["containers"]["inventoryTableBody"]
    assert rows[0]["fields"]["quantity"] == 10


def test_filter(client):
    client.get("/pages/clients")

    response = client.post("/pages/clients/filter", json={"container_id": "clientsTableBody", "term": "carl"})

    visible = {row["title"]: row["visible"] for row in response.json()["containers"]["clientsTableBody"]}
    assert visible == {"Ana Silva": False, "Carlos Oliveira": True}


def test_forms(client):
    assert client.get("/forms/service", params={"entity_id": 2}).json()["values"]["name"] == "Coloração"
    assert client.get("/forms/service", params={"entity_id": 999}).status_code == 404
    assert client.get("/forms/appointment").status_code == 400


def test_settings(client):
    response = client.put("/settings", json={"dark_mode": True})

    assert response.status_code == 200
    assert response.json()["dark_mode"] is True


def test_export_csv(client):
    response = client.get("/reports/services.csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.text.startswith("Serviço,Quantidade")


def test_corrupted_store_returns_500(client, store):
    store.set("services", {"not": "a list"})

    response = client.get("/pages/services")

    assert response.status_code == 500
    assert response.json()["key"] == "services"
