from unittest import mock

import pytest
from django.db import OperationalError
from rest_framework.test import APIClient

from inventory import services
from logs.models import ActivityLog

pytestmark = pytest.mark.django_db


def test_requires_authentication(db):
    response = APIClient().get("/api/items/")
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_create_and_list(api_client, item_fields):
    item_fields["warehouseCode"] = "wh-1"
    response = api_client.post("/api/items/", item_fields, format="json")

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["displayId"] == "INV-001"
    assert body["data"]["warehouseCode"] == "WH-1"
    assert body["data"]["costPerUnit"] == 10.0
    assert body["data"]["stockStatus"] == "In stock"

    listing = api_client.get("/api/items/").json()
    assert listing["count"] == 1
    assert listing["data"][0]["id"] == body["data"]["id"]


def test_create_validation_error_shape(api_client, item_fields):
    item_fields["productName"] = ""
    response = api_client.post("/api/items/", item_fields, format="json")

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"] == {"productName": "Product name is required"}


@pytest.mark.parametrize("cost", ["1e26", "1e30", 1e30])
def test_oversized_cost_is_a_validation_error(api_client, owner, item_fields, cost):
    response = api_client.post("/api/items/", dict(item_fields, costPerUnit=cost), format="json")
    assert response.status_code == 400
    assert response.json()["errors"] == {"costPerUnit": "Cost cannot exceed $1,000,000"}

    item = services.create_item(owner.id, item_fields)
    response = api_client.patch(f"/api/items/{item.id}/", {"costPerUnit": cost}, format="json")
    assert response.status_code == 400

    dry_run = api_client.post("/api/items/validate/", dict(item_fields, costPerUnit=cost), format="json")
    assert dry_run.status_code == 200
    assert set(dry_run.json()["errors"]) == {"costPerUnit"}


def test_create_when_store_is_down(api_client, item_fields):
    with mock.patch("inventory.services.get_next_number", side_effect=OperationalError("down")):
        response = api_client.post("/api/items/", item_fields, format="json")

    assert response.status_code == 503
    assert response.json()["success"] is False


def test_retrieve_other_owners_item_is_not_found(api_client, other_owner, item_fields):
    item = services.create_item(other_owner.id, item_fields)
    response = api_client.get(f"/api/items/{item.id}/")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Item not found"}


def test_retrieve_own_item(api_client, owner, item_fields):
    item = services.create_item(owner.id, item_fields)
    response = api_client.get(f"/api/items/{item.id}/")
    assert response.status_code == 200
    assert response.json()["data"]["ownerId"] == str(owner.id)


def test_update(api_client, owner, item_fields):
    item = services.create_item(owner.id, item_fields)
    response = api_client.put(f"/api/items/{item.id}/", {"costPerUnit": "12.5", "displayId": "INV-042"}, format="json")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["costPerUnit"] == 12.5
    assert data["displayId"] == "INV-001"


def test_update_other_owners_item_is_forbidden(api_client, other_owner, item_fields):
    item = services.create_item(other_owner.id, item_fields)
    response = api_client.patch(f"/api/items/{item.id}/", {"supplier": "Globex"}, format="json")
    assert response.status_code == 403


def test_delete(api_client, owner, item_fields):
    item = services.create_item(owner.id, item_fields)
    response = api_client.delete(f"/api/items/{item.id}/")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Item deleted successfully!"}
    assert api_client.get(f"/api/items/{item.id}/").status_code == 404


def test_search(api_client, owner, item_fields):
    services.create_item(owner.id, item_fields)

    assert api_client.get("/api/items/search/", {"q": "wireless"}).json()["count"] == 1
    response = api_client.get("/api/items/search/", {"q": " "})
    assert response.status_code == 400
    assert response.json()["message"] == "Search query is required"


def test_stats_summary(api_client, owner, item_fields):
    services.create_item(owner.id, dict(item_fields, costPerUnit="10.00"))
    services.create_item(owner.id, dict(item_fields, costPerUnit="5.00", stockStatus="Out of stock"))

    data = api_client.get("/api/items/stats/summary/").json()["data"]

    assert data["totalItems"] == 2
    assert data["totalValueInStock"] == 10.0
    assert data["byCategory"] == [{"category": "Electronics", "count": 2, "totalValue": 15.0}]


def test_rules_and_dry_run_validation(api_client, owner, item_fields):
    rules = api_client.get("/api/items/rules/").json()
    assert rules["warehouseCode"]["maxLength"] == 20

    ok = api_client.post("/api/items/validate/", item_fields, format="json").json()
    assert ok == {"success": True, "errors": {}}

    bad = api_client.post("/api/items/validate/", dict(item_fields, costPerUnit=0), format="json").json()
    assert set(bad["errors"]) == {"costPerUnit"}

    partial = api_client.post("/api/items/validate/?partial=true", {"supplier": "Globex"}, format="json").json()
    assert partial["success"] is True

    assert not services.list_items(owner.id)


def test_mutations_are_recorded_in_activity_log(api_client, owner, item_fields):
    item_id = api_client.post("/api/items/", item_fields, format="json").json()["data"]["id"]
    api_client.patch(f"/api/items/{item_id}/", {"supplier": "Globex"}, format="json")
    api_client.delete(f"/api/items/{item_id}/")

    notes = list(ActivityLog.objects.filter(user=owner).order_by("id").values_list("note", flat=True))
    assert notes == [
        "Item created: INV-001 Wireless Mouse",
        "Item updated: INV-001 Wireless Mouse",
        "Item deleted: INV-001",
    ]

    logs = api_client.get("/api/logs/").json()
    assert [entry["note"] for entry in logs] == list(reversed(notes))


def test_health_is_public(db):
    response = APIClient().get("/api/health/")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"
