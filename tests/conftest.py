import pytest
from rest_framework.test import APIClient

from users.models import CustomUser


@pytest.fixture(autouse=True)
def fast_retries(settings):
    settings.STORE_RETRY_BACKOFF = 0


@pytest.fixture
def owner(db):
    return CustomUser.objects.create_user(username="alice", email="alice@example.com", password="secret123")


@pytest.fixture
def other_owner(db):
    return CustomUser.objects.create_user(username="bob", email="bob@example.com", password="secret123")


@pytest.fixture
def item_fields():
    return {
        "productName": "Wireless Mouse",
        "category": "Electronics",
        "supplier": "Acme",
        "costPerUnit": 10,
        "warehouseCode": "WH-1",
    }


@pytest.fixture
def api_client(owner):
    client = APIClient()
    client.force_authenticate(user=owner)
    return client
