from decimal import Decimal

import pytest

from inventory import services

pytestmark = pytest.mark.django_db


def test_summary_for_owner_without_items(owner):
    assert services.summarize(owner.id) == {
        "totalItems": 0,
        "inStockCount": 0,
        "outOfStockCount": 0,
        "totalValueInStock": Decimal("0"),
        "byCategory": [],
    }


def test_value_in_stock_ignores_out_of_stock_items(owner, item_fields):
    services.create_item(owner.id, dict(item_fields, costPerUnit="10.00"))
    services.create_item(owner.id, dict(item_fields, costPerUnit="5.00", stockStatus="Out of stock"))

    summary = services.summarize(owner.id)

    assert summary["totalItems"] == 2
    assert summary["inStockCount"] == 1
    assert summary["outOfStockCount"] == 1
    assert summary["totalValueInStock"] == Decimal("10.00")


def test_by_category_is_ordered_by_count_then_name(owner, other_owner, item_fields):
    for category, cost, stock in [
        ("Office", "1.00", "In stock"),
        ("Audio", "2.00", "In stock"),
        ("Storage", "3.00", "Out of stock"),
        ("Storage", "4.00", "In stock"),
    ]:
        services.create_item(owner.id, dict(item_fields, category=category, costPerUnit=cost, stockStatus=stock))
    services.create_item(other_owner.id, dict(item_fields, category="Audio"))

    by_category = services.summarize(owner.id)["byCategory"]

    assert [row["category"] for row in by_category] == ["Storage", "Audio", "Office"]
    assert by_category[0] == {"category": "Storage", "count": 2, "totalValue": Decimal("7.00")}
    assert by_category[1]["count"] == 1
