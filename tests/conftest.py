"""Shared test fixtures."""

from __future__ import annotations

import pytest

from receipt_points.models import Item, Receipt

TARGET_RECEIPT_JSON = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT_JSON = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
    "total": "9.00",
}


@pytest.fixture
def target_receipt_json() -> dict[str, object]:
    """Provide the Target example receipt as decoded JSON (28 points)."""
    return TARGET_RECEIPT_JSON


@pytest.fixture
def target_receipt() -> Receipt:
    """Provide the Target example receipt (28 points)."""
    return Receipt.model_validate(TARGET_RECEIPT_JSON)


@pytest.fixture
def corner_market_receipt() -> Receipt:
    """Provide the M&M Corner Market example receipt (109 points)."""
    return Receipt.model_validate(CORNER_MARKET_RECEIPT_JSON)


@pytest.fixture
def neutral_receipt() -> Receipt:
    """Provide a receipt that earns nothing under any rule.

    Retailer has no alphanumerics, the total is neither round nor a
    quarter multiple, there are no items, and the day is even.
    """
    return Receipt(
        retailer="&&",
        purchase_date="2022-01-02",
        purchase_time="10:00",
        items=(),
        total="1.01",
    )


@pytest.fixture
def gatorade() -> Item:
    """Provide a single item whose description length is not a multiple of 3."""
    return Item(short_description="Gatorade", price="2.25")
