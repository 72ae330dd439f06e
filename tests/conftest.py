"""Shared fixtures for the storefront tests."""

import pytest

from storefront.core.config import settings


class FakeWooClient:
    """Stands in for WooCommerceClient; records every GET."""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def get(self, endpoint, params=None):
        self.calls.append((endpoint, params))
        if self.error is not None:
            raise self.error
        return self.responses.get(endpoint)


def make_products(count, start_id=1):
    return [
        {
            "id": start_id + i,
            "name": f"Product {start_id + i}",
            "price": "19.99",
            "regular_price": "24.99",
            "sale_price": "19.99",
            "stock_status": "instock",
            "stock_quantity": 5,
            "permalink": f"https://shop.example.com/product-{start_id + i}",
            "images": [{"src": f"https://shop.example.com/img/{start_id + i}.jpg"}],
        }
        for i in range(count)
    ]


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "WC_API_URL", "https://shop.example.com")
    monkeypatch.setattr(settings, "WC_CONSUMER_KEY", "ck_test")
    monkeypatch.setattr(settings, "WC_CONSUMER_SECRET", "cs_test")
    return settings


@pytest.fixture
def unconfigured(monkeypatch):
    monkeypatch.setattr(settings, "WC_API_URL", "")
    monkeypatch.setattr(settings, "WC_CONSUMER_KEY", "")
    monkeypatch.setattr(settings, "WC_CONSUMER_SECRET", "")
    return settings
