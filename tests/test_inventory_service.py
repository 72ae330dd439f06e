import pytest

from conftest import FakeWooClient
from storefront.integrations.woo_client import WooCommerceError
from storefront.services.inventory_service import (
    InventoryValidationError,
    ProductNotFoundError,
    fetch_stock,
    render_stock_html,
)


def test_single_item_in_stock_is_singular():
    client = FakeWooClient(responses={"products/7": {"id": 7, "stock_status": "instock", "stock_quantity": 1}})

    fragment = fetch_stock(7, client=client)

    assert fragment.product_id == 7
    assert fragment.stock_quantity == 1
    assert fragment.stock_status == "instock"
    assert "✓ In Stock (1 item)" in fragment.stock_html
    assert 'class="product-stock stock-instock"' in fragment.stock_html


def test_many_items_in_stock_is_plural():
    assert "(4 items)" in render_stock_html("instock", 4)
    assert "(0 items)" in render_stock_html("instock", 0)


def test_out_of_stock_fragment():
    html = render_stock_html("onbackorder", 3)

    assert html == '<span class="product-stock stock-outofstock">✗ Out of Stock</span>'


def test_missing_stock_fields_default_to_out_of_stock():
    client = FakeWooClient(responses={"products/3": {"id": 3, "stock_quantity": None}})

    fragment = fetch_stock(3, client=client)

    assert fragment.stock_quantity == 0
    assert fragment.stock_status == "outofstock"


def test_response_payload_shape():
    client = FakeWooClient(responses={"products/7": {"stock_status": "instock", "stock_quantity": 2}})

    payload = fetch_stock(7, client=client).to_response()

    assert set(payload) == {"success", "product_id", "stock_quantity", "stock_status", "stock_html"}
    assert payload["success"] is True


@pytest.mark.parametrize("product_id", [0, -4])
def test_non_positive_id_is_rejected_before_any_call(product_id):
    client = FakeWooClient()

    with pytest.raises(InventoryValidationError):
        fetch_stock(product_id, client=client)

    assert client.calls == []


def test_empty_record_is_not_found():
    client = FakeWooClient(responses={"products/8": {}})

    with pytest.raises(ProductNotFoundError, match="Product not found"):
        fetch_stock(8, client=client)


def test_upstream_404_is_not_found():
    client = FakeWooClient(error=WooCommerceError("Invalid ID.", status_code=404))

    with pytest.raises(ProductNotFoundError):
        fetch_stock(8, client=client)


def test_other_upstream_errors_propagate():
    client = FakeWooClient(error=WooCommerceError("HTTP 401 Unauthorized", status_code=401))

    with pytest.raises(WooCommerceError):
        fetch_stock(8, client=client)


def test_stock_fragment_has_no_defaults_of_its_own():
    from pydantic import ValidationError

    from storefront.models.product_models import StockFragment

    with pytest.raises(ValidationError):
        StockFragment(product_id=1, stock_html="<span></span>")
