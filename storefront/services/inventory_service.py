import logging
from collections.abc import Mapping
from typing import Optional

from storefront.core.config import settings
from storefront.integrations.woo_client import WooCommerceClient, WooCommerceError
from storefront.models.product_models import StockFragment


logger = logging.getLogger(__name__)


class InventoryValidationError(ValueError):
    pass


class ProductNotFoundError(LookupError):
    pass


def render_stock_html(stock_status: str, stock_quantity: int) -> str:
    if stock_status == "instock":
        unit = "item" if stock_quantity == 1 else "items"
        return (
            '<span class="product-stock stock-instock">'
            f"✓ In Stock ({stock_quantity} {unit})</span>"
        )

    return '<span class="product-stock stock-outofstock">✗ Out of Stock</span>'


def fetch_stock(product_id: int, client: Optional[WooCommerceClient] = None) -> StockFragment:
    """
    Live inventory for a single product.

    Raises InventoryValidationError for a non-positive id, ProductNotFoundError
    when the upstream has no such record and WooCommerceError for any other
    upstream failure.
    """
    if product_id == 0:
        raise InventoryValidationError("Product ID is required")

    if product_id < 0:
        raise InventoryValidationError("Product ID must be a positive integer")

    if client is None:
        client = WooCommerceClient(
            settings.WC_API_URL,
            settings.WC_CONSUMER_KEY,
            settings.WC_CONSUMER_SECRET,
            version=settings.WC_API_VERSION,
            timeout=settings.WC_TIMEOUT,
            query_string_auth=settings.WC_QUERY_STRING_AUTH,
        )

    try:
        product = client.get(f"products/{product_id}")
    except WooCommerceError as e:
        if e.status_code == 404:
            raise ProductNotFoundError("Product not found")
        raise

    if not product or not isinstance(product, Mapping):
        raise ProductNotFoundError("Product not found")

    try:
        stock_quantity = int(product.get("stock_quantity") or 0)
    except (TypeError, ValueError):
        stock_quantity = 0

    stock_status = product.get("stock_status") or "outofstock"

    logger.info(
        "Stock fetched | product_id=%s status=%s quantity=%s",
        product_id,
        stock_status,
        stock_quantity,
    )

    return StockFragment(
        product_id=product_id,
        stock_quantity=stock_quantity,
        stock_status=stock_status,
        stock_html=render_stock_html(stock_status, stock_quantity),
    )
