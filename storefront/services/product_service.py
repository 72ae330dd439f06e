import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from storefront.core.config import settings
from storefront.integrations.woo_client import WooCommerceClient, WooCommerceError
from storefront.models.product_models import ErrorEnvelope, PageEnvelope, ProductRecord


logger = logging.getLogger(__name__)


PLACEHOLDER_IMAGE = (
    "data:image/svg+xml,%3Csvg xmlns=%22http://www.w3.org/2000/svg%22 "
    "width=%22200%22 height=%22200%22%3E%3Crect fill=%22%23ddd%22 width=%22200%22 "
    "height=%22200%22/%3E%3Ctext x=%2250%25%22 y=%2250%25%22 "
    "dominant-baseline=%22middle%22 text-anchor=%22middle%22 "
    "font-family=%22Arial%22 font-size=%2214%22 fill=%22%23999%22%3E"
    "No Image%3C/text%3E%3C/svg%3E"
)

# normalized field -> (upstream field, default)
PRODUCT_FIELDS = {
    "id": ("id", None),
    "name": ("name", "No name"),
    "price": ("price", "0"),
    "regular_price": ("regular_price", "0"),
    "sale_price": ("sale_price", None),
    "stock_status": ("stock_status", "unknown"),
    "stock_quantity": ("stock_quantity", 0),
    "url": ("permalink", "#"),
}

STRING_FIELDS = ("name", "price", "regular_price", "sale_price", "stock_status", "url")


# -------------------------------------------------
# Normalization
# -------------------------------------------------

def _to_int(value: Any, default: Optional[int]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def coerce_records(payload: Union[List[Any], Mapping, None]) -> List[Any]:
    """
    Upstream pages arrive either as a JSON list or as a keyed object.
    Always hand back an ordered list.
    """
    if isinstance(payload, Mapping):
        return list(payload.values())

    if isinstance(payload, (list, tuple)):
        return list(payload)

    return []


def featured_image(raw: Mapping) -> str:
    images = raw.get("images")

    if images and isinstance(images, list):
        first = images[0]
        src = first.get("src") if isinstance(first, Mapping) else None
        if isinstance(src, str) and src:
            return src

    return PLACEHOLDER_IMAGE


def normalize_product(raw: Any) -> ProductRecord:
    """
    Map one upstream record onto the fixed product schema.
    Missing or null fields fall back to PRODUCT_FIELDS defaults.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    data: Dict[str, Any] = {}

    for field, (source, default) in PRODUCT_FIELDS.items():
        value = raw.get(source)
        data[field] = default if value is None else value

    data["id"] = _to_int(data["id"], None)
    data["stock_quantity"] = _to_int(data["stock_quantity"], 0)

    for field in STRING_FIELDS:
        if data[field] is not None:
            data[field] = str(data[field])

    data["featured_image"] = featured_image(raw)

    return ProductRecord(**data)


def normalize_products(payload: Union[List[Any], Mapping, None]) -> List[ProductRecord]:
    return [normalize_product(raw) for raw in coerce_records(payload)]


def estimate_total_pages(page: int, per_page: int, returned: int) -> int:
    # A short page is the last one; a full page implies at least one more.
    if returned < per_page:
        return page
    return page + 1


# -------------------------------------------------
# Service
# -------------------------------------------------

class ProductService:

    def __init__(
        self,
        api_url: str,
        consumer_key: str,
        consumer_secret: str,
        per_page: int = 12,
        client: Optional[WooCommerceClient] = None,
    ):
        # Raises ConfigurationError when credentials are missing
        self.client = client or WooCommerceClient(
            api_url,
            consumer_key,
            consumer_secret,
            version=settings.WC_API_VERSION,
            timeout=settings.WC_TIMEOUT,
            query_string_auth=settings.WC_QUERY_STRING_AUTH,
        )
        self.per_page = per_page

    @classmethod
    def from_settings(cls, per_page: Optional[int] = None) -> "ProductService":
        return cls(
            settings.WC_API_URL,
            settings.WC_CONSUMER_KEY,
            settings.WC_CONSUMER_SECRET,
            per_page=per_page or settings.DEFAULT_PER_PAGE,
        )

    def get_products(self, page: int = 1, per_page: Optional[int] = None) -> Dict[str, Any]:
        """
        Fetch one catalog page.

        page and per_page are trusted to be already clamped by the caller.
        Upstream failures are folded into an error envelope; this never raises
        for API problems.
        """
        if per_page is None:
            per_page = self.per_page

        try:
            payload = self.client.get(
                "products",
                params={"page": page, "per_page": per_page},
            )
        except WooCommerceError as e:
            logger.warning("Catalog fetch failed | page=%s per_page=%s | %s", page, per_page, e)
            return ErrorEnvelope(error=f"Failed to fetch products: {e}").model_dump()

        products = normalize_products(payload)

        envelope = PageEnvelope(
            success=True,
            products=products,
            total=len(products),
            current_page=page,
            per_page=per_page,
            total_pages=estimate_total_pages(page, per_page, len(products)),
        )

        logger.info(
            "Catalog page fetched | page=%s per_page=%s returned=%s",
            page,
            per_page,
            len(products),
        )

        return envelope.model_dump(by_alias=True)
