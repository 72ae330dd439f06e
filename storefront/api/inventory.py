import logging
from typing import Optional

from fastapi import APIRouter

from storefront.api.products import CONFIG_ERROR_MESSAGE, json_response
from storefront.integrations.woo_client import ConfigurationError, WooCommerceError
from storefront.services.inventory_service import (
    InventoryValidationError,
    ProductNotFoundError,
    fetch_stock,
)
from storefront.utils.validators import to_int

router = APIRouter(prefix="", tags=["inventory"])

logger = logging.getLogger(__name__)


@router.get("/inventory-fragment")
def inventory_fragment(product_id: Optional[str] = None):

    try:
        fragment = fetch_stock(to_int(product_id, 0))

    except ConfigurationError:
        logger.error("Inventory endpoint called without WooCommerce credentials")
        return json_response(
            {"success": False, "error": CONFIG_ERROR_MESSAGE},
            status_code=500,
        )

    except (InventoryValidationError, ProductNotFoundError, WooCommerceError) as e:
        return json_response(
            {"success": False, "error": str(e)},
            status_code=400,
        )

    except Exception as e:
        logger.exception("Unhandled inventory error")
        return json_response(
            {"success": False, "error": str(e)},
            status_code=500,
        )

    return json_response(fragment.to_response())
