import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from storefront.core.config import settings
from storefront.integrations.woo_client import ConfigurationError
from storefront.services.product_service import ProductService
from storefront.utils.validators import clamp, to_int

router = APIRouter(prefix="", tags=["products"])

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json; charset=utf-8"

CONFIG_ERROR_MESSAGE = "API credentials not configured. Please check your .env file."


def json_response(content: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        content=content,
        status_code=status_code,
        media_type=JSON_MEDIA_TYPE,
    )


@router.get("/products")
def products(
    page: Optional[str] = None,
    per_page: Optional[str] = None,
):
    """
    Paginated, normalized product catalog.
    - page is clamped to >= 1
    - per_page is clamped to [1, MAX_PER_PAGE], default DEFAULT_PER_PAGE
    """

    page_number = clamp(to_int(page, 1), 1)
    page_size = clamp(
        to_int(per_page, settings.DEFAULT_PER_PAGE),
        1,
        settings.MAX_PER_PAGE,
    )

    try:
        service = ProductService.from_settings(per_page=page_size)
        result = service.get_products(page_number, page_size)

    except ConfigurationError:
        logger.error("Catalog endpoint called without WooCommerce credentials")
        return json_response(
            {"success": False, "error": CONFIG_ERROR_MESSAGE, "products": []},
            status_code=500,
        )

    except Exception as e:
        logger.exception("Unhandled catalog error")
        return json_response(
            {"success": False, "error": str(e), "products": []},
            status_code=500,
        )

    return json_response(result)
