"""
Server-side rendition of the catalog page controller.

The controller pulls one page from the catalog endpoint and writes the
resulting markup into a content region. Every call ends in exactly one of
the terminal outcomes of RenderOutcome; nothing escapes render().
"""

from __future__ import annotations

import json
import logging
import math
import re
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, Tuple

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape

from storefront.core.config import settings
from storefront.frontend.pagination import PageButton, PaginationState, pagination_buttons
from storefront.services.product_service import PLACEHOLDER_IMAGE


logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)

TITLE_PATTERN = re.compile(r"<title>(.*?)</title>")

CONNECTION_ERROR_MESSAGE = (
    "Failed to fetch products. Please check your connection and try again."
)


class RenderOutcome(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR_TRANSPORT = "error_transport"
    ERROR_APPLICATION = "error_application"
    EMPTY = "empty"
    RENDERED = "rendered"


class ContentRegion(Protocol):
    def set_html(self, html: str) -> None:
        ...


class BufferRegion:
    """In-memory content region; keeps every write for inspection."""

    def __init__(self):
        self.html = ""
        self.history: List[str] = []

    def set_html(self, html: str) -> None:
        self.html = html
        self.history.append(html)


# -----------------------------------------------------
# Helpers
# -----------------------------------------------------

def format_price(value: Any) -> str:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "N/A"

    if not math.isfinite(number):
        return "N/A"

    return f"{number:.2f}"


def classify_response(status_code: int, body: str) -> Optional[str]:
    """
    Returns a transport error message, or None when the body looks like a
    JSON envelope worth parsing.
    """
    if 200 <= status_code < 300 and body.strip().startswith("{"):
        return None

    message = f"Failed to fetch products (HTTP {status_code})"

    if body:
        match = TITLE_PATTERN.search(body)
        if match:
            message = f"Server Error: {match.group(1)}"

    return message


def product_card(product: Dict[str, Any]) -> Dict[str, Any]:
    in_stock = product.get("stock_status") == "instock"

    return {
        "name": product.get("name") or "",
        "image": product.get("featured_image") or PLACEHOLDER_IMAGE,
        "price": format_price(product.get("price")),
        "original_price": (
            format_price(product.get("regular_price"))
            if product.get("sale_price")
            else None
        ),
        "stock_class": "stock-instock" if in_stock else "stock-outofstock",
        "stock_text": "✓ In Stock" if in_stock else "✗ Out of Stock",
    }


def render_loading() -> str:
    return env.get_template("loading.html").render()


def render_error(message: str, hint: Optional[str] = None) -> str:
    return env.get_template("error.html").render(message=message, hint=hint)


def render_empty() -> str:
    return env.get_template("empty.html").render()


def render_catalog(products: List[Dict[str, Any]], state: PaginationState, total: int) -> str:
    return env.get_template("catalog.html").render(
        cards=[product_card(p) for p in products],
        buttons=pagination_buttons(state),
        state=state,
        total=total,
        placeholder=PLACEHOLDER_IMAGE,
    )


# -----------------------------------------------------
# Controller
# -----------------------------------------------------

class CatalogRenderer:

    def __init__(
        self,
        region: ContentRegion,
        endpoint: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        per_page: int = 12,
    ):
        self.region = region
        self.endpoint = endpoint or settings.CATALOG_API_ENDPOINT
        self.http_client = http_client
        self.per_page = per_page

        self.state = PaginationState()
        self.buttons: List[PageButton] = []
        self.last_outcome = RenderOutcome.IDLE

    async def _fetch(self, page: int) -> httpx.Response:
        params = {"page": page, "per_page": self.per_page}

        if self.http_client is not None:
            return await self.http_client.get(self.endpoint, params=params)

        async with httpx.AsyncClient() as client:
            return await client.get(self.endpoint, params=params)

    async def render(self, page: int = 1) -> None:
        self.region.set_html(render_loading())
        self.last_outcome = RenderOutcome.LOADING

        try:
            response = await self._fetch(page)
            body = response.text

            transport_error = classify_response(response.status_code, body)
            if transport_error is not None:
                logger.error(
                    "Catalog response rejected | status=%s reason=%s content_type=%s | %s",
                    response.status_code,
                    response.reason_phrase,
                    response.headers.get("content-type"),
                    body,
                )
                self.region.set_html(
                    render_error(transport_error, hint="Check the server logs for details.")
                )
                self.last_outcome = RenderOutcome.ERROR_TRANSPORT
                return

            data = json.loads(body)

            if not data.get("success"):
                self.region.set_html(render_error(data.get("error") or "Unknown error"))
                self.last_outcome = RenderOutcome.ERROR_APPLICATION
                return

            state = PaginationState(
                current_page=int(data["currentPage"]),
                total_pages=int(data["totalPages"]),
            )
            products = data.get("products") or []

            if not products:
                self.region.set_html(render_empty())
                self.buttons = []
                self.state = state
                self.last_outcome = RenderOutcome.EMPTY
                return

            self.region.set_html(render_catalog(products, state, data.get("total", len(products))))
            self.buttons = pagination_buttons(state)
            self.state = state
            self.last_outcome = RenderOutcome.RENDERED

        except Exception:
            logger.exception("Catalog render failed | page=%s", page)
            self.region.set_html(render_error(CONNECTION_ERROR_MESSAGE))
            self.last_outcome = RenderOutcome.ERROR_TRANSPORT

    def controls(self) -> List[Tuple[PageButton, Callable[[], Awaitable[None]]]]:
        """Click handlers for the pagination buttons of the last render."""

        def handler(target: int) -> Callable[[], Awaitable[None]]:
            async def click() -> None:
                await self.render(target)
            return click

        return [(button, handler(button.page)) for button in self.buttons]
