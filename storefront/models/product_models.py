from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ProductRecord(BaseModel):
    id: Optional[int] = None
    name: str = "No name"
    price: str = "0"
    regular_price: str = "0"
    sale_price: Optional[str] = None
    stock_status: str = "unknown"
    stock_quantity: int = 0
    featured_image: str
    url: str = "#"


class PageEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    products: List[ProductRecord] = []
    # Records in this page, not a catalog-wide count
    total: int = 0
    current_page: int = Field(..., alias="currentPage", ge=1)
    per_page: int = Field(..., alias="perPage", ge=1)
    total_pages: int = Field(..., alias="totalPages", ge=1)


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: str
    products: List[ProductRecord] = []


class StockFragment(BaseModel):
    product_id: int
    stock_quantity: int
    stock_status: str
    stock_html: str

    def to_response(self) -> dict:
        return {"success": True, **self.model_dump()}
