"""
Schemas for the product listing.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from api.validation import RequestSchema


MAX_LIMIT = 100
# keeps the offset (page - 1) * limit inside a signed 64-bit integer
MAX_PAGE = (2**63 - 1) // MAX_LIMIT


class PaginationQuery(RequestSchema):
    page: int = Field(1, ge=1, le=MAX_PAGE)
    limit: int = Field(10, ge=1, le=MAX_LIMIT)

    messages: ClassVar[Dict[str, str]] = {
        "page.int_parsing": "page must be a number",
        "page.greater_than_equal": "page must be greater than or equal to 1",
        "page.less_than_equal": f"page must be less than or equal to {MAX_PAGE}",
        "limit.int_parsing": "limit must be a number",
        "limit.greater_than_equal": "limit must be greater than or equal to 1",
        "limit.less_than_equal": f"limit must be less than or equal to {MAX_LIMIT}",
    }


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    in_stock: bool
    created_at: datetime
    updated_at: datetime


class Pagination(BaseModel):
    total: int
    page: int
    limit: int


class ProductPage(BaseModel):
    productData: List[ProductOut]
    pagination: Pagination
