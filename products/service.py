"""
Product queries.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Product
from products.schemas import Pagination, ProductOut, ProductPage


class ProductService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_all_products(self, page: int = 1, limit: int = 10) -> ProductPage:
        """One page of products, newest first."""
        offset = (page - 1) * limit
        rows = await self.session.execute(
            select(Product)
            .order_by(Product.created_at.desc(), Product.product_id.desc())
            .offset(offset)
            .limit(limit)
        )
        total = await self.session.scalar(select(func.count()).select_from(Product))
        return ProductPage(
            productData=[ProductOut.model_validate(p) for p in rows.scalars().all()],
            pagination=Pagination(total=total or 0, page=page, limit=limit),
        )
