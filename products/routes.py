"""
Product API routes.

Route prefix: /api/v1/products
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import db_session
from api.errors import InternalError
from api.responses import respond_success
from api.validation import ValidatedRequest, validate
from config.constants import Messages
from products.schemas import PaginationQuery
from products.service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/all")
async def get_products(
    req: ValidatedRequest = Depends(validate(query=PaginationQuery)),
    session: AsyncSession = Depends(db_session),
):
    query: PaginationQuery = req.query
    try:
        page = await ProductService(session).get_all_products(query.page, query.limit)
    except Exception:
        logger.exception("Listing products failed (page=%d, limit=%d)", query.page, query.limit)
        raise InternalError() from None
    return respond_success(page, Messages.FETCHED)
