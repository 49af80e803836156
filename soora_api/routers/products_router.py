# soora_api/routers/products_router.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from soora_api.database.session import get_db
from soora_api.queries.common import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from soora_api.queries.product_queries import (
    ProductFilters,
    ProductSortField,
    SortOrder,
    product_queries,
)
from soora_api.schemas.products import (
    CategoryOut,
    ProductDetailOut,
    ProductListOut,
    ProductOut,
    ReviewOut,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductListOut)
def list_products(
    category: Optional[str] = Query(default=None),
    brand: Optional[str] = Query(default=None),
    min_price: Optional[float] = Query(default=None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(default=None, alias="maxPrice", ge=0),
    search: Optional[str] = Query(default=None, max_length=200),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    sort_by: ProductSortField = Query(default=ProductSortField.createdAt, alias="sortBy"),
    order: SortOrder = Query(default=SortOrder.desc),
    db: Session = Depends(get_db),
):
    filters = ProductFilters(
        category=category,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
        search=search,
    )
    products, pagination = product_queries.list_products(
        db, filters, page, limit, sort_by=sort_by, order=order
    )
    return ProductListOut(
        products=[ProductOut.model_validate(p) for p in products],
        pagination=pagination,
    )


@router.get("/featured/list", response_model=List[ProductOut])
def list_featured(db: Session = Depends(get_db)):
    return [ProductOut.model_validate(p) for p in product_queries.featured(db)]


@router.get("/categories/list", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return [CategoryOut.model_validate(c) for c in product_queries.active_categories(db)]


@router.get("/{product_id}", response_model=ProductDetailOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    p = product_queries.get_active_product(db, product_id)
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")

    reviews = product_queries.published_reviews(db, p.id)
    out = ProductDetailOut(
        **ProductOut.model_validate(p).model_dump(),
        reviews=[ReviewOut.model_validate(r) for r in reviews],
    )

    # the response shows the count as read; the next read sees the increment
    try:
        product_queries.increment_view_count(db, p.id)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to record a view for product %s", product_id)
    return out
