# soora_api/routers/admin_router.py
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from soora_api.database.session import get_db
from soora_api.models.base import utcnow
from soora_api.models.enums import OrderStatus
from soora_api.models.order_model import Order
from soora_api.models.product_model import Product
from soora_api.models.user_model import User
from soora_api.queries import admin_queries
from soora_api.queries.common import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from soora_api.queries.product_queries import (
    ProductFilters,
    ProductSortField,
    SortOrder,
    product_queries,
)
from soora_api.routers.orders_router import load_order
from soora_api.schemas.admin import DashboardStats, SalesReport
from soora_api.schemas.common import MessageOut
from soora_api.schemas.orders import OrderListOut, OrderOut, OrderStatusUpdate
from soora_api.schemas.products import (
    ProductCreate,
    ProductListOut,
    ProductOut,
    ProductUpdate,
    StockUpdate,
)
from soora_api.schemas.users import AdminUserListOut, AdminUserOut, TierUpdate, TierUpdateOut
from soora_api.services.auth_service import require_admin

logger = logging.getLogger(__name__)

# every route below needs an ADMIN caller
router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])

# product columns that may not be written as NULL through a partial update
_REQUIRED_PRODUCT_FIELDS = {"name", "price", "stock", "is_active", "is_featured", "low_stock_alert"}


def _get_product(db: Session, product_id: str) -> Product:
    p = db.get(Product, product_id)
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")
    return p


def _commit(db: Session, what: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to %s", what)
        raise HTTPException(status_code=500, detail=f"Failed to {what}")


# ===== PRODUCTS =====

@router.get("/products", response_model=ProductListOut)
def admin_list_products(
    search: Optional[str] = Query(default=None, max_length=200),
    category: Optional[str] = Query(default=None),
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    sort_by: ProductSortField = Query(default=ProductSortField.createdAt, alias="sortBy"),
    order: SortOrder = Query(default=SortOrder.desc),
    db: Session = Depends(get_db),
):
    products, pagination = product_queries.list_products(
        db,
        ProductFilters(category=category, search=search),
        page,
        limit,
        sort_by=sort_by,
        order=order,
        active_only=False,
        is_active=is_active,
    )
    return ProductListOut(
        products=[ProductOut.model_validate(p) for p in products],
        pagination=pagination,
    )


@router.post("/products", response_model=ProductOut, status_code=201)
def create_product(body: ProductCreate, db: Session = Depends(get_db)):
    p = Product(**body.model_dump(), slug=product_queries.unique_slug(db, body.name))
    try:
        db.add(p)
        db.commit()
        db.refresh(p)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="A product with this slug already exists")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create product %r", body.name)
        raise HTTPException(status_code=500, detail="Failed to create product")

    logger.info("Product %s created with slug %s", p.id, p.slug)
    return ProductOut.model_validate(p)


@router.put("/products/{product_id}", response_model=ProductOut)
def update_product(product_id: str, body: ProductUpdate, db: Session = Depends(get_db)):
    p = _get_product(db, product_id)

    for field, value in body.model_dump(exclude_unset=True).items():
        if value is None and field in _REQUIRED_PRODUCT_FIELDS:
            continue
        setattr(p, field, value)

    _commit(db, "update product")
    db.refresh(p)
    return ProductOut.model_validate(p)


@router.put("/products/{product_id}/stock", response_model=ProductOut)
def update_stock(product_id: str, body: StockUpdate, db: Session = Depends(get_db)):
    p = _get_product(db, product_id)
    p.stock = body.stock
    _commit(db, "update stock")
    db.refresh(p)
    return ProductOut.model_validate(p)


@router.delete("/products/{product_id}", response_model=MessageOut)
def deactivate_product(product_id: str, db: Session = Depends(get_db)):
    p = _get_product(db, product_id)
    p.is_active = False
    _commit(db, "deactivate product")
    return MessageOut(message="Product deactivated")


# ===== ORDERS =====

@router.get("/orders", response_model=OrderListOut)
def admin_list_orders(
    status: Optional[OrderStatus] = Query(default=None),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    db: Session = Depends(get_db),
):
    orders, pagination = admin_queries.list_orders(db, page, limit, status=status)
    return OrderListOut(orders=[OrderOut.model_validate(o) for o in orders], pagination=pagination)


@router.put("/orders/{order_id}/status", response_model=OrderOut)
def update_order_status(order_id: str, body: OrderStatusUpdate, db: Session = Depends(get_db)):
    o = db.get(Order, order_id)
    if not o:
        raise HTTPException(status_code=404, detail="Order not found")

    o.status = body.status
    # deliveredAt follows the status; it is never written on its own
    if body.status == OrderStatus.DELIVERED:
        o.delivered_at = utcnow()

    _commit(db, "update order status")
    logger.info("Order %s moved to %s", order_id, body.status.value)
    return OrderOut.model_validate(load_order(db, order_id))


# ===== USERS =====

@router.get("/users", response_model=AdminUserListOut)
def admin_list_users(
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    db: Session = Depends(get_db),
):
    rows, pagination = admin_queries.list_users_with_order_counts(db, page, limit)
    users = [
        AdminUserOut.model_validate(user).model_copy(update={"order_count": count})
        for user, count in rows
    ]
    return AdminUserListOut(users=users, pagination=pagination)


@router.put("/users/{user_id}/tier", response_model=TierUpdateOut)
def update_user_tier(user_id: str, body: TierUpdate, db: Session = Depends(get_db)):
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    user.tier = body.tier
    _commit(db, "update user tier")
    db.refresh(user)
    return TierUpdateOut.model_validate(user)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # stored timestamps are UTC clock times; offsets are normalised before comparing
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ===== ANALYTICS =====

@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(db: Session = Depends(get_db)):
    return DashboardStats(**admin_queries.dashboard_stats(db))


@router.get("/reports/sales", response_model=SalesReport)
def sales_report(
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    start_date, end_date = _as_utc(start_date), _as_utc(end_date)
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=400, detail="startDate must not be after endDate")

    summary = admin_queries.sales_report(db, start_date, end_date)
    return SalesReport(
        total_revenue=summary.total_revenue,
        total_orders=summary.total_orders,
        average_order_value=summary.average_order_value,
        orders=[OrderOut.model_validate(o) for o in summary.orders],
    )
