# soora_api/queries/admin_queries.py
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload, selectinload

from soora_api.models.enums import REVENUE_STATUSES, OrderStatus
from soora_api.models.order_item_model import OrderItem
from soora_api.models.order_model import Order
from soora_api.models.product_model import Product
from soora_api.models.user_model import User
from soora_api.queries.common import paginate
from soora_api.schemas.common import Pagination


@dataclass
class SalesSummary:
    total_revenue: float
    total_orders: int
    average_order_value: float
    orders: List[Order]


def order_detail_options():
    """Eager loads used wherever an order is returned with its relations."""
    return (
        joinedload(Order.user),
        joinedload(Order.address),
        selectinload(Order.items).joinedload(OrderItem.product),
    )


def list_orders(
    db: Session, page: int, limit: int, status: Optional[OrderStatus] = None, user_id: Optional[str] = None
) -> Tuple[List[Order], Pagination]:
    query = db.query(Order).options(*order_detail_options())
    if status is not None:
        query = query.filter(Order.status == status)
    if user_id is not None:
        query = query.filter(Order.user_id == user_id)
    return paginate(query, page, limit, Order.created_at.desc(), Order.id)


def list_users_with_order_counts(db: Session, page: int, limit: int) -> Tuple[List[Tuple[User, int]], Pagination]:
    order_counts = (
        select(Order.user_id, func.count(Order.id).label("order_count"))
        .group_by(Order.user_id)
        .subquery()
    )
    query = (
        db.query(User, func.coalesce(order_counts.c.order_count, 0))
        .outerjoin(order_counts, order_counts.c.user_id == User.id)
    )
    # order_counts has one row per user, so the join keeps one row per user
    rows, pagination = paginate(query, page, limit, User.created_at.desc(), User.id)
    return [(user, int(count)) for user, count in rows], pagination


def dashboard_stats(db: Session) -> dict:
    """All five dashboard aggregates in a single SELECT of scalar subqueries."""
    total_orders = select(func.count(Order.id)).scalar_subquery()
    pending_orders = (
        select(func.count(Order.id)).where(Order.status == OrderStatus.PENDING).scalar_subquery()
    )
    total_revenue = (
        select(func.coalesce(func.sum(Order.total), 0.0))
        .where(Order.status.in_(REVENUE_STATUSES))
        .scalar_subquery()
    )
    total_users = select(func.count(User.id)).scalar_subquery()
    low_stock_products = (
        select(func.count(Product.id))
        .where(Product.stock <= Product.low_stock_alert)
        .scalar_subquery()
    )

    row = db.execute(
        select(
            total_orders.label("total_orders"),
            pending_orders.label("pending_orders"),
            total_revenue.label("total_revenue"),
            total_users.label("total_users"),
            low_stock_products.label("low_stock_products"),
        )
    ).one()

    return {
        "total_orders": int(row.total_orders or 0),
        "pending_orders": int(row.pending_orders or 0),
        "total_revenue": float(row.total_revenue or 0),
        "total_users": int(row.total_users or 0),
        "low_stock_products": int(row.low_stock_products or 0),
    }


def summarize_sales(orders: List[Order]) -> SalesSummary:
    total_revenue = sum(o.total for o in orders)
    total_orders = len(orders)
    average = total_revenue / total_orders if total_orders else 0.0
    return SalesSummary(
        total_revenue=float(total_revenue),
        total_orders=total_orders,
        average_order_value=float(average),
        orders=orders,
    )


def sales_report(
    db: Session, start_date: Optional[datetime] = None, end_date: Optional[datetime] = None
) -> SalesSummary:
    query = (
        db.query(Order)
        .options(*order_detail_options())
        .filter(Order.status.in_(REVENUE_STATUSES))
    )
    if start_date is not None:
        query = query.filter(Order.created_at >= start_date)
    if end_date is not None:
        query = query.filter(Order.created_at <= end_date)

    orders = query.order_by(Order.created_at.desc()).all()
    return summarize_sales(orders)
