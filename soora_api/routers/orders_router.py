# soora_api/routers/orders_router.py
import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from soora_api.config.settings import get_settings
from soora_api.database.session import get_db
from soora_api.models.address_model import Address
from soora_api.models.enums import OrderStatus
from soora_api.models.order_item_model import OrderItem
from soora_api.models.order_model import Order
from soora_api.models.product_model import Product
from soora_api.queries.admin_queries import list_orders, order_detail_options
from soora_api.queries.common import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from soora_api.schemas.orders import OrderCreate, OrderListOut, OrderOut
from soora_api.services.auth_service import CurrentUser, ensure_owner, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


def load_order(db: Session, order_id: str) -> Optional[Order]:
    return (
        db.query(Order)
        .options(*order_detail_options())
        .filter(Order.id == order_id)
        .first()
    )


def get_owned_order(db: Session, order_id: str, current: CurrentUser) -> Order:
    o = load_order(db, order_id)
    ensure_owner(o.user_id if o else None, current, "Order not found")
    return o


def delivery_fee_for(subtotal: float) -> float:
    settings = get_settings()
    if subtotal >= settings.free_delivery_threshold:
        return 0.0
    return settings.delivery_fee


@router.get("", response_model=OrderListOut)
def list_my_orders(
    status: Optional[OrderStatus] = Query(default=None),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    orders, pagination = list_orders(db, page, limit, status=status, user_id=current.id)
    return OrderListOut(orders=[OrderOut.model_validate(o) for o in orders], pagination=pagination)


@router.get("/{order_id}", response_model=OrderOut)
def get_my_order(
    order_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return OrderOut.model_validate(get_owned_order(db, order_id, current))


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    body: OrderCreate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    address = db.get(Address, body.address_id)
    ensure_owner(address.user_id if address else None, current, "Address not found")

    # repeated lines for the same product are merged
    quantities: Dict[str, int] = {}
    for item in body.items:
        quantities[item.product_id] = quantities.get(item.product_id, 0) + item.quantity

    products = {
        p.id: p
        for p in db.query(Product).filter(Product.id.in_(list(quantities))).with_for_update()
    }

    # validate everything before touching any row
    for product_id, qty in quantities.items():
        p = products.get(product_id)
        if not p or not p.is_active:
            raise HTTPException(status_code=400, detail=f"Product {product_id} is not available")
        if p.stock < qty:
            raise HTTPException(status_code=400, detail=f"Insufficient stock for {p.name}")

    subtotal = sum(products[pid].price * qty for pid, qty in quantities.items())
    fee = delivery_fee_for(subtotal)

    o = Order(
        user_id=current.id,
        address_id=address.id,
        status=OrderStatus.PENDING,
        total=round(subtotal + fee, 2),
        delivery_fee=fee,
        notes=body.notes,
    )
    for product_id, qty in quantities.items():
        p = products[product_id]
        o.items.append(OrderItem(product_id=p.id, quantity=qty, price=p.price))
        p.stock = p.stock - qty
        p.sales_count = p.sales_count + qty

    try:
        db.add(o)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to place order for user %s", current.id)
        raise HTTPException(status_code=500, detail="Failed to place order")

    logger.info("Order %s placed by user %s (total=%.2f)", o.id, current.id, o.total)
    return OrderOut.model_validate(load_order(db, o.id))
