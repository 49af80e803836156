# soora_api/routers/delivery_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from soora_api.database.session import get_db
from soora_api.models.enums import OrderStatus
from soora_api.routers.orders_router import get_owned_order
from soora_api.schemas.orders import TrackingOut, TrackingStep
from soora_api.schemas.users import AddressOut
from soora_api.services.auth_service import CurrentUser, get_current_user

router = APIRouter(prefix="/delivery", tags=["delivery"])

MILESTONES = [
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
]


def build_timeline(status: OrderStatus) -> List[TrackingStep]:
    if status == OrderStatus.CANCELLED:
        return [
            TrackingStep(status=OrderStatus.PENDING, reached=True),
            TrackingStep(status=OrderStatus.CANCELLED, reached=True),
        ]
    current = MILESTONES.index(status)
    return [TrackingStep(status=s, reached=i <= current) for i, s in enumerate(MILESTONES)]


@router.get("/{order_id}/tracking", response_model=TrackingOut)
def track_order(
    order_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    o = get_owned_order(db, order_id, current)
    return TrackingOut(
        order_id=o.id,
        status=o.status,
        created_at=o.created_at,
        delivered_at=o.delivered_at,
        address=AddressOut.model_validate(o.address) if o.address else None,
        timeline=build_timeline(o.status),
    )
