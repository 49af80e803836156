# soora_api/schemas/orders.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from soora_api.models.enums import OrderStatus
from soora_api.schemas.common import CamelModel, Pagination
from soora_api.schemas.products import ProductOut
from soora_api.schemas.users import AddressOut


class OrderItemIn(CamelModel):
    product_id: str
    quantity: int = Field(gt=0, le=1000)


class OrderCreate(CamelModel):
    items: List[OrderItemIn] = Field(min_length=1)
    address_id: str
    notes: Optional[str] = Field(default=None, max_length=1000)


class OrderStatusUpdate(CamelModel):
    status: OrderStatus


class OrderItemOut(CamelModel):
    id: str
    product_id: str
    quantity: int
    price: float
    product: Optional[ProductOut] = None


class OrderCustomerOut(CamelModel):
    name: Optional[str] = None
    email: str
    phone: Optional[str] = None


class OrderOut(CamelModel):
    id: str
    user_id: str
    address_id: Optional[str] = None
    status: OrderStatus
    total: float
    delivery_fee: float
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    delivered_at: Optional[datetime] = None
    items: List[OrderItemOut] = []
    address: Optional[AddressOut] = None
    user: Optional[OrderCustomerOut] = None


class OrderListOut(CamelModel):
    orders: List[OrderOut]
    pagination: Pagination


class TrackingStep(CamelModel):
    status: OrderStatus
    reached: bool


class TrackingOut(CamelModel):
    order_id: str
    status: OrderStatus
    created_at: datetime
    delivered_at: Optional[datetime] = None
    address: Optional[AddressOut] = None
    timeline: List[TrackingStep]
