# soora_api/models/order_model.py
from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import UnicodeText

from soora_api.database.session import Base
from soora_api.models.base import new_id, utcnow
from soora_api.models.enums import OrderStatus


class Order(Base):
    __tablename__ = "orders"

    id           = Column(String(36), primary_key=True, default=new_id)
    user_id      = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    address_id   = Column(String(36), ForeignKey("addresses.id", ondelete="SET NULL"), nullable=True)
    status       = Column(Enum(OrderStatus, native_enum=False, length=20), nullable=False, default=OrderStatus.PENDING, index=True)
    total        = Column(Float, nullable=False, default=0.0)
    delivery_fee = Column(Float, nullable=False, default=0.0)
    notes        = Column(UnicodeText)
    created_at   = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at   = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    delivered_at = Column(DateTime(timezone=True), nullable=True)

    user    = relationship("User", back_populates="orders")
    address = relationship("Address")
    items   = relationship("OrderItem", cascade="all, delete-orphan", back_populates="order")
