# soora_api/models/order_item_model.py
from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from soora_api.database.session import Base
from soora_api.models.base import new_id


class OrderItem(Base):
    __tablename__ = "order_items"

    id         = Column(String(36), primary_key=True, default=new_id)
    order_id   = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)
    quantity   = Column(Integer, nullable=False)
    price      = Column(Float, nullable=False)  # unit price at order time

    order   = relationship("Order", back_populates="items")
    product = relationship("Product")
