# soora_api/models/product_model.py
from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from soora_api.database.session import Base
from soora_api.models.base import new_id, utcnow


class Product(Base):
    __tablename__ = "products"

    id              = Column(String(36), primary_key=True, default=new_id)
    name            = Column(Unicode(255), nullable=False)
    slug            = Column(Unicode(255), nullable=False, unique=True, index=True)
    description     = Column(UnicodeText)
    price           = Column(Float, nullable=False)
    stock           = Column(Integer, nullable=False, default=0)
    category        = Column(Unicode(100), index=True)
    brand           = Column(Unicode(100), index=True)
    image_url       = Column(Unicode(500))
    is_active       = Column(Boolean, nullable=False, default=True)
    is_featured     = Column(Boolean, nullable=False, default=False)
    view_count      = Column(Integer, nullable=False, default=0)
    sales_count     = Column(Integer, nullable=False, default=0)
    low_stock_alert = Column(Integer, nullable=False, default=10)
    created_at      = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at      = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    reviews = relationship("Review", back_populates="product", cascade="all, delete-orphan")
