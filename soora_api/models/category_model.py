# soora_api/models/category_model.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.types import Unicode, UnicodeText

from soora_api.database.session import Base
from soora_api.models.base import new_id, utcnow


class Category(Base):
    __tablename__ = "categories"

    id          = Column(String(36), primary_key=True, default=new_id)
    name        = Column(Unicode(100), nullable=False, unique=True)
    description = Column(UnicodeText)
    sort_order  = Column(Integer, nullable=False, default=0)
    is_active   = Column(Boolean, nullable=False, default=True)
    created_at  = Column(DateTime(timezone=True), nullable=False, default=utcnow)
