# soora_api/models/user_model.py
from sqlalchemy import Boolean, Column, Date, DateTime, Enum, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode

from soora_api.database.session import Base
from soora_api.models.base import new_id, utcnow
from soora_api.models.enums import UserRole, UserTier


class User(Base):
    __tablename__ = "users"

    id             = Column(String(36), primary_key=True, default=new_id)
    email          = Column(Unicode(255), unique=True, nullable=False, index=True)
    name           = Column(Unicode(255))
    phone          = Column(Unicode(32))
    role           = Column(Enum(UserRole, native_enum=False, length=20), nullable=False, default=UserRole.CUSTOMER)
    tier           = Column(Enum(UserTier, native_enum=False, length=20), nullable=False, default=UserTier.STANDARD)
    date_of_birth  = Column(Date)
    age_verified   = Column(Boolean, nullable=False, default=False)
    email_verified = Column(Boolean, nullable=False, default=False)
    is_active      = Column(Boolean, nullable=False, default=True)
    created_at     = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at     = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    addresses = relationship("Address", back_populates="user", cascade="all, delete-orphan")
    orders    = relationship("Order", back_populates="user")
    reviews   = relationship("Review", back_populates="user")
