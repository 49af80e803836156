# soora_api/models/address_model.py
from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Index, String, text
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from soora_api.database.session import Base
from soora_api.models.base import new_id, utcnow
from soora_api.models.enums import AddressType


class Address(Base):
    __tablename__ = "addresses"

    id             = Column(String(36), primary_key=True, default=new_id)
    user_id        = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type           = Column(Enum(AddressType, native_enum=False, length=20), nullable=False, default=AddressType.HOME)
    name           = Column(Unicode(255), nullable=False)
    street         = Column(Unicode(255), nullable=False)
    unit           = Column(Unicode(32))
    building       = Column(Unicode(255))
    postal_code    = Column(Unicode(16), nullable=False)
    district       = Column(Unicode(100), nullable=False)
    is_default     = Column(Boolean, nullable=False, default=False)
    delivery_notes = Column(UnicodeText)
    created_at     = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at     = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # at most one default address per user
    __table_args__ = (
        Index(
            "uq_addresses_one_default_per_user",
            "user_id",
            unique=True,
            sqlite_where=text("is_default = 1"),
            postgresql_where=text("is_default = true"),
        ),
    )

    user = relationship("User", back_populates="addresses")
