# soora_api/models/review_model.py
from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from soora_api.database.session import Base
from soora_api.models.base import new_id, utcnow


class Review(Base):
    __tablename__ = "reviews"

    id           = Column(String(36), primary_key=True, default=new_id)
    product_id   = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id      = Column(String(36), ForeignKey("users.id"), nullable=False)
    rating       = Column(Integer, nullable=False)
    title        = Column(Unicode(255))
    comment      = Column(UnicodeText)
    is_published = Column(Boolean, nullable=False, default=False)
    created_at   = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
    )

    product = relationship("Product", back_populates="reviews")
    user    = relationship("User", back_populates="reviews")
