from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from ..utils.constants import AppConstants


class GuestCategory(Base):
    __tablename__ = "guest_categories"

    id = Column(Integer, primary_key=True, index=True)
    wedding_id = Column(
        Integer, ForeignKey("weddings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String, nullable=False)
    color = Column(String, nullable=False, default=AppConstants.DEFAULT_CATEGORY_COLOR)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    wedding = relationship("Wedding", back_populates="categories")
    guests = relationship("Guest", back_populates="category")
