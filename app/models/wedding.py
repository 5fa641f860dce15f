from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import WeddingStatus


class Wedding(Base):
    __tablename__ = "weddings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    bride_name = Column(String, nullable=False)
    groom_name = Column(String, nullable=False)
    wedding_date = Column(DateTime(timezone=True), nullable=False)
    venue = Column(String, nullable=False)
    venue_address = Column(Text)
    description = Column(Text)
    status = Column(String, nullable=False, default=WeddingStatus.ACTIVE.value)

    # Public slug for the RSVP page, never changes after creation
    rsvp_code = Column(String, unique=True, index=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    owner = relationship("User", back_populates="weddings")
    categories = relationship(
        "GuestCategory",
        back_populates="wedding",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    guests = relationship(
        "Guest",
        back_populates="wedding",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    communication_logs = relationship(
        "CommunicationLog",
        back_populates="wedding",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
