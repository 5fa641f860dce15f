from sqlalchemy import (
    CheckConstraint,
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Boolean,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import RSVPStatus


class Guest(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String)
    phone = Column(String, nullable=False)
    address = Column(Text)
    notes = Column(Text)

    # RSVP
    rsvp_status = Column(String, nullable=False, default=RSVPStatus.PENDING.value)
    guest_count = Column(Integer, nullable=False, default=1)
    dietary_restrictions = Column(Text)
    rsvp_submitted_at = Column(DateTime(timezone=True))

    # Invitation tracking
    invitation_sent = Column(Boolean, nullable=False, default=False)
    invitation_sent_at = Column(DateTime(timezone=True))

    wedding_id = Column(
        Integer, ForeignKey("weddings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id = Column(
        Integer, ForeignKey("guest_categories.id", ondelete="SET NULL"), nullable=True
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("guest_count >= 1", name="ck_guests_guest_count_positive"),
    )

    # Relationships
    wedding = relationship("Wedding", back_populates="guests")
    category = relationship("GuestCategory", back_populates="guests")
