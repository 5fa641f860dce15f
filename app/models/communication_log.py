from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import CommunicationStatus


class CommunicationLog(Base):
    """Record of a message sent to a guest. Not exposed through the API yet."""

    __tablename__ = "communication_logs"

    id = Column(Integer, primary_key=True, index=True)
    wedding_id = Column(
        Integer, ForeignKey("weddings.id", ondelete="CASCADE"), nullable=False
    )
    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=True
    )
    type = Column(String, nullable=False)  # email, sms, whatsapp
    subject = Column(String)
    message = Column(Text, nullable=False)
    status = Column(String, nullable=False, default=CommunicationStatus.SENT.value)
    sent_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    wedding = relationship("Wedding", back_populates="communication_logs")
    guest = relationship("Guest")
