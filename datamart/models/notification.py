from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Notification(Base):
    """System message delivered to a guest. Append-only."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(Text)
    timestamp = Column(DateTime, server_default=func.now())

    guest = relationship("Guest", back_populates="notifications")
