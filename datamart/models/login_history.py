from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class LoginHistory(Base):
    __tablename__ = "login_history"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    login_timestamp = Column(DateTime, server_default=func.now())
    ip_address = Column(String(255))

    guest = relationship("Guest", back_populates="login_history")
