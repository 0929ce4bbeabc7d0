from sqlalchemy import Column, Integer, String, Date, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base


class Event(Base):
    """Local event attached to a stay"""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(
        Integer,
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event_name = Column(String(255))
    start_date = Column(Date)
    end_date = Column(Date)
    description = Column(Text)

    booking = relationship("Booking", back_populates="events")
