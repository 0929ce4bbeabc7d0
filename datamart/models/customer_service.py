from sqlalchemy import Column, Integer, String, Date, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base


class CustomerService(Base):
    """Support ticket raised against a booking"""

    __tablename__ = "customer_service"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(
        Integer,
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    issue_description = Column(Text)
    resolution = Column(Text)
    contact_method = Column(String(255))
    resolution_date = Column(Date)

    booking = relationship("Booking", back_populates="support_tickets")

    @property
    def is_resolved(self) -> bool:
        return self.resolution_date is not None
