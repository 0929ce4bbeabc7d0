from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    vacation_rental_id = Column(
        Integer,
        ForeignKey("vacation_rentals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_type = Column(String(255))
    # Independent of the rental's rate_per_person
    price_per_night = Column(Float)
    available_from = Column(Date)
    available_to = Column(Date)

    # Relationships
    vacation_rental = relationship("VacationRental", back_populates="rooms")
    bookings = relationship(
        "Booking",
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
