from sqlalchemy import Column, Integer, Date, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import PaymentStatus, enum_column_type


class Reservation(Base):
    """
    An admin's view of a booking.

    cancellation_policy and refund_policy are text copies taken when the
    reservation is created, not references into cancellation_policies, so
    later catalog edits leave them untouched.
    """

    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(
        Integer,
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    admin_id = Column(
        Integer,
        ForeignKey("travel_admins.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date_of_reservation = Column(Date)
    payment_status = Column(
        enum_column_type(PaymentStatus, "reservation_payment_status"), nullable=True
    )
    length_of_stay = Column(Integer)

    # Snapshots
    cancellation_policy = Column(Text)
    refund_policy = Column(Text)

    # Relationships
    booking = relationship("Booking", back_populates="reservations")
    admin = relationship("TravelAdmin", back_populates="reservations")
