from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    Date,
    DateTime,
    ForeignKey,
    Text,
    Index,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import PaymentStatus, enum_column_type


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    room_id = Column(
        Integer, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True
    )

    booking_date = Column(DateTime, nullable=False, server_default=func.now())
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)
    total_price = Column(Float, nullable=False)
    payment_status = Column(
        enum_column_type(PaymentStatus, "payment_status"), nullable=False
    )
    length_of_stay = Column(Integer, nullable=False)

    # Cancellation terms
    cancellation_deadline = Column(Date)
    cancellation_refund = Column(Float)
    date_of_cancellation = Column(Date)
    host_payout = Column(Float)

    # Optional event the stay is booked around
    event_name = Column(String(255))
    start_date = Column(Date)
    end_date = Column(Date)
    description = Column(Text)

    # Relationships
    guest = relationship("Guest", back_populates="bookings")
    room = relationship("Room", back_populates="bookings")
    transactions = relationship(
        "Transaction",
        back_populates="booking",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Transaction.transaction_date",
    )
    reservations = relationship(
        "Reservation",
        back_populates="booking",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    reviews = relationship(
        "Review",
        back_populates="booking",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    support_tickets = relationship(
        "CustomerService",
        back_populates="booking",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    events = relationship(
        "Event",
        back_populates="booking",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_booking_status_cancelled", "payment_status", "date_of_cancellation"),
        Index("idx_booking_guest_date", "guest_id", "booking_date"),
    )

    @property
    def nights(self) -> int:
        return (self.check_out_date - self.check_in_date).days
