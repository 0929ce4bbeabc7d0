from sqlalchemy import (
    Column,
    Integer,
    Float,
    DateTime,
    ForeignKey,
    Text,
    Index,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import PaymentMethod, TransactionType, enum_column_type


class Transaction(Base):
    """Gross money movement on a booking. Append-only ledger row."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    booking_id = Column(
        Integer,
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount = Column(Float, nullable=False)
    transaction_date = Column(DateTime, nullable=False, server_default=func.now())
    payment_method = Column(
        enum_column_type(PaymentMethod, "payment_method"), nullable=False
    )
    transaction_type = Column(
        enum_column_type(TransactionType, "transaction_type"), nullable=False
    )
    refund_processed_date = Column(DateTime, nullable=True)
    description = Column(Text, nullable=False)

    # Relationships
    guest = relationship("Guest", back_populates="transactions")
    booking = relationship("Booking", back_populates="transactions")

    __table_args__ = (
        Index("idx_transaction_booking_type", "booking_id", "transaction_type"),
    )
