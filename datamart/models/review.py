from sqlalchemy import (
    Column,
    Integer,
    Date,
    ForeignKey,
    Text,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import ReviewerType, enum_column_type


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(
        Integer,
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Always a guest id, also when reviewer_type is Host
    reviewer_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reviewer_type = Column(
        enum_column_type(ReviewerType, "reviewer_type"), nullable=False
    )
    rating = Column(Integer)
    comment = Column(Text)
    review_date = Column(Date)

    # Relationships
    booking = relationship("Booking", back_populates="reviews")
    reviewer = relationship("Guest", back_populates="reviews")

    __table_args__ = (
        CheckConstraint(
            "rating IS NULL OR (rating >= 1 AND rating <= 5)", name="ck_reviews_rating"
        ),
    )
