from sqlalchemy import Column, Integer, Float, Date, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from ..database import Base


class Promotion(Base):
    __tablename__ = "promotions"

    id = Column(Integer, primary_key=True, index=True)
    vacation_rental_id = Column(
        Integer,
        ForeignKey("vacation_rentals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    discount_percentage = Column(Float)
    start_date = Column(Date)
    end_date = Column(Date)

    vacation_rental = relationship("VacationRental", back_populates="promotions")

    __table_args__ = (
        CheckConstraint(
            "discount_percentage IS NULL OR "
            "(discount_percentage >= 0 AND discount_percentage <= 100)",
            name="ck_promotions_discount",
        ),
    )
