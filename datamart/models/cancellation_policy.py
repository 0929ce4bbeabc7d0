from sqlalchemy import Column, Integer, String, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base


class CancellationPolicy(Base):
    __tablename__ = "cancellation_policies"

    id = Column(Integer, primary_key=True, index=True)
    policy_name = Column(String(255))
    description = Column(Text)

    rental_links = relationship(
        "VacationRentalPolicy",
        back_populates="policy",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class VacationRentalPolicy(Base):
    __tablename__ = "vacation_rental_policies"

    vacation_rental_id = Column(
        Integer,
        ForeignKey("vacation_rentals.id", ondelete="CASCADE"),
        primary_key=True,
    )
    policy_id = Column(
        Integer,
        ForeignKey("cancellation_policies.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # Relationships
    vacation_rental = relationship("VacationRental", back_populates="policy_links")
    policy = relationship("CancellationPolicy", back_populates="rental_links")
