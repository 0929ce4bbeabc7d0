from sqlalchemy import Column, Integer, String, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base


class Amenity(Base):
    __tablename__ = "amenities"

    id = Column(Integer, primary_key=True, index=True)
    amenity_name = Column(String(255))
    description = Column(Text)

    rental_links = relationship(
        "VacationRentalAmenity",
        back_populates="amenity",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class VacationRentalAmenity(Base):
    """Junction row keyed by (vacation_rental_id, amenity_id)"""

    __tablename__ = "vacation_rental_amenities"

    vacation_rental_id = Column(
        Integer,
        ForeignKey("vacation_rentals.id", ondelete="CASCADE"),
        primary_key=True,
    )
    amenity_id = Column(
        Integer,
        ForeignKey("amenities.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # Relationships
    vacation_rental = relationship("VacationRental", back_populates="amenity_links")
    amenity = relationship("Amenity", back_populates="rental_links")
