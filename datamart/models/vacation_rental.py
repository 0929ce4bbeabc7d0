from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    ForeignKey,
    Boolean,
    Text,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from ..database import Base


class VacationRental(Base):
    """A listed property. Exists only while its host and location exist."""

    __tablename__ = "vacation_rentals"

    id = Column(Integer, primary_key=True, index=True)
    host_id = Column(
        Integer, ForeignKey("hosts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    location_id = Column(
        Integer,
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    property_type = Column(String(255))
    description = Column(Text)
    max_guests = Column(Integer)
    rate_per_person = Column(Float)

    # Amenity flags
    own_bathroom = Column(Boolean)
    pet_friendly = Column(Boolean)
    free_parking = Column(Boolean)
    number_of_beds = Column(Integer)

    calendar_availability = Column(Text)
    proximity_to_beach = Column(String(255))
    proximity_to_shops = Column(String(255))
    proximity_to_sightseeing = Column(String(255))

    # Relationships
    host = relationship("Host", back_populates="vacation_rentals")
    location = relationship("Location", back_populates="vacation_rentals")
    rooms = relationship(
        "Room",
        back_populates="vacation_rental",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    amenity_links = relationship(
        "VacationRentalAmenity",
        back_populates="vacation_rental",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    policy_links = relationship(
        "VacationRentalPolicy",
        back_populates="vacation_rental",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    promotions = relationship(
        "Promotion",
        back_populates="vacation_rental",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(
            "max_guests IS NULL OR max_guests > 0", name="ck_vacation_rentals_max_guests"
        ),
    )

    # Helper methods
    def get_amenities(self):
        return [link.amenity for link in self.amenity_links]

    def get_policies(self):
        return [link.policy for link in self.policy_links]
