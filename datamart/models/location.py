from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    city_id = Column(
        Integer, ForeignKey("cities.id", ondelete="CASCADE"), nullable=True, index=True
    )
    country = Column(String(255))
    part_of_city = Column(String(255))
    address = Column(String(255))
    phone_number = Column(String(25))
    email = Column(String(255))

    # Relationships
    city = relationship("City", back_populates="locations")
    vacation_rentals = relationship(
        "VacationRental",
        back_populates="location",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
