from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class TravelAdmin(Base):
    __tablename__ = "travel_admins"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone_number = Column(String(25))

    # No cascade: a guest acting as admin must be unassigned before removal
    guest_id = Column(
        Integer,
        ForeignKey("guests.id", ondelete="RESTRICT"),
        nullable=False,
        unique=True,
        index=True,
    )

    # Relationships
    guest = relationship("Guest", back_populates="travel_admin")
    reservations = relationship(
        "Reservation",
        back_populates="admin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
