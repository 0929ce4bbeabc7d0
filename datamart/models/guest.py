from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from ..database import Base


class Guest(Base):
    """Root identity: everybody who can book is a guest first"""

    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    phone_number = Column(String(25))
    profile_picture = Column(String(255))

    # Address
    street = Column(String(255))
    city = Column(String(255))
    state = Column(String(255))
    country = Column(String(255))

    gdpr_acknowledgement = Column(Boolean, default=False)
    language_settings = Column(String(255))

    # Relationships - database enforces ON DELETE, ORM stays passive
    host = relationship(
        "Host",
        back_populates="guest",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    travel_admin = relationship(
        "TravelAdmin", back_populates="guest", uselist=False, passive_deletes="all"
    )
    bookings = relationship(
        "Booking",
        back_populates="guest",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    transactions = relationship(
        "Transaction",
        back_populates="guest",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    reviews = relationship(
        "Review",
        back_populates="reviewer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    social_networks = relationship(
        "GuestSocialNetwork",
        back_populates="guest",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    login_history = relationship(
        "LoginHistory",
        back_populates="guest",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LoginHistory.login_timestamp",
    )
    notifications = relationship(
        "Notification",
        back_populates="guest",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Guest id={self.id} email={self.email!r}>"
