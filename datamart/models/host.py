from sqlalchemy import (
    Column,
    Integer,
    Float,
    Date,
    ForeignKey,
    Boolean,
    Text,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from ..database import Base


class Host(Base):
    """A guest who lists property. Hosts may refer other hosts."""

    __tablename__ = "hosts"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(
        Integer,
        ForeignKey("guests.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,  # One host profile per guest
        index=True,
    )
    rating = Column(Float)
    verified = Column(Boolean, default=False)
    host_since = Column(Date)
    stars = Column(Integer)
    external_reviews = Column(Text)

    # Self-referential: removing the referrer clears the pointer
    referred_by_host_id = Column(
        Integer,
        ForeignKey("hosts.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    guest = relationship("Guest", back_populates="host")
    referred_by = relationship(
        "Host",
        remote_side=[id],
        back_populates="referred_hosts",
    )
    referred_hosts = relationship(
        "Host", back_populates="referred_by", passive_deletes=True
    )
    vacation_rentals = relationship(
        "VacationRental",
        back_populates="host",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("rating IS NULL OR (rating >= 0 AND rating <= 5)", name="ck_hosts_rating"),
        CheckConstraint("stars IS NULL OR (stars >= 1 AND stars <= 5)", name="ck_hosts_stars"),
        CheckConstraint(
            "referred_by_host_id IS NULL OR referred_by_host_id <> id",
            name="ck_hosts_not_self_referred",
        ),
    )

    def __repr__(self):
        return f"<Host id={self.id} guest_id={self.guest_id}>"
