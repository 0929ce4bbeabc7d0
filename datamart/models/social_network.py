from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class SocialNetwork(Base):
    __tablename__ = "social_networks"

    id = Column(Integer, primary_key=True, index=True)
    # Unique in practice only; not enforced
    network_name = Column(String(255))
    url = Column(String(255))

    guest_links = relationship(
        "GuestSocialNetwork",
        back_populates="network",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class GuestSocialNetwork(Base):
    """A guest's profile on a social network. Same network may be linked twice."""

    __tablename__ = "guest_social_networks"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    network_id = Column(
        Integer,
        ForeignKey("social_networks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    profile_url = Column(String(255))

    # Relationships
    guest = relationship("Guest", back_populates="social_networks")
    network = relationship("SocialNetwork", back_populates="guest_links")
