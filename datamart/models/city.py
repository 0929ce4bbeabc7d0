from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base


class City(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, index=True)
    city_name = Column(String(255))
    country = Column(String(255))

    locations = relationship(
        "Location",
        back_populates="city",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
