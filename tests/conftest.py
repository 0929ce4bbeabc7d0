import itertools
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from datamart.database import Base, get_db
from datamart.main import app
from datamart.schemas.guest import GuestCreate, HostCreate, TravelAdminCreate
from datamart.schemas.property import (
    CityCreate,
    LocationCreate,
    RentalCreate,
    RoomCreate,
    AmenityCreate,
    PolicyCreate,
)
from datamart.schemas.booking import BookingCreate
from datamart.services import (
    IdentityService,
    GeographyService,
    PropertyService,
    BookingService,
)

# ---------- TEST FIXTURES ----------

# One in-memory SQLite database per test; StaticPool keeps it on one connection
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """Override get_db dependency for FastAPI TestClient."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


# ---------- TEST DATA HELPERS ----------


class MarketplaceBuilder:
    """Creates valid rows through the services with unique defaults"""

    def __init__(self, db):
        self.db = db
        self._ids = itertools.count(1)

    def guest(self, **overrides):
        n = next(self._ids)
        data = {
            "name": f"Guest {n}",
            "email": f"guest{n}@example.com",
            "password": "secret123",
            "country": "Germany",
        }
        data.update(overrides)
        return IdentityService(self.db).create_guest(GuestCreate(**data))

    def host(self, guest=None, **overrides):
        guest = guest or self.guest()
        data = {"rating": 4.5, "verified": True, "stars": 5}
        data.update(overrides)
        return IdentityService(self.db).promote_to_host(guest.id, HostCreate(**data))

    def admin(self, guest=None):
        guest = guest or self.guest()
        return IdentityService(self.db).create_travel_admin(
            TravelAdminCreate(
                name=guest.name, email=f"admin.{guest.email}", guest_id=guest.id
            )
        )

    def city(self, name="Berlin", country="Germany"):
        return GeographyService(self.db).create_city(
            CityCreate(city_name=name, country=country)
        )

    def location(self, city=None):
        city = city or self.city()
        return GeographyService(self.db).create_location(
            LocationCreate(city_id=city.id, country=city.country, part_of_city="Mitte")
        )

    def rental(self, host=None, location=None, **overrides):
        host = host or self.host()
        location = location or self.location()
        data = {
            "host_id": host.id,
            "location_id": location.id,
            "property_type": "Apartment",
            "max_guests": 4,
            "rate_per_person": 120.0,
        }
        data.update(overrides)
        return PropertyService(self.db).create_rental(RentalCreate(**data))

    def room(self, rental=None, **overrides):
        rental = rental or self.rental()
        data = {
            "vacation_rental_id": rental.id,
            "room_type": "Deluxe",
            "price_per_night": 150.0,
            "available_from": date(2024, 1, 1),
            "available_to": date(2024, 12, 31),
        }
        data.update(overrides)
        return PropertyService(self.db).add_room(RoomCreate(**data))

    def amenity(self, name="WiFi"):
        return PropertyService(self.db).create_amenity(AmenityCreate(amenity_name=name))

    def policy(self, name="Flexible", description="Full refund up to 1 day before arrival"):
        return PropertyService(self.db).create_policy(
            PolicyCreate(policy_name=name, description=description)
        )

    def booking(self, guest=None, room=None, **overrides):
        guest = guest or self.guest()
        room = room or self.room()
        data = {
            "guest_id": guest.id,
            "room_id": room.id,
            "check_in_date": date(2024, 9, 1),
            "check_out_date": date(2024, 9, 7),
            "total_price": 900.0,
        }
        data.update(overrides)
        return BookingService(self.db).create_booking(BookingCreate(**data))


@pytest.fixture
def build(db_session):
    return MarketplaceBuilder(db_session)
