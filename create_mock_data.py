"""
Mock Data Generator for the Rental Datamart
Run this script to populate your development database with random marketplace data.

Usage:
    python create_mock_data.py [--guests 30] [--seed 42] [--clear]

Every row goes through the service layer, so generated data obeys the same
rules as data written through the API.
"""

import logging
import random
from datetime import date, timedelta

from faker import Faker
from sqlalchemy.orm import Session

from datamart.database import SessionLocal, init_db
from datamart.database_reset import reset_database
from datamart.models import PaymentStatus, PaymentMethod, TransactionType, ReviewerType
from datamart.schemas.guest import GuestCreate, HostCreate, TravelAdminCreate
from datamart.schemas.property import (
    CityCreate,
    LocationCreate,
    RentalCreate,
    RoomCreate,
    AmenityCreate,
    PolicyCreate,
    PromotionCreate,
)
from datamart.schemas.booking import BookingCreate, TransactionCreate, ReservationCreate
from datamart.schemas.feedback import ReviewCreate, CustomerServiceCreate
from datamart.services import (
    IdentityService,
    SocialService,
    GeographyService,
    PropertyService,
    BookingService,
    FeedbackService,
    PromotionService,
)

logger = logging.getLogger(__name__)

PROPERTY_TYPES = ["Apartment", "House", "Loft", "Villa", "Studio", "Cabin"]
ROOM_TYPES = ["Standard", "Deluxe", "Suite", "Single", "Double"]
AMENITIES = ["WiFi", "Air Conditioning", "Heating", "Parking", "Swimming Pool", "Kitchen"]
POLICIES = [
    ("Flexible", "Full refund up to 1 day before arrival"),
    ("Moderate", "Full refund up to 5 days before arrival"),
    ("Strict", "50% refund up to 7 days before arrival"),
    ("Non-refundable", "No refund after booking"),
]
CONTACT_METHODS = ["Phone", "Email", "Chat"]


class MockDataGenerator:
    def __init__(self, db: Session, seed: int = None):
        self.db = db
        self.fake = Faker()
        self.random = random.Random(seed)
        if seed is not None:
            Faker.seed(seed)

        self.identity = IdentityService(db)
        self.social = SocialService(db)
        self.geography = GeographyService(db)
        self.properties = PropertyService(db)
        self.bookings = BookingService(db, enforce_transitions=False)
        self.feedback = FeedbackService(db)
        self.promotions = PromotionService(db)

        self.guests = []
        self.hosts = []
        self.admins = []
        self.rooms = []
        self.created = {}

    def _count(self, key: str, amount: int = 1):
        self.created[key] = self.created.get(key, 0) + amount

    def create_guests(self, count: int = 30):
        logger.info(f"Creating {count} guests...")
        for _ in range(count):
            guest = self.identity.create_guest(
                GuestCreate(
                    name=self.fake.name(),
                    email=self.fake.unique.email(),
                    password="password123",
                    phone_number=self.fake.msisdn(),
                    street=self.fake.street_address(),
                    city=self.fake.city(),
                    country=self.fake.country(),
                    gdpr_acknowledgement=self.random.random() < 0.8,
                    language_settings=self.random.choice(["English", "French", "German"]),
                )
            )
            self.guests.append(guest)
            self.social.record_login(guest.id, ip_address=self.fake.ipv4())
            self.social.notify_guest(guest.id, "Welcome to our service!")
        self._count("guests", count)

    def create_hosts(self, share: float = 0.3):
        """Promote a share of the guests; later hosts may be referred by earlier ones"""
        candidates = self.random.sample(self.guests, max(1, int(len(self.guests) * share)))
        logger.info(f"Promoting {len(candidates)} guests to hosts...")
        for guest in candidates:
            referrer = self.random.choice(self.hosts) if self.hosts and self.random.random() < 0.4 else None
            host = self.identity.promote_to_host(
                guest.id,
                HostCreate(
                    rating=round(self.random.uniform(3.0, 5.0), 1),
                    verified=self.random.random() < 0.7,
                    host_since=self.fake.date_between(start_date="-5y", end_date="today"),
                    stars=self.random.randint(1, 5),
                    external_reviews=self.fake.sentence(),
                    referred_by_host_id=referrer.id if referrer else None,
                ),
            )
            self.hosts.append(host)
        self._count("hosts", len(candidates))

    def create_admins(self, count: int = 3):
        logger.info(f"Creating {count} travel administrators...")
        for guest in self.random.sample(self.guests, min(count, len(self.guests))):
            admin = self.identity.create_travel_admin(
                TravelAdminCreate(
                    name=guest.name,
                    email=guest.email,
                    phone_number=guest.phone_number,
                    guest_id=guest.id,
                )
            )
            self.admins.append(admin)
        self._count("travel_admins", len(self.admins))

    def create_catalog(self):
        """Amenities, cancellation policies, cities and one location per host"""
        amenities = [
            self.properties.create_amenity(AmenityCreate(amenity_name=name))
            for name in AMENITIES
        ]
        policies = [
            self.properties.create_policy(PolicyCreate(policy_name=name, description=text))
            for name, text in POLICIES
        ]
        cities = [
            self.geography.create_city(
                CityCreate(city_name=self.fake.unique.city(), country=self.fake.country())
            )
            for _ in range(5)
        ]

        logger.info(f"Creating rentals for {len(self.hosts)} hosts...")
        for host in self.hosts:
            city = self.random.choice(cities)
            location = self.geography.create_location(
                LocationCreate(
                    city_id=city.id,
                    country=city.country,
                    part_of_city=self.fake.word().title(),
                    address=self.fake.street_address(),
                    email=self.fake.email(),
                )
            )
            rental = self.properties.create_rental(
                RentalCreate(
                    host_id=host.id,
                    location_id=location.id,
                    property_type=self.random.choice(PROPERTY_TYPES),
                    description=self.fake.paragraph(nb_sentences=2),
                    max_guests=self.random.randint(1, 8),
                    rate_per_person=round(self.random.uniform(40, 250), 2),
                    number_of_beds=self.random.randint(1, 4),
                    calendar_availability="Available",
                )
            )
            for amenity in self.random.sample(amenities, 3):
                self.properties.assign_amenity(rental.id, amenity.id)
            self.properties.assign_policy(rental.id, self.random.choice(policies).id)

            start = self.fake.date_between(start_date="-1y", end_date="today")
            for _ in range(self.random.randint(1, 3)):
                room = self.properties.add_room(
                    RoomCreate(
                        vacation_rental_id=rental.id,
                        room_type=self.random.choice(ROOM_TYPES),
                        price_per_night=round(self.random.uniform(50, 300), 2),
                        available_from=start,
                        available_to=start + timedelta(days=180),
                    )
                )
                self.rooms.append(room)

            if self.random.random() < 0.5:
                self.promotions.create_promotion(
                    PromotionCreate(
                        vacation_rental_id=rental.id,
                        discount_percentage=self.random.choice([5.0, 10.0, 15.0, 20.0]),
                        start_date=start,
                        end_date=start + timedelta(days=30),
                    )
                )
        self._count("rooms", len(self.rooms))

    def create_bookings(self, count: int = 40):
        logger.info(f"Creating {count} bookings with their ledger...")
        for _ in range(count):
            guest = self.random.choice(self.guests)
            room = self.random.choice(self.rooms)
            check_in = room.available_from + timedelta(days=self.random.randint(0, 150))
            nights = self.random.randint(1, 14)
            total = round(room.price_per_night * nights, 2)

            booking = self.bookings.create_booking(
                BookingCreate(
                    guest_id=guest.id,
                    room_id=room.id,
                    check_in_date=check_in,
                    check_out_date=check_in + timedelta(days=nights),
                    total_price=total,
                    cancellation_deadline=check_in - timedelta(days=3),
                    host_payout=round(total * 0.85, 2),
                )
            )

            outcome = self.random.random()
            if outcome < 0.6:
                self._pay(booking, guest.id, total)
                self.bookings.update_payment_status(booking.id, PaymentStatus.PAID)
            elif outcome < 0.8:
                self._pay(booking, guest.id, total)
                refund = round(total * 0.5, 2)
                self.bookings.record_transaction(
                    TransactionCreate(
                        guest_id=guest.id,
                        booking_id=booking.id,
                        amount=refund,
                        payment_method=PaymentMethod.BANK_TRANSFER,
                        transaction_type=TransactionType.REFUND,
                        description="Refund after cancellation",
                    )
                )
                self.bookings.update_payment_status(
                    booking.id,
                    PaymentStatus.CANCELLED,
                    date_of_cancellation=min(check_in, date.today()),
                    cancellation_refund=refund,
                )

            if self.admins and self.random.random() < 0.5:
                self.bookings.create_reservation(
                    ReservationCreate(
                        booking_id=booking.id, admin_id=self.random.choice(self.admins).id
                    )
                )
            if self.random.random() < 0.6:
                self.feedback.add_review(
                    ReviewCreate(
                        booking_id=booking.id,
                        reviewer_id=guest.id,
                        reviewer_type=ReviewerType.GUEST,
                        rating=self.random.randint(1, 5),
                        comment=self.fake.sentence(),
                    )
                )
            if self.random.random() < 0.2:
                self.feedback.open_ticket(
                    CustomerServiceCreate(
                        booking_id=booking.id,
                        issue_description=self.fake.sentence(),
                        contact_method=self.random.choice(CONTACT_METHODS),
                    )
                )
        self._count("bookings", count)

    def _pay(self, booking, guest_id: int, amount: float):
        self.bookings.record_transaction(
            TransactionCreate(
                guest_id=guest_id,
                booking_id=booking.id,
                amount=amount,
                payment_method=self.random.choice(list(PaymentMethod)),
                transaction_type=TransactionType.PAYMENT,
                description="Booking for vacation rental",
            )
        )

    def generate_all_data(self, guests: int = 30, bookings: int = 40) -> dict:
        logger.info("Starting mock data generation...")
        self.create_guests(guests)
        self.create_hosts()
        self.create_admins()
        self.create_catalog()
        self.create_bookings(bookings)
        logger.info(f"Mock data generation complete: {self.created}")
        return self.created


def main(argv=None):
    """Main function to run the mock data generator"""
    import argparse

    parser = argparse.ArgumentParser(description="Rental Datamart mock data generator")
    parser.add_argument("--guests", type=int, default=30, help="Number of guests")
    parser.add_argument("--bookings", type=int, default=40, help="Number of bookings")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--clear", action="store_true", help="Drop and rebuild all tables first"
    )
    args = parser.parse_args(argv)

    if args.clear:
        reset_database(load_baseline=False)
    else:
        init_db()

    db = SessionLocal()
    try:
        generator = MockDataGenerator(db, seed=args.seed)
        generator.generate_all_data(guests=args.guests, bookings=args.bookings)
    except Exception as e:
        logger.error(f"Error generating mock data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    main()
