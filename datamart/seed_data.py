"""
Baseline dataset
Small, fixed marketplace used by the reset operation, demos and tests.
"""

import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from .models import (
    Guest,
    Host,
    TravelAdmin,
    SocialNetwork,
    GuestSocialNetwork,
    LoginHistory,
    Notification,
    City,
    Location,
    VacationRental,
    Room,
    Amenity,
    VacationRentalAmenity,
    CancellationPolicy,
    VacationRentalPolicy,
    Booking,
    Transaction,
    Reservation,
    Review,
    CustomerService,
    Event,
    Promotion,
    PaymentStatus,
    PaymentMethod,
    TransactionType,
    ReviewerType,
)
from .utils.security import get_password_hash

logger = logging.getLogger(__name__)

GUESTS = [
    ("Jack Haddad", "jack.haddad@example.com", "96171234567", "Hamra Street", "Beirut", "", "Lebanon", "French"),
    ("Ivana Horvat", "ivana.horvat@example.hr", "385912345678", "Ulica Kralja Zvonimira 456", "Zagreb", "", "Croatia", "Croatian"),
    ("Lukas Schneider", "lukas.schneider@example.de", "4917612345678", "Eichenstrasse 789", "Berlin", "", "Germany", "German"),
    ("Giovanni Rossi", "giovanni.rossi@example.it", "390123456789", "101 Maple St", "Rome", "", "Italy", "Italian"),
    ("Florian Berger", "florian.berger@example.at", "436641234567", "Piniengasse 202", "Wien", "", "Austria", "German"),
]

HOSTS = [
    (4.5, date(2024, 1, 1), 5, "Great reviews from external sites."),
    (4.0, date(2025, 3, 15), 4, "Positive feedback from external platforms."),
    (4.8, date(2023, 11, 20), 5, "Outstanding reviews."),
    (4.2, date(2024, 6, 25), 4, "Excellent ratings on various platforms."),
    (4.7, date(2025, 7, 10), 5, "Highly recommended by guests."),
]

SOCIAL_NETWORKS = [
    ("Facebook", "https://www.facebook.com"),
    ("Twitter", "https://www.twitter.com"),
    ("Instagram", "https://www.instagram.com"),
    ("LinkedIn", "https://www.linkedin.com"),
    ("WhatsApp", "https://www.whatsapp.com"),
]

CITIES = [
    ("Beirut", "Lebanon", "Hamra", "Hamra Street, Beirut", "info@beirut.lb"),
    ("Zagreb", "Croatia", "Donjigrad", "Ulica Kralja Zvonimira 456, Zagreb", "info@zagreb.hr"),
    ("Berlin", "Germany", "Mitte", "Eichenstrasse 789, Berlin", "info@berlin.de"),
    ("Rome", "Italy", "Centrostorico", "101 Maple St, Rome", "info@rome.it"),
    ("Wien", "Austria", "Innerestadt", "Piniengasse 202, Wien", "info@wien.at"),
]

RENTALS = [
    ("Apartment", "Beautiful luxury apartment in the city center.", 4, 120.00, 2, "500m", "200m", "300m"),
    ("House", "Spacious family house with a garden.", 6, 150.00, 3, "1km", "500m", "700m"),
    ("Loft", "Modern loft close to the river.", 2, 95.00, 1, "5km", "100m", "400m"),
    ("Villa", "Historic villa with a private courtyard.", 8, 210.00, 4, "30km", "300m", "150m"),
    ("Studio", "Compact studio near the old town.", 2, 70.00, 1, "40km", "50m", "250m"),
]

ROOMS = [
    ("Deluxe", 150.00, date(2024, 1, 1), date(2024, 3, 31)),
    ("Standard", 120.00, date(2024, 4, 1), date(2024, 6, 30)),
    ("Deluxe", 180.00, date(2024, 7, 1), date(2024, 9, 30)),
    ("Suite", 250.00, date(2024, 10, 1), date(2024, 12, 31)),
    ("Standard", 90.00, date(2024, 2, 1), date(2024, 5, 31)),
]

AMENITIES = [
    ("WiFi", "High-speed internet access"),
    ("Air Conditioning", "Room equipped with air conditioning"),
    ("Heating", "Central heating system"),
    ("Parking", "Free parking space available"),
    ("Swimming Pool", "Access to a swimming pool"),
]

POLICIES = [
    ("Flexible", "Full refund up to 1 day before arrival"),
    ("Moderate", "Full refund up to 5 days before arrival"),
    ("Strict", "50% refund up to 7 days before arrival"),
    ("Super Strict", "50% refund up to 14 days before arrival"),
    ("Non-refundable", "No refund after booking"),
]

BOOKINGS = [
    (date(2024, 9, 1), date(2024, 9, 7), 900.00, PaymentStatus.PENDING, date(2024, 8, 29), 800.00, 850.00, "Beirut Energy Week", "Regional conference in Beirut"),
    (date(2024, 9, 5), date(2024, 9, 10), 600.00, PaymentStatus.PAID, date(2024, 9, 3), 550.00, 580.00, "ZeGeVege Festival", "Celebration of sustainable living in Zagreb"),
    (date(2024, 9, 10), date(2024, 9, 15), 750.00, PaymentStatus.PENDING, date(2024, 9, 8), 700.00, 725.00, "Berlin Marathon", "Running Marathon in Berlin"),
    (date(2024, 9, 12), date(2024, 9, 18), 1500.00, PaymentStatus.PENDING, date(2024, 9, 10), 1400.00, 1450.00, "Rome Film Festival", "Film festival in Rome"),
    (date(2024, 9, 15), date(2024, 9, 20), 450.00, PaymentStatus.PAID, date(2024, 9, 13), 400.00, 425.00, "Vienna Wine Festival", "Austrian Wine Festival in Vienna"),
]

PAYMENT_METHODS = [
    PaymentMethod.CREDIT_CARD_VISA,
    PaymentMethod.PAYPAL,
    PaymentMethod.CREDIT_CARD_MASTERCARD,
    PaymentMethod.BANK_TRANSFER,
    PaymentMethod.CREDIT_CARD_AMEX,
]

REVIEWS = [
    (ReviewerType.GUEST, 5, "Fantastique experience, je reviendrai surement!"),
    (ReviewerType.HOST, 4, "Dobar gost, ali bilo je malo buke."),
    (ReviewerType.GUEST, 5, "Wunderbare Erfahrung, sehr sauber!"),
    (ReviewerType.HOST, 3, "Soggiorno piacevole, ma il Wi-Fi era lento."),
    (ReviewerType.GUEST, 4, "Schoener Aufenthalt, aber etwas laut."),
]

SUPPORT_TICKETS = [
    ("Late check-in", "Offered late check-in", "Phone"),
    ("WiFi not working", "Fixed WiFi issue", "Email"),
    ("Room not clean", "Sent cleaning staff", "Chat"),
    ("No hot water", "Repaired hot water system", "Phone"),
    ("Key not working", "Provided new key", "Email"),
]

DISCOUNTS = [10.0, 15.0, 12.5, 20.0, 8.0]


def load_baseline(db: Session) -> dict:
    """
    Insert the baseline rows, parents before children, and commit once.

    Row i of every child table hangs off row i of its parents, so the
    dataset is a set of five parallel marketplace slices.
    """
    logger.info("Loading baseline marketplace data...")

    guests = [
        Guest(
            name=name,
            email=email,
            password_hash=get_password_hash(f"passFor{name.split()[0]}"),
            phone_number=phone,
            profile_picture=f"{name.split()[0].lower()}_profile.jpg",
            street=street,
            city=city,
            state=state,
            country=country,
            gdpr_acknowledgement=True,
            language_settings=language,
        )
        for name, email, phone, street, city, state, country, language in GUESTS
    ]
    db.add_all(guests)
    db.flush()

    hosts = [
        Host(
            guest_id=guest.id,
            rating=rating,
            verified=True,
            host_since=since,
            stars=stars,
            external_reviews=reviews,
        )
        for guest, (rating, since, stars, reviews) in zip(guests, HOSTS)
    ]
    admins = [
        TravelAdmin(
            name=guest.name,
            email=guest.email,
            phone_number=f"+{guest.phone_number}",
            guest_id=guest.id,
        )
        for guest in guests
    ]
    networks = [SocialNetwork(network_name=n, url=u) for n, u in SOCIAL_NETWORKS]
    cities = [City(city_name=c[0], country=c[1]) for c in CITIES]
    amenities = [Amenity(amenity_name=n, description=d) for n, d in AMENITIES]
    policies = [CancellationPolicy(policy_name=n, description=d) for n, d in POLICIES]
    db.add_all(hosts + admins + networks + cities + amenities + policies)
    db.flush()

    for i, guest in enumerate(guests):
        handle = guest.email.split("@")[0]
        db.add(
            GuestSocialNetwork(
                guest_id=guest.id,
                network_id=networks[i].id,
                profile_url=f"{networks[i].url}/{handle}",
            )
        )
        db.add(
            LoginHistory(
                guest_id=guest.id,
                login_timestamp=datetime(2024, 9, 1, 8 + i, 0),
                ip_address=f"192.168.1.{i + 1}",
            )
        )
        db.add(
            Notification(
                guest_id=guest.id,
                content="Welcome to our service!",
                timestamp=datetime(2024, 9, 1, 8 + i, 10),
            )
        )

    locations = [
        Location(
            city_id=city.id,
            country=country,
            part_of_city=part,
            address=address,
            phone_number=guests[i].phone_number,
            email=email,
        )
        for i, (city, (_, country, part, address, email)) in enumerate(zip(cities, CITIES))
    ]
    db.add_all(locations)
    db.flush()

    rentals = [
        VacationRental(
            host_id=host.id,
            location_id=location.id,
            property_type=kind,
            description=description,
            max_guests=max_guests,
            rate_per_person=rate,
            own_bathroom=True,
            pet_friendly=True,
            free_parking=True,
            number_of_beds=beds,
            calendar_availability="Available",
            proximity_to_beach=beach,
            proximity_to_shops=shops,
            proximity_to_sightseeing=sights,
        )
        for host, location, (kind, description, max_guests, rate, beds, beach, shops, sights) in zip(
            hosts, locations, RENTALS
        )
    ]
    db.add_all(rentals)
    db.flush()

    rooms = [
        Room(
            vacation_rental_id=rental.id,
            room_type=kind,
            price_per_night=price,
            available_from=start,
            available_to=end,
        )
        for rental, (kind, price, start, end) in zip(rentals, ROOMS)
    ]
    for i, rental in enumerate(rentals):
        db.add(VacationRentalAmenity(vacation_rental_id=rental.id, amenity_id=amenities[i].id))
        db.add(VacationRentalPolicy(vacation_rental_id=rental.id, policy_id=policies[i].id))
        db.add(
            Promotion(
                vacation_rental_id=rental.id,
                discount_percentage=DISCOUNTS[i],
                start_date=BOOKINGS[i][0],
                end_date=BOOKINGS[i][1],
            )
        )
    db.add_all(rooms)
    db.flush()

    bookings = []
    for guest, room, row in zip(guests, rooms, BOOKINGS):
        check_in, check_out, price, status, deadline, refund, payout, event, description = row
        bookings.append(
            Booking(
                guest_id=guest.id,
                room_id=room.id,
                booking_date=datetime(2024, 8, 1),
                check_in_date=check_in,
                check_out_date=check_out,
                total_price=price,
                payment_status=status,
                length_of_stay=(check_out - check_in).days,
                cancellation_deadline=deadline,
                cancellation_refund=refund,
                host_payout=payout,
                event_name=event,
                start_date=check_in,
                end_date=check_out,
                description=description,
            )
        )
    db.add_all(bookings)
    db.flush()

    for i, booking in enumerate(bookings):
        db.add(
            Transaction(
                guest_id=booking.guest_id,
                booking_id=booking.id,
                amount=booking.total_price,
                transaction_date=datetime.combine(booking.check_in_date, datetime.min.time()),
                payment_method=PAYMENT_METHODS[i],
                transaction_type=TransactionType.PAYMENT,
                description="Booking for vacation rental",
            )
        )
        db.add(
            Reservation(
                booking_id=booking.id,
                admin_id=admins[i].id,
                date_of_reservation=booking.check_in_date,
                payment_status=booking.payment_status,
                length_of_stay=booking.length_of_stay,
                cancellation_policy=POLICIES[i][0],
                refund_policy=POLICIES[i][1],
            )
        )
        reviewer_type, rating, comment = REVIEWS[i]
        db.add(
            Review(
                booking_id=booking.id,
                reviewer_id=booking.guest_id,
                reviewer_type=reviewer_type,
                rating=rating,
                comment=comment,
                review_date=booking.check_out_date,
            )
        )
        issue, resolution, channel = SUPPORT_TICKETS[i]
        db.add(
            CustomerService(
                booking_id=booking.id,
                issue_description=issue,
                resolution=resolution,
                contact_method=channel,
                resolution_date=booking.check_in_date,
            )
        )
        db.add(
            Event(
                booking_id=booking.id,
                event_name=booking.event_name,
                start_date=booking.start_date,
                end_date=booking.end_date,
                description=booking.description,
            )
        )

    db.commit()

    summary = {
        "guests": len(guests),
        "hosts": len(hosts),
        "vacation_rentals": len(rentals),
        "rooms": len(rooms),
        "bookings": len(bookings),
    }
    logger.info(f"Baseline loaded: {summary}")
    return summary
