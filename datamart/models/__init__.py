from .guest import Guest
from .host import Host
from .travel_admin import TravelAdmin
from .social_network import SocialNetwork, GuestSocialNetwork
from .login_history import LoginHistory
from .notification import Notification
from .city import City
from .location import Location
from .vacation_rental import VacationRental
from .room import Room
from .amenity import Amenity, VacationRentalAmenity
from .cancellation_policy import CancellationPolicy, VacationRentalPolicy
from .booking import Booking
from .transaction import Transaction
from .reservation import Reservation
from .review import Review
from .customer_service import CustomerService
from .event import Event
from .promotion import Promotion
from .enums import PaymentStatus, PaymentMethod, TransactionType, ReviewerType


__all__ = [
    "Guest",
    "Host",
    "TravelAdmin",
    "SocialNetwork",
    "GuestSocialNetwork",
    "LoginHistory",
    "Notification",
    "City",
    "Location",
    "VacationRental",
    "Room",
    "Amenity",
    "VacationRentalAmenity",
    "CancellationPolicy",
    "VacationRentalPolicy",
    "Booking",
    "Transaction",
    "Reservation",
    "Review",
    "CustomerService",
    "Event",
    "Promotion",
    "PaymentStatus",
    "PaymentMethod",
    "TransactionType",
    "ReviewerType",
]
