from .guest import (
    GuestCreate,
    GuestUpdate,
    GuestResponse,
    HostCreate,
    HostUpdate,
    HostResponse,
    ReferralUpdate,
    TravelAdminCreate,
    TravelAdminResponse,
    SocialNetworkCreate,
    SocialNetworkResponse,
    GuestSocialNetworkCreate,
    GuestSocialNetworkResponse,
    LoginRecord,
    LoginHistoryResponse,
    NotificationCreate,
    NotificationResponse,
)
from .property import (
    CityCreate,
    CityResponse,
    LocationCreate,
    LocationResponse,
    RentalCreate,
    RentalUpdate,
    RentalResponse,
    RoomCreate,
    RoomResponse,
    AmenityCreate,
    AmenityResponse,
    PolicyCreate,
    PolicyUpdate,
    PolicyResponse,
    PromotionCreate,
    PromotionResponse,
)
from .booking import (
    BookingCreate,
    BookingResponse,
    PaymentStatusUpdate,
    TransactionCreate,
    TransactionResponse,
    ReservationCreate,
    ReservationResponse,
)
from .feedback import (
    ReviewCreate,
    ReviewResponse,
    CustomerServiceCreate,
    CustomerServiceResponse,
    TicketResolution,
    EventCreate,
    EventResponse,
)
from .common import SuccessResponse, ResponseFactory

__all__ = [
    # Identity
    "GuestCreate",
    "GuestUpdate",
    "GuestResponse",
    "HostCreate",
    "HostUpdate",
    "HostResponse",
    "ReferralUpdate",
    "TravelAdminCreate",
    "TravelAdminResponse",
    "SocialNetworkCreate",
    "SocialNetworkResponse",
    "GuestSocialNetworkCreate",
    "GuestSocialNetworkResponse",
    "LoginRecord",
    "LoginHistoryResponse",
    "NotificationCreate",
    "NotificationResponse",
    # Property
    "CityCreate",
    "CityResponse",
    "LocationCreate",
    "LocationResponse",
    "RentalCreate",
    "RentalUpdate",
    "RentalResponse",
    "RoomCreate",
    "RoomResponse",
    "AmenityCreate",
    "AmenityResponse",
    "PolicyCreate",
    "PolicyUpdate",
    "PolicyResponse",
    "PromotionCreate",
    "PromotionResponse",
    # Booking
    "BookingCreate",
    "BookingResponse",
    "PaymentStatusUpdate",
    "TransactionCreate",
    "TransactionResponse",
    "ReservationCreate",
    "ReservationResponse",
    # Feedback
    "ReviewCreate",
    "ReviewResponse",
    "CustomerServiceCreate",
    "CustomerServiceResponse",
    "TicketResolution",
    "EventCreate",
    "EventResponse",
    # Common
    "SuccessResponse",
    "ResponseFactory",
]
