from .base import (
    DatamartServiceError,
    NotFoundError,
    BusinessRuleViolation,
    InvalidStatusTransition,
    IntegrityViolation,
    UniqueViolation,
    ForeignKeyViolation,
    NotNullViolation,
    EnumViolation,
    CheckViolation,
    ReferralCycleViolation,
)
from .identity_service import IdentityService
from .social_service import SocialService
from .geography_service import GeographyService
from .property_service import PropertyService
from .booking_service import BookingService
from .feedback_service import FeedbackService
from .promotion_service import PromotionService
from .reporting_service import ReportingService

__all__ = [
    "DatamartServiceError",
    "NotFoundError",
    "BusinessRuleViolation",
    "InvalidStatusTransition",
    "IntegrityViolation",
    "UniqueViolation",
    "ForeignKeyViolation",
    "NotNullViolation",
    "EnumViolation",
    "CheckViolation",
    "ReferralCycleViolation",
    "IdentityService",
    "SocialService",
    "GeographyService",
    "PropertyService",
    "BookingService",
    "FeedbackService",
    "PromotionService",
    "ReportingService",
]
