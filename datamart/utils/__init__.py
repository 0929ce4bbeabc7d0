from .security import verify_password, get_password_hash
from .constants import AppConstants, ResponseMessages, ErrorCodes
from .validation import ValidationHelpers, CustomValidators

__all__ = [
    "verify_password", "get_password_hash",
    "AppConstants", "ResponseMessages", "ErrorCodes",
    "ValidationHelpers", "CustomValidators",
]
