import re
from typing import Optional
from datetime import date


class ValidationHelpers:
    @staticmethod
    def validate_email(email: str) -> bool:
        """Validate email format"""
        pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
        return re.match(pattern, email) is not None

    @staticmethod
    def validate_phone(phone: str) -> bool:
        """Validate phone number format (flexible)"""
        if not phone:
            return True  # Optional field

        # Remove all non-numeric characters
        digits_only = re.sub(r"\D", "", phone)

        # Check if it's a reasonable length (7-15 digits)
        return 7 <= len(digits_only) <= 15

    @staticmethod
    def validate_date_window(
        start: Optional[date], end: Optional[date], strict: bool = False
    ) -> bool:
        """
        Validate that a window opens before it closes.

        Open-ended windows (either side missing) are accepted. With strict=True
        the window must span at least one day, as a stay does.
        """
        if start is None or end is None:
            return True
        return start < end if strict else start <= end


class CustomValidators:
    """Reusable pydantic validator bodies"""

    @staticmethod
    def email(value: str) -> str:
        value = value.strip()
        if not ValidationHelpers.validate_email(value):
            raise ValueError("Invalid email address")
        return value

    @staticmethod
    def phone(value: Optional[str]) -> Optional[str]:
        if value is not None and not ValidationHelpers.validate_phone(value):
            raise ValueError("Phone number must contain 7-15 digits")
        return value
