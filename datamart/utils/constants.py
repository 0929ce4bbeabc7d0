class ResponseMessages:
    """Standard API response messages"""

    # Success messages
    SUCCESS = "Success"
    CREATED = "Created successfully"
    UPDATED = "Updated successfully"
    DELETED = "Deleted successfully"


# Application Constants
class AppConstants:
    # Validation Limits
    MIN_HOST_RATING = 0.0
    MAX_HOST_RATING = 5.0
    MIN_STARS = 1
    MAX_STARS = 5
    MIN_REVIEW_RATING = 1
    MAX_REVIEW_RATING = 5
    MAX_DISCOUNT_PERCENTAGE = 100
    MAX_PHONE_LENGTH = 25


class ErrorCodes:
    INTERNAL_ERROR = "INTERNAL_ERROR"
