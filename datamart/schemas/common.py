from datetime import datetime, timezone
from typing import Generic, Optional
from ..utils.constants import ResponseMessages
from pydantic import BaseModel, Field
from typing import TypeVar

T = TypeVar("T")


class BaseResponse(BaseModel, Generic[T]):
    """Base response model for all API responses"""

    success: bool = True
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: Optional[T] = None


class SuccessResponse(BaseResponse[T]):
    """Standard success response with typed data"""

    success: bool = True


class ResponseFactory:
    """Factory for creating consistent API responses"""

    @staticmethod
    def success(
        data: T = None, message: str = ResponseMessages.SUCCESS
    ) -> SuccessResponse[T]:
        return SuccessResponse(data=data, message=message)

    @staticmethod
    def created(
        data: T = None, message: str = ResponseMessages.CREATED
    ) -> SuccessResponse[T]:
        return SuccessResponse(data=data, message=message)
