from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from ..models.enums import ReviewerType
from ..utils.constants import AppConstants


class ReviewCreate(BaseModel):
    booking_id: int
    reviewer_id: int = Field(
        ..., description="Guest id of the reviewer, also for host reviews"
    )
    reviewer_type: ReviewerType
    rating: Optional[int] = Field(
        None, ge=AppConstants.MIN_REVIEW_RATING, le=AppConstants.MAX_REVIEW_RATING
    )
    comment: Optional[str] = None
    review_date: Optional[date] = None


class ReviewResponse(ReviewCreate):
    id: int

    class Config:
        from_attributes = True


class CustomerServiceCreate(BaseModel):
    booking_id: int
    issue_description: str = Field(..., min_length=1)
    contact_method: Optional[str] = Field(None, max_length=255)


class TicketResolution(BaseModel):
    resolution: str = Field(..., min_length=1)
    resolution_date: Optional[date] = None


class CustomerServiceResponse(CustomerServiceCreate):
    id: int
    resolution: Optional[str] = None
    resolution_date: Optional[date] = None

    class Config:
        from_attributes = True


class EventCreate(BaseModel):
    booking_id: int
    event_name: str = Field(..., min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None


class EventResponse(EventCreate):
    id: int

    class Config:
        from_attributes = True
