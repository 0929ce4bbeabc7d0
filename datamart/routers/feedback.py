from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..services.feedback_service import FeedbackService
from ..schemas.feedback import (
    ReviewCreate,
    ReviewResponse,
    CustomerServiceCreate,
    CustomerServiceResponse,
    TicketResolution,
    EventCreate,
    EventResponse,
)
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import handle_service_errors, serialize, serialize_all
from ..utils.constants import ResponseMessages

router = APIRouter(tags=["feedback"])


@router.post(
    "/reviews",
    response_model=SuccessResponse[ReviewResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def add_review(review_data: ReviewCreate, db: Session = Depends(get_db)):
    review = FeedbackService(db).add_review(review_data)
    return ResponseFactory.created(data=serialize(ReviewResponse, review))


@router.get(
    "/bookings/{booking_id}/reviews",
    response_model=SuccessResponse[List[ReviewResponse]],
)
@handle_service_errors
async def get_reviews(booking_id: int, db: Session = Depends(get_db)):
    reviews = FeedbackService(db).get_reviews(booking_id)
    return ResponseFactory.success(data=serialize_all(ReviewResponse, reviews))


@router.get(
    "/guests/{guest_id}/reviews",
    response_model=SuccessResponse[List[ReviewResponse]],
)
@handle_service_errors
async def get_reviews_by_guest(guest_id: int, db: Session = Depends(get_db)):
    reviews = FeedbackService(db).get_reviews_by_guest(guest_id)
    return ResponseFactory.success(data=serialize_all(ReviewResponse, reviews))


# Support tickets


@router.post(
    "/tickets",
    response_model=SuccessResponse[CustomerServiceResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def open_ticket(ticket_data: CustomerServiceCreate, db: Session = Depends(get_db)):
    ticket = FeedbackService(db).open_ticket(ticket_data)
    return ResponseFactory.created(data=serialize(CustomerServiceResponse, ticket))


@router.put(
    "/tickets/{ticket_id}/resolve",
    response_model=SuccessResponse[CustomerServiceResponse],
)
@handle_service_errors
async def resolve_ticket(
    ticket_id: int, resolution: TicketResolution, db: Session = Depends(get_db)
):
    ticket = FeedbackService(db).resolve_ticket(
        ticket_id, resolution.resolution, resolution.resolution_date
    )
    return ResponseFactory.success(
        data=serialize(CustomerServiceResponse, ticket),
        message=ResponseMessages.UPDATED,
    )


@router.get(
    "/bookings/{booking_id}/tickets",
    response_model=SuccessResponse[List[CustomerServiceResponse]],
)
@handle_service_errors
async def get_tickets(
    booking_id: int,
    open_only: bool = Query(False, description="Only tickets without a resolution date"),
    db: Session = Depends(get_db),
):
    tickets = FeedbackService(db).get_tickets(booking_id, open_only=open_only)
    return ResponseFactory.success(data=serialize_all(CustomerServiceResponse, tickets))


# Events


@router.post(
    "/events",
    response_model=SuccessResponse[EventResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def add_event(event_data: EventCreate, db: Session = Depends(get_db)):
    event = FeedbackService(db).add_event(event_data)
    return ResponseFactory.created(data=serialize(EventResponse, event))


@router.get(
    "/bookings/{booking_id}/events",
    response_model=SuccessResponse[List[EventResponse]],
)
@handle_service_errors
async def get_events(booking_id: int, db: Session = Depends(get_db)):
    events = FeedbackService(db).get_events(booking_id)
    return ResponseFactory.success(data=serialize_all(EventResponse, events))
