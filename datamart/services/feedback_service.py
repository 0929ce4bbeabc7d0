from datetime import date
from typing import List, Optional

from ..models.guest import Guest
from ..models.booking import Booking
from ..models.review import Review
from ..models.customer_service import CustomerService
from ..models.event import Event
from ..schemas.feedback import ReviewCreate, CustomerServiceCreate, EventCreate
from ..utils.validation import ValidationHelpers
from .base import BaseService, BusinessRuleViolation


class FeedbackService(BaseService):
    """Reviews, support tickets and events, all keyed to a booking"""

    def add_review(self, review_data: ReviewCreate) -> Review:
        """
        reviewer_id is a guest id for both reviewer types. A host reviewing
        writes under the guest identity behind the host profile.
        """
        self._require_parent(Booking, review_data.booking_id, "Review", "booking_id")
        self._require_parent(Guest, review_data.reviewer_id, "Review", "reviewer_id")

        values = review_data.dict()
        if values["review_date"] is None:
            values["review_date"] = date.today()
        return self._save(Review(**values))

    def get_reviews(self, booking_id: int) -> List[Review]:
        self._get_or_raise(Booking, booking_id)
        return (
            self.db.query(Review)
            .filter(Review.booking_id == booking_id)
            .order_by(Review.review_date, Review.id)
            .all()
        )

    def get_reviews_by_guest(self, guest_id: int) -> List[Review]:
        self._get_or_raise(Guest, guest_id)
        return (
            self.db.query(Review)
            .filter(Review.reviewer_id == guest_id)
            .order_by(Review.id)
            .all()
        )

    # Support tickets

    def open_ticket(self, ticket_data: CustomerServiceCreate) -> CustomerService:
        self._require_parent(
            Booking, ticket_data.booking_id, "CustomerService", "booking_id"
        )
        return self._save(CustomerService(**ticket_data.dict()))

    def resolve_ticket(
        self, ticket_id: int, resolution: str, resolution_date: Optional[date] = None
    ) -> CustomerService:
        ticket = self._get_or_raise(CustomerService, ticket_id, "Support ticket")
        ticket.resolution = resolution
        ticket.resolution_date = resolution_date or date.today()
        self._commit("CustomerService")
        self.db.refresh(ticket)
        return ticket

    def get_tickets(self, booking_id: int, open_only: bool = False) -> List[CustomerService]:
        self._get_or_raise(Booking, booking_id)
        query = self.db.query(CustomerService).filter(
            CustomerService.booking_id == booking_id
        )
        if open_only:
            query = query.filter(CustomerService.resolution_date.is_(None))
        return query.order_by(CustomerService.id).all()

    # Events

    def add_event(self, event_data: EventCreate) -> Event:
        self._require_parent(Booking, event_data.booking_id, "Event", "booking_id")
        if not ValidationHelpers.validate_date_window(
            event_data.start_date, event_data.end_date
        ):
            raise BusinessRuleViolation("Event must end on or after its start date")
        return self._save(Event(**event_data.dict()))

    def get_events(self, booking_id: int) -> List[Event]:
        self._get_or_raise(Booking, booking_id)
        return (
            self.db.query(Event)
            .filter(Event.booking_id == booking_id)
            .order_by(Event.start_date, Event.id)
            .all()
        )
