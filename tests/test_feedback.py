from datetime import date

import pytest

from datamart.models import Booking, Review, ReviewerType
from datamart.schemas.feedback import CustomerServiceCreate, EventCreate, ReviewCreate
from datamart.services import (
    BusinessRuleViolation,
    CheckViolation,
    FeedbackService,
    ForeignKeyViolation,
    IdentityService,
)


def review(booking, reviewer_id=None, **overrides):
    data = {
        "booking_id": booking.id,
        "reviewer_id": reviewer_id or booking.guest_id,
        "reviewer_type": ReviewerType.GUEST,
        "rating": 5,
        "comment": "Wunderbare Erfahrung, sehr sauber!",
    }
    data.update(overrides)
    return ReviewCreate(**data)


class TestReviews:
    def test_add_review_defaults_date(self, db_session, build):
        booking = build.booking()

        created = FeedbackService(db_session).add_review(review(booking))

        assert created.review_date == date.today()
        assert created.reviewer_type == ReviewerType.GUEST

    def test_host_review_written_under_guest_identity(self, db_session, build):
        host = build.host()
        booking = build.booking()

        created = FeedbackService(db_session).add_review(
            review(booking, reviewer_id=host.guest_id, reviewer_type=ReviewerType.HOST)
        )

        assert created.reviewer_id == host.guest_id
        assert created.reviewer_type == ReviewerType.HOST

    def test_reviewer_must_exist(self, db_session, build):
        booking = build.booking()

        with pytest.raises(ForeignKeyViolation) as exc_info:
            FeedbackService(db_session).add_review(review(booking, reviewer_id=404))

        assert exc_info.value.field == "reviewer_id"

    def test_rating_check_enforced_by_storage(self, db_session, build):
        booking = build.booking()
        service = FeedbackService(db_session)

        with pytest.raises(CheckViolation) as exc_info:
            service._save(
                Review(
                    booking_id=booking.id,
                    reviewer_id=booking.guest_id,
                    reviewer_type=ReviewerType.GUEST,
                    rating=9,
                )
            )

        assert exc_info.value.constraint == "ck_reviews_rating"

    def test_deleting_reviewer_removes_reviews(self, db_session, build):
        booking = build.booking()
        reviewer = build.guest()
        service = FeedbackService(db_session)
        service.add_review(review(booking, reviewer_id=reviewer.id))

        IdentityService(db_session).delete_guest(reviewer.id)

        db_session.expire_all()
        assert db_session.query(Review).count() == 0
        assert db_session.get(Booking, booking.id) is not None

    def test_reviews_by_guest(self, db_session, build):
        first = build.booking()
        second = build.booking(guest=build.guest())
        service = FeedbackService(db_session)
        service.add_review(review(first))
        service.add_review(review(second, reviewer_id=first.guest_id))

        reviews = service.get_reviews_by_guest(first.guest_id)

        assert {r.booking_id for r in reviews} == {first.id, second.id}


class TestSupportTickets:
    def test_resolve_ticket(self, db_session, build):
        booking = build.booking()
        service = FeedbackService(db_session)
        ticket = service.open_ticket(
            CustomerServiceCreate(
                booking_id=booking.id, issue_description="WiFi not working", contact_method="Email"
            )
        )
        assert not ticket.is_resolved
        assert [t.id for t in service.get_tickets(booking.id, open_only=True)] == [ticket.id]

        resolved = service.resolve_ticket(ticket.id, "Fixed WiFi issue", date(2024, 9, 6))

        assert resolved.is_resolved
        assert resolved.resolution_date == date(2024, 9, 6)
        assert service.get_tickets(booking.id, open_only=True) == []
        assert len(service.get_tickets(booking.id)) == 1


class TestEvents:
    def test_event_window_must_be_ordered(self, db_session, build):
        booking = build.booking()

        with pytest.raises(BusinessRuleViolation):
            FeedbackService(db_session).add_event(
                EventCreate(
                    booking_id=booking.id,
                    event_name="Rome Film Festival",
                    start_date=date(2024, 9, 18),
                    end_date=date(2024, 9, 12),
                )
            )

    def test_events_sorted_by_start(self, db_session, build):
        booking = build.booking()
        service = FeedbackService(db_session)
        later = service.add_event(
            EventCreate(booking_id=booking.id, event_name="B", start_date=date(2024, 9, 10))
        )
        earlier = service.add_event(
            EventCreate(booking_id=booking.id, event_name="A", start_date=date(2024, 9, 2))
        )

        assert [e.id for e in service.get_events(booking.id)] == [earlier.id, later.id]
