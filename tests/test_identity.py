from datetime import datetime

import pytest

from datamart.models import (
    Guest,
    Host,
    VacationRental,
    Room,
    Booking,
    GuestSocialNetwork,
    LoginHistory,
    Notification,
    PaymentMethod,
    Reservation,
    Review,
    ReviewerType,
    Transaction,
    TransactionType,
    TravelAdmin,
)
from datamart.schemas.booking import ReservationCreate, TransactionCreate
from datamart.schemas.feedback import ReviewCreate
from datamart.schemas.guest import (
    GuestCreate,
    GuestUpdate,
    HostCreate,
    HostUpdate,
    TravelAdminCreate,
    SocialNetworkCreate,
    GuestSocialNetworkCreate,
)
from datamart.services import (
    BookingService,
    FeedbackService,
    IdentityService,
    SocialService,
    NotFoundError,
    UniqueViolation,
    ForeignKeyViolation,
    ReferralCycleViolation,
)


def count(db, model):
    return db.query(model).count()


class TestGuests:
    def test_create_guest_stores_hash_only(self, db_session):
        service = IdentityService(db_session)
        guest = service.create_guest(
            GuestCreate(name="Jack Haddad", email="jack@example.com", password="hunter2")
        )

        assert guest.id is not None
        assert guest.password_hash != "hunter2"
        assert service.verify_credentials("jack@example.com", "hunter2")
        assert not service.verify_credentials("jack@example.com", "wrong")
        assert not service.verify_credentials("nobody@example.com", "hunter2")

    def test_duplicate_email_rejected(self, db_session, build):
        build.guest(email="taken@example.com")

        with pytest.raises(UniqueViolation) as exc_info:
            build.guest(email="taken@example.com")

        assert exc_info.value.entity == "Guest"
        assert exc_info.value.field == "email"
        assert count(db_session, Guest) == 1

    def test_update_to_taken_email_rejected(self, db_session, build):
        build.guest(email="first@example.com")
        second = build.guest(email="second@example.com")

        with pytest.raises(UniqueViolation):
            IdentityService(db_session).update_guest(
                second.id, GuestUpdate(email="first@example.com")
            )

    def test_update_guest_only_touches_given_fields(self, db_session, build):
        guest = build.guest(name="Ivana Horvat", country="Croatia")

        updated = IdentityService(db_session).update_guest(
            guest.id, GuestUpdate(language_settings="Croatian")
        )

        assert updated.language_settings == "Croatian"
        assert updated.name == "Ivana Horvat"
        assert updated.country == "Croatia"

    def test_invalid_email_rejected_by_schema(self):
        with pytest.raises(ValueError):
            GuestCreate(name="Bad", email="not-an-email", password="x")

    def test_missing_guest(self, db_session):
        with pytest.raises(NotFoundError):
            IdentityService(db_session).get_guest(404)


class TestHosts:
    def test_one_host_per_guest(self, db_session, build):
        guest = build.guest()
        build.host(guest=guest)

        with pytest.raises(UniqueViolation) as exc_info:
            build.host(guest=guest)

        assert exc_info.value.field == "guest_id"
        assert count(db_session, Host) == 1

    def test_promote_missing_guest(self, db_session):
        with pytest.raises(ForeignKeyViolation):
            IdentityService(db_session).promote_to_host(99, HostCreate())

    def test_update_host(self, db_session, build):
        host = build.host(rating=3.0)

        updated = IdentityService(db_session).update_host(
            host.id, HostUpdate(rating=4.8, verified=False)
        )

        assert updated.rating == 4.8
        assert updated.verified is False

    def test_rating_outside_bounds_rejected_by_schema(self):
        with pytest.raises(ValueError):
            HostCreate(rating=7.5)


class TestReferrals:
    def test_referrer_must_exist(self, db_session, build):
        with pytest.raises(ForeignKeyViolation):
            build.host(referred_by_host_id=999)

    def test_referral_chain_nearest_first(self, db_session, build):
        a = build.host()
        b = build.host(referred_by_host_id=a.id)
        c = build.host(referred_by_host_id=b.id)

        chain = IdentityService(db_session).referral_chain(c.id)

        assert [host.id for host in chain] == [b.id, a.id]

    def test_cycle_rejected(self, db_session, build):
        a = build.host()
        b = build.host(referred_by_host_id=a.id)
        c = build.host(referred_by_host_id=b.id)

        with pytest.raises(ReferralCycleViolation):
            IdentityService(db_session).set_referral(a.id, c.id)

        db_session.expire_all()
        assert db_session.get(Host, a.id).referred_by_host_id is None

    def test_self_referral_rejected(self, db_session, build):
        host = build.host()

        with pytest.raises(ReferralCycleViolation):
            IdentityService(db_session).set_referral(host.id, host.id)

    def test_self_referral_rejected_by_storage(self, db_session, build):
        host = build.host()
        host.referred_by_host_id = host.id

        with pytest.raises(ReferralCycleViolation) as exc_info:
            IdentityService(db_session)._commit("Host", "referred_by_host_id")

        assert exc_info.value.constraint == "ck_hosts_not_self_referred"

    def test_clear_referral(self, db_session, build):
        a = build.host()
        b = build.host(referred_by_host_id=a.id)

        updated = IdentityService(db_session).set_referral(b.id, None)

        assert updated.referred_by_host_id is None

    def test_deleting_referrer_keeps_referred_hosts(self, db_session, build):
        a = build.host()
        b = build.host(referred_by_host_id=a.id)
        b_id = b.id

        IdentityService(db_session).delete_host(a.id)

        db_session.expire_all()
        survivor = db_session.get(Host, b_id)
        assert survivor is not None
        assert survivor.referred_by_host_id is None


class TestDeletion:
    def test_guest_delete_cascades(self, db_session, build):
        host = build.host()
        guest_id = host.guest_id
        room = build.room(rental=build.rental(host=host))
        build.booking(guest=db_session.get(Guest, guest_id), room=room)

        social = SocialService(db_session)
        network = social.create_social_network(SocialNetworkCreate(network_name="Facebook"))
        social.link_social_network(guest_id, GuestSocialNetworkCreate(network_id=network.id))
        social.record_login(guest_id, ip_address="192.168.1.1")
        social.notify_guest(guest_id, "Welcome to our service!")

        IdentityService(db_session).delete_guest(guest_id)

        db_session.expire_all()
        for model in (
            Guest,
            Host,
            VacationRental,
            Room,
            Booking,
            GuestSocialNetwork,
            LoginHistory,
            Notification,
        ):
            assert count(db_session, model) == 0, model.__name__

    def test_host_delete_leaves_guest(self, db_session, build):
        host = build.host()
        guest_id = host.guest_id
        build.room(rental=build.rental(host=host))

        IdentityService(db_session).delete_host(host.id)

        db_session.expire_all()
        assert db_session.get(Guest, guest_id) is not None
        assert count(db_session, VacationRental) == 0
        assert count(db_session, Room) == 0

    def test_host_delete_removes_stays_of_other_guests(self, db_session, build):
        host = build.host()
        traveller = build.guest()
        admin = build.admin()
        room = build.room(rental=build.rental(host=host))
        booking = build.booking(guest=traveller, room=room)

        bookings = BookingService(db_session)
        bookings.record_transaction(
            TransactionCreate(
                guest_id=traveller.id,
                booking_id=booking.id,
                amount=900.0,
                payment_method=PaymentMethod.PAYPAL,
                transaction_type=TransactionType.PAYMENT,
                description="Booking for vacation rental",
            )
        )
        bookings.create_reservation(
            ReservationCreate(booking_id=booking.id, admin_id=admin.id)
        )
        FeedbackService(db_session).add_review(
            ReviewCreate(
                booking_id=booking.id,
                reviewer_id=traveller.id,
                reviewer_type=ReviewerType.GUEST,
                rating=5,
            )
        )

        IdentityService(db_session).delete_host(host.id)

        db_session.expire_all()
        for model in (VacationRental, Room, Booking, Transaction, Reservation, Review):
            assert count(db_session, model) == 0, model.__name__
        assert IdentityService(db_session).get_guest(traveller.id).id == traveller.id
        assert count(db_session, TravelAdmin) == 1

    def test_guest_acting_as_admin_cannot_be_deleted(self, db_session, build):
        guest = build.guest()
        build.admin(guest=guest)

        with pytest.raises(ForeignKeyViolation):
            IdentityService(db_session).delete_guest(guest.id)

        db_session.expire_all()
        assert count(db_session, Guest) == 1
        assert count(db_session, TravelAdmin) == 1


class TestTravelAdmins:
    def test_admin_unique_per_guest(self, db_session, build):
        guest = build.guest()
        build.admin(guest=guest)

        with pytest.raises(UniqueViolation) as exc_info:
            IdentityService(db_session).create_travel_admin(
                TravelAdminCreate(name="Other", email="other@example.com", guest_id=guest.id)
            )

        assert exc_info.value.field == "guest_id"

    def test_admin_email_unique(self, db_session, build):
        admin = build.admin()

        with pytest.raises(UniqueViolation) as exc_info:
            IdentityService(db_session).create_travel_admin(
                TravelAdminCreate(name="Copy", email=admin.email, guest_id=build.guest().id)
            )

        assert exc_info.value.field == "email"

    def test_admin_needs_guest(self, db_session):
        with pytest.raises(ForeignKeyViolation):
            IdentityService(db_session).create_travel_admin(
                TravelAdminCreate(name="Ghost", email="ghost@example.com", guest_id=5)
            )


class TestAuditTrail:
    def test_timestamps_default_to_now(self, db_session, build):
        guest = build.guest()
        social = SocialService(db_session)

        login = social.record_login(guest.id, ip_address="192.168.1.1")
        notification = social.notify_guest(guest.id, "Welcome to our service!")

        assert isinstance(login.login_timestamp, datetime)
        assert isinstance(notification.timestamp, datetime)

    def test_history_newest_first(self, db_session, build):
        guest = build.guest()
        social = SocialService(db_session)
        social.record_login(guest.id, ip_address="10.0.0.1", timestamp=datetime(2024, 8, 1, 9))
        social.record_login(guest.id, ip_address="10.0.0.2", timestamp=datetime(2024, 8, 2, 9))

        history = social.get_login_history(guest.id)

        assert [entry.ip_address for entry in history] == ["10.0.0.2", "10.0.0.1"]
        assert history[0].login_timestamp == datetime(2024, 8, 2, 9)
