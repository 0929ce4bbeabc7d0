from datetime import date

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from datamart.models import Booking, Guest, PaymentStatus, Transaction
from datamart.services import (
    BookingService,
    CheckViolation,
    EnumViolation,
    ForeignKeyViolation,
    NotNullViolation,
    ReferralCycleViolation,
    UniqueViolation,
)
from datamart.services.base import BaseService, coerce_enum, translate_integrity_error


def driver_error(message):
    return IntegrityError("INSERT ...", {}, Exception(message))


class TestStorageTranslation:
    """Constraint failures raised by SQLite itself, bypassing service checks"""

    def test_unique(self, db_session, build):
        build.guest(email="dup@example.com")

        with pytest.raises(UniqueViolation) as exc_info:
            BaseService(db_session)._save(
                Guest(name="Copy", email="dup@example.com", password_hash="x")
            )

        assert exc_info.value.entity == "Guest"
        assert exc_info.value.field == "email"
        assert exc_info.value.to_dict()["constraint"] == "unique"

    def test_foreign_key(self, db_session, build):
        room = build.room()

        with pytest.raises(ForeignKeyViolation):
            BaseService(db_session)._save(
                Booking(
                    guest_id=999,
                    room_id=room.id,
                    check_in_date=date(2024, 9, 1),
                    check_out_date=date(2024, 9, 2),
                    total_price=10.0,
                    payment_status=PaymentStatus.PENDING,
                    length_of_stay=1,
                )
            )

    def test_not_null(self, db_session, build):
        booking = build.booking()

        with pytest.raises(NotNullViolation) as exc_info:
            BaseService(db_session)._save(
                Transaction(
                    guest_id=booking.guest_id,
                    booking_id=booking.id,
                    amount=10.0,
                    payment_method="PayPal",
                    transaction_type="Payment",
                )
            )

        assert exc_info.value.entity == "Transaction"
        assert exc_info.value.field == "description"

    def test_enum_rejected_before_storage(self, db_session, build):
        room = build.room()
        guest = build.guest()

        with pytest.raises(EnumViolation):
            BaseService(db_session)._save(
                Booking(
                    guest_id=guest.id,
                    room_id=room.id,
                    check_in_date=date(2024, 9, 1),
                    check_out_date=date(2024, 9, 2),
                    total_price=10.0,
                    payment_status="Refunded",
                    length_of_stay=1,
                )
            )

        assert db_session.query(Booking).count() == 0

    def test_enum_check_in_storage(self, db_session, build):
        booking = build.booking()

        with pytest.raises(IntegrityError) as exc_info:
            db_session.execute(
                text("UPDATE bookings SET payment_status = 'Refunded' WHERE id = :id"),
                {"id": booking.id},
            )
        db_session.rollback()

        violation = translate_integrity_error(exc_info.value, "Booking")
        assert isinstance(violation, EnumViolation)
        assert violation.constraint == "payment_status"

    def test_failed_write_rolls_back(self, db_session, build):
        build.guest(email="dup@example.com")

        with pytest.raises(UniqueViolation):
            BaseService(db_session)._save(
                Guest(name="Copy", email="dup@example.com", password_hash="x")
            )

        # Session stays usable after the rollback
        build.guest(email="fresh@example.com")
        assert db_session.query(Guest).count() == 2


class TestDriverMessages:
    def test_postgres_not_null(self):
        violation = translate_integrity_error(
            driver_error(
                'null value in column "description" of relation "transactions" '
                "violates not-null constraint"
            )
        )

        assert isinstance(violation, NotNullViolation)
        assert violation.entity == "Transaction"
        assert violation.field == "description"

    def test_postgres_foreign_key(self):
        violation = translate_integrity_error(
            driver_error(
                'insert or update on table "bookings" violates foreign key '
                'constraint "bookings_guest_id_fkey"'
            ),
            entity="Booking",
            field="guest_id",
        )

        assert isinstance(violation, ForeignKeyViolation)
        assert violation.field == "guest_id"

    def test_mysql_duplicate(self):
        violation = translate_integrity_error(
            driver_error("Duplicate entry 'a@example.com' for key 'guests.email'"),
            entity="Guest",
        )

        assert isinstance(violation, UniqueViolation)
        assert violation.field == "email"

    def test_mysql_enum_check(self):
        violation = translate_integrity_error(
            driver_error("Check constraint 'transaction_type' is violated."),
            entity="Transaction",
        )

        assert isinstance(violation, EnumViolation)
        assert violation.constraint == "transaction_type"

    def test_postgres_check(self):
        violation = translate_integrity_error(
            driver_error(
                'new row for relation "hosts" violates check constraint "ck_hosts_rating"'
            ),
            entity="Host",
            field="rating",
        )

        assert isinstance(violation, CheckViolation)
        assert violation.constraint == "ck_hosts_rating"

    def test_self_referral_check(self):
        violation = translate_integrity_error(
            driver_error("CHECK constraint failed: ck_hosts_not_self_referred")
        )

        assert isinstance(violation, ReferralCycleViolation)


def test_coerce_enum():
    assert coerce_enum(PaymentStatus, "Paid", "Booking", "payment_status") is PaymentStatus.PAID

    with pytest.raises(EnumViolation) as exc_info:
        coerce_enum(PaymentStatus, "paid", "Booking", "payment_status")

    assert "Pending" in str(exc_info.value)


def test_service_rejects_unknown_status_string(db_session, build):
    booking = build.booking()

    with pytest.raises(EnumViolation):
        BookingService(db_session).update_payment_status(booking.id, "Refunded")
