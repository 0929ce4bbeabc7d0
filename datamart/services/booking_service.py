import logging
from datetime import date
from typing import Dict, List, Optional, Set, Union

from sqlalchemy.orm import Session

from ..database import ENFORCE_PAYMENT_TRANSITIONS
from ..models.guest import Guest
from ..models.room import Room
from ..models.booking import Booking
from ..models.transaction import Transaction
from ..models.reservation import Reservation
from ..models.travel_admin import TravelAdmin
from ..models.cancellation_policy import CancellationPolicy, VacationRentalPolicy
from ..models.enums import PaymentStatus, TransactionType
from ..schemas.booking import BookingCreate, TransactionCreate, ReservationCreate
from ..utils.validation import ValidationHelpers
from .base import (
    BaseService,
    BusinessRuleViolation,
    InvalidStatusTransition,
    coerce_enum,
)

logger = logging.getLogger(__name__)


# Used only when strict transitions are switched on
PAYMENT_STATUS_TRANSITIONS: Dict[PaymentStatus, Set[PaymentStatus]] = {
    PaymentStatus.PENDING: {PaymentStatus.PAID, PaymentStatus.CANCELLED},
    PaymentStatus.PAID: {PaymentStatus.CANCELLED},
    PaymentStatus.CANCELLED: set(),
}


class BookingService(BaseService):
    """Bookings and the ledger hanging off them"""

    def __init__(self, db: Session, enforce_transitions: Optional[bool] = None):
        super().__init__(db)
        self.enforce_transitions = (
            ENFORCE_PAYMENT_TRANSITIONS
            if enforce_transitions is None
            else enforce_transitions
        )

    # Bookings

    def create_booking(self, booking_data: BookingCreate) -> Booking:
        self._require_parent(Guest, booking_data.guest_id, "Booking", "guest_id")
        self._require_parent(Room, booking_data.room_id, "Booking", "room_id")

        if not ValidationHelpers.validate_date_window(
            booking_data.check_in_date, booking_data.check_out_date, strict=True
        ):
            raise BusinessRuleViolation("Check-out must be after check-in")

        self._check_cancellation_fields(
            booking_data.payment_status, booking_data.date_of_cancellation
        )

        values = booking_data.dict()
        if values["length_of_stay"] is None:
            values["length_of_stay"] = (
                booking_data.check_out_date - booking_data.check_in_date
            ).days
        # Unset timestamps fall back to the column's server default
        if values["booking_date"] is None:
            del values["booking_date"]

        return self._save(Booking(**values))

    def get_booking(self, booking_id: int) -> Booking:
        return self._get_or_raise(Booking, booking_id)

    def list_guest_bookings(self, guest_id: int) -> List[Booking]:
        self._get_or_raise(Guest, guest_id)
        return (
            self.db.query(Booking)
            .filter(Booking.guest_id == guest_id)
            .order_by(Booking.check_in_date)
            .all()
        )

    def update_payment_status(
        self,
        booking_id: int,
        status: Union[PaymentStatus, str],
        date_of_cancellation: Optional[date] = None,
        cancellation_refund: Optional[float] = None,
    ) -> Booking:
        """
        Write a new payment status.

        With the open policy any status may follow any other. With strict
        transitions only Pending->Paid, Pending->Cancelled and Paid->Cancelled
        are accepted; rewriting the current status is a no-op either way.

        Leaving Cancelled clears date_of_cancellation, since the cancellation
        date is only meaningful on a cancelled booking.
        """
        booking = self._get_or_raise(Booking, booking_id)
        new_status = coerce_enum(PaymentStatus, status, "Booking", "payment_status")
        current = PaymentStatus(booking.payment_status)

        if self.enforce_transitions and new_status != current:
            if new_status not in PAYMENT_STATUS_TRANSITIONS[current]:
                raise InvalidStatusTransition(
                    f"Booking {booking_id} cannot move from "
                    f"{current.value} to {new_status.value}"
                )

        if new_status == PaymentStatus.CANCELLED:
            if date_of_cancellation is not None:
                booking.date_of_cancellation = date_of_cancellation
            if cancellation_refund is not None:
                booking.cancellation_refund = cancellation_refund
        else:
            self._check_cancellation_fields(new_status, date_of_cancellation)
            booking.date_of_cancellation = None

        booking.payment_status = new_status
        self._commit("Booking", "payment_status")
        self.db.refresh(booking)
        return booking

    def delete_booking(self, booking_id: int) -> None:
        booking = self._get_or_raise(Booking, booking_id)
        logger.info(f"Deleting booking {booking_id} with its ledger and feedback")
        self._delete(booking, "Booking")

    @staticmethod
    def _check_cancellation_fields(
        status: PaymentStatus, date_of_cancellation: Optional[date]
    ) -> None:
        if date_of_cancellation is not None and status != PaymentStatus.CANCELLED:
            raise BusinessRuleViolation(
                "date_of_cancellation can only be set on a Cancelled booking"
            )

    # Transactions

    def record_transaction(self, transaction_data: TransactionCreate) -> Transaction:
        """
        Append a Payment or Refund row. Amounts are gross; netting refunds
        against payments is left to the reader.
        """
        self._require_parent(Guest, transaction_data.guest_id, "Transaction", "guest_id")
        booking = self._require_parent(
            Booking, transaction_data.booking_id, "Transaction", "booking_id"
        )

        if booking.guest_id != transaction_data.guest_id:
            raise BusinessRuleViolation(
                f"Booking {booking.id} belongs to guest {booking.guest_id}, "
                f"not guest {transaction_data.guest_id}"
            )

        transaction_type = coerce_enum(
            TransactionType,
            transaction_data.transaction_type,
            "Transaction",
            "transaction_type",
        )
        if transaction_type == TransactionType.REFUND and not self._has_payment(
            booking.id
        ):
            raise BusinessRuleViolation(
                f"Refund on booking {booking.id} has no prior Payment to reverse"
            )

        values = transaction_data.dict()
        if values["transaction_date"] is None:
            del values["transaction_date"]

        return self._save(Transaction(**values))

    def get_transactions(self, booking_id: int) -> List[Transaction]:
        self._get_or_raise(Booking, booking_id)
        return (
            self.db.query(Transaction)
            .filter(Transaction.booking_id == booking_id)
            .order_by(Transaction.transaction_date, Transaction.id)
            .all()
        )

    def _has_payment(self, booking_id: int) -> bool:
        return (
            self.db.query(Transaction.id)
            .filter(
                Transaction.booking_id == booking_id,
                Transaction.transaction_type == TransactionType.PAYMENT,
            )
            .first()
            is not None
        )

    # Reservations

    def create_reservation(self, reservation_data: ReservationCreate) -> Reservation:
        """
        Record an admin's view of a booking. Policy text is copied from the
        rental's current cancellation policies and stays frozen afterwards.
        """
        booking = self._require_parent(
            Booking, reservation_data.booking_id, "Reservation", "booking_id"
        )
        self._require_parent(
            TravelAdmin, reservation_data.admin_id, "Reservation", "admin_id"
        )

        policies = self._policies_for_booking(booking)
        reservation = Reservation(
            booking_id=booking.id,
            admin_id=reservation_data.admin_id,
            date_of_reservation=reservation_data.date_of_reservation or date.today(),
            payment_status=booking.payment_status,
            length_of_stay=booking.length_of_stay,
            cancellation_policy=(
                ", ".join(p.policy_name for p in policies if p.policy_name) or None
            ),
            refund_policy=(
                "; ".join(p.description for p in policies if p.description) or None
            ),
        )
        return self._save(reservation)

    def get_reservations(self, booking_id: int) -> List[Reservation]:
        self._get_or_raise(Booking, booking_id)
        return (
            self.db.query(Reservation)
            .filter(Reservation.booking_id == booking_id)
            .order_by(Reservation.id)
            .all()
        )

    def _policies_for_booking(self, booking: Booking) -> List[CancellationPolicy]:
        return (
            self.db.query(CancellationPolicy)
            .join(
                VacationRentalPolicy,
                VacationRentalPolicy.policy_id == CancellationPolicy.id,
            )
            .filter(
                VacationRentalPolicy.vacation_rental_id
                == booking.room.vacation_rental_id
            )
            .order_by(CancellationPolicy.id)
            .all()
        )
