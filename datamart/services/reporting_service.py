from typing import Any, Dict, List

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from ..database import Base
from ..models.guest import Guest
from ..models.host import Host
from ..models.city import City
from ..models.location import Location
from ..models.vacation_rental import VacationRental
from ..models.room import Room
from ..models.booking import Booking
from ..models.transaction import Transaction
from ..models.review import Review
from ..models.customer_service import CustomerService
from ..models.promotion import Promotion
from ..models.enums import PaymentStatus


def _rows(result) -> List[Dict[str, Any]]:
    return [dict(row._mapping) for row in result]


class ReportingService:
    """Read-only joins across the marketplace graph"""

    def __init__(self, db: Session):
        self.db = db

    def guest_booking_details(self) -> List[Dict[str, Any]]:
        """Booking -> guest, room, rental and host, newest booking first"""
        query = (
            self.db.query(
                Booking.id.label("booking_id"),
                Guest.name.label("guest_name"),
                Booking.booking_date,
                Booking.check_in_date,
                Booking.check_out_date,
                Booking.total_price,
                VacationRental.property_type,
                Host.id.label("host_id"),
                Host.rating.label("host_rating"),
            )
            .join(Guest, Booking.guest_id == Guest.id)
            .join(Room, Booking.room_id == Room.id)
            .join(VacationRental, Room.vacation_rental_id == VacationRental.id)
            .join(Host, VacationRental.host_id == Host.id)
            .order_by(desc(Booking.booking_date), Booking.id)
        )
        return _rows(query.all())

    def transaction_history(self) -> List[Dict[str, Any]]:
        """Payments and refunds with their booking and guest, newest first"""
        query = (
            self.db.query(
                Transaction.id.label("transaction_id"),
                Guest.name.label("guest_name"),
                Booking.booking_date,
                Transaction.amount,
                Transaction.transaction_date,
                Transaction.transaction_type,
                Transaction.payment_method,
                Transaction.refund_processed_date,
                Transaction.description,
            )
            .join(Booking, Transaction.booking_id == Booking.id)
            .join(Guest, Transaction.guest_id == Guest.id)
            .order_by(desc(Transaction.transaction_date), desc(Transaction.id))
        )
        return _rows(query.all())

    def review_support_overview(self) -> List[Dict[str, Any]]:
        """Reviews per guest booking, with any support ticket on the booking"""
        query = (
            self.db.query(
                Guest.name.label("guest_name"),
                VacationRental.property_type,
                Review.rating.label("review_rating"),
                Review.comment.label("review_comment"),
                Review.reviewer_type,
                CustomerService.issue_description,
                CustomerService.resolution,
                CustomerService.contact_method,
            )
            .select_from(Guest)
            .join(Booking, Guest.id == Booking.guest_id)
            .join(Review, Booking.id == Review.booking_id)
            .outerjoin(CustomerService, Booking.id == CustomerService.booking_id)
            .join(Room, Booking.room_id == Room.id)
            .join(VacationRental, Room.vacation_rental_id == VacationRental.id)
            .join(Host, VacationRental.host_id == Host.id)
            .order_by(Guest.name, Review.id)
        )
        return _rows(query.all())

    def cancelled_bookings(self) -> List[Dict[str, Any]]:
        query = (
            self.db.query(
                Booking.id.label("booking_id"),
                Guest.name.label("guest_name"),
                Booking.room_id,
                Booking.total_price,
                Booking.cancellation_refund,
                Booking.date_of_cancellation,
            )
            .join(Guest, Booking.guest_id == Guest.id)
            .filter(Booking.payment_status == PaymentStatus.CANCELLED)
            .order_by(desc(Booking.date_of_cancellation), Booking.id)
        )
        return _rows(query.all())

    def rental_locations(self) -> List[Dict[str, Any]]:
        """Rentals with a resolved city"""
        query = (
            self.db.query(
                VacationRental.id.label("vacation_rental_id"),
                VacationRental.property_type,
                Location.part_of_city,
                City.city_name,
                City.country,
            )
            .join(Location, VacationRental.location_id == Location.id)
            .join(City, Location.city_id == City.id)
            .order_by(VacationRental.id)
        )
        return _rows(query.all())

    def rental_promotions(self) -> List[Dict[str, Any]]:
        query = (
            self.db.query(
                VacationRental.id.label("vacation_rental_id"),
                VacationRental.property_type,
                Promotion.discount_percentage,
                Promotion.start_date,
                Promotion.end_date,
            )
            .join(Promotion, VacationRental.id == Promotion.vacation_rental_id)
            .order_by(Promotion.start_date, Promotion.id)
        )
        return _rows(query.all())

    def orphaned_bookings(self) -> List[Dict[str, Any]]:
        """Bookings whose guest row is gone; empty whenever integrity holds"""
        query = (
            self.db.query(Booking.id.label("booking_id"), Booking.guest_id)
            .outerjoin(Guest, Booking.guest_id == Guest.id)
            .filter(Guest.id.is_(None))
            .order_by(Booking.id)
        )
        return _rows(query.all())

    def table_counts(self) -> Dict[str, int]:
        counts = {}
        for table in Base.metadata.sorted_tables:
            counts[table.name] = (
                self.db.query(func.count()).select_from(table).scalar() or 0
            )
        return counts
