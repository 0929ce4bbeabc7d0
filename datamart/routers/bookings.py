from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..services.booking_service import BookingService
from ..schemas.booking import (
    BookingCreate,
    BookingResponse,
    PaymentStatusUpdate,
    TransactionCreate,
    TransactionResponse,
    ReservationCreate,
    ReservationResponse,
)
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import (
    handle_service_errors,
    serialize,
    serialize_all,
    RouterResponse,
)
from ..utils.constants import ResponseMessages

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings",
    response_model=SuccessResponse[BookingResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_booking(booking_data: BookingCreate, db: Session = Depends(get_db)):
    booking = BookingService(db).create_booking(booking_data)
    return ResponseFactory.created(data=serialize(BookingResponse, booking))


@router.get("/bookings/{booking_id}", response_model=SuccessResponse[BookingResponse])
@handle_service_errors
async def get_booking(booking_id: int, db: Session = Depends(get_db)):
    booking = BookingService(db).get_booking(booking_id)
    return ResponseFactory.success(data=serialize(BookingResponse, booking))


@router.get(
    "/guests/{guest_id}/bookings",
    response_model=SuccessResponse[List[BookingResponse]],
)
@handle_service_errors
async def list_guest_bookings(guest_id: int, db: Session = Depends(get_db)):
    bookings = BookingService(db).list_guest_bookings(guest_id)
    return ResponseFactory.success(data=serialize_all(BookingResponse, bookings))


@router.put(
    "/bookings/{booking_id}/status", response_model=SuccessResponse[BookingResponse]
)
@handle_service_errors
async def update_payment_status(
    booking_id: int, status_update: PaymentStatusUpdate, db: Session = Depends(get_db)
):
    """Change the payment status; strict mode rejects illegal transitions with 409"""
    booking = BookingService(db).update_payment_status(
        booking_id,
        status_update.payment_status,
        date_of_cancellation=status_update.date_of_cancellation,
        cancellation_refund=status_update.cancellation_refund,
    )
    return ResponseFactory.success(
        data=serialize(BookingResponse, booking), message=ResponseMessages.UPDATED
    )


@router.delete("/bookings/{booking_id}")
@handle_service_errors
async def delete_booking(booking_id: int, db: Session = Depends(get_db)):
    BookingService(db).delete_booking(booking_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


# Transactions


@router.post(
    "/transactions",
    response_model=SuccessResponse[TransactionResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def record_transaction(
    transaction_data: TransactionCreate, db: Session = Depends(get_db)
):
    transaction = BookingService(db).record_transaction(transaction_data)
    return ResponseFactory.created(data=serialize(TransactionResponse, transaction))


@router.get(
    "/bookings/{booking_id}/transactions",
    response_model=SuccessResponse[List[TransactionResponse]],
)
@handle_service_errors
async def get_transactions(booking_id: int, db: Session = Depends(get_db)):
    transactions = BookingService(db).get_transactions(booking_id)
    return ResponseFactory.success(data=serialize_all(TransactionResponse, transactions))


# Reservations


@router.post(
    "/reservations",
    response_model=SuccessResponse[ReservationResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_reservation(
    reservation_data: ReservationCreate, db: Session = Depends(get_db)
):
    reservation = BookingService(db).create_reservation(reservation_data)
    return ResponseFactory.created(data=serialize(ReservationResponse, reservation))


@router.get(
    "/bookings/{booking_id}/reservations",
    response_model=SuccessResponse[List[ReservationResponse]],
)
@handle_service_errors
async def get_reservations(booking_id: int, db: Session = Depends(get_db)):
    reservations = BookingService(db).get_reservations(booking_id)
    return ResponseFactory.success(data=serialize_all(ReservationResponse, reservations))
