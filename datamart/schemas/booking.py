from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from ..models.enums import PaymentStatus, PaymentMethod, TransactionType


class BookingBase(BaseModel):
    guest_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    total_price: float = Field(..., ge=0)
    payment_status: PaymentStatus = PaymentStatus.PENDING
    length_of_stay: Optional[int] = Field(
        None, gt=0, description="Defaults to the number of nights"
    )
    booking_date: Optional[datetime] = None

    # Cancellation terms
    cancellation_deadline: Optional[date] = None
    cancellation_refund: Optional[float] = Field(None, ge=0)
    date_of_cancellation: Optional[date] = None
    host_payout: Optional[float] = Field(None, ge=0)

    # Event metadata
    event_name: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None


class BookingCreate(BookingBase):
    pass


class BookingResponse(BookingBase):
    id: int
    length_of_stay: int
    booking_date: datetime

    class Config:
        from_attributes = True


class PaymentStatusUpdate(BaseModel):
    payment_status: PaymentStatus
    date_of_cancellation: Optional[date] = None
    cancellation_refund: Optional[float] = Field(None, ge=0)


class TransactionCreate(BaseModel):
    guest_id: int
    booking_id: int
    amount: float = Field(..., gt=0, description="Gross amount moved")
    transaction_date: Optional[datetime] = None
    payment_method: PaymentMethod
    transaction_type: TransactionType
    refund_processed_date: Optional[datetime] = None
    description: str = Field(..., min_length=1)


class TransactionResponse(TransactionCreate):
    id: int
    transaction_date: datetime

    class Config:
        from_attributes = True


class ReservationCreate(BaseModel):
    booking_id: int
    admin_id: int
    date_of_reservation: Optional[date] = None


class ReservationResponse(ReservationCreate):
    id: int
    payment_status: Optional[PaymentStatus] = None
    length_of_stay: Optional[int] = None
    cancellation_policy: Optional[str] = None
    refund_policy: Optional[str] = None

    class Config:
        from_attributes = True
