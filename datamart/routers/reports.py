from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict, List

from ..database import get_db
from ..services.reporting_service import ReportingService
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["reports"])

Rows = SuccessResponse[List[Dict[str, Any]]]


@router.get("/guest-bookings", response_model=Rows)
@handle_service_errors
async def guest_booking_details(db: Session = Depends(get_db)):
    return ResponseFactory.success(data=ReportingService(db).guest_booking_details())


@router.get("/transactions", response_model=Rows)
@handle_service_errors
async def transaction_history(db: Session = Depends(get_db)):
    return ResponseFactory.success(data=ReportingService(db).transaction_history())


@router.get("/reviews", response_model=Rows)
@handle_service_errors
async def review_support_overview(db: Session = Depends(get_db)):
    return ResponseFactory.success(data=ReportingService(db).review_support_overview())


@router.get("/cancellations", response_model=Rows)
@handle_service_errors
async def cancelled_bookings(db: Session = Depends(get_db)):
    return ResponseFactory.success(data=ReportingService(db).cancelled_bookings())


@router.get("/rental-locations", response_model=Rows)
@handle_service_errors
async def rental_locations(db: Session = Depends(get_db)):
    return ResponseFactory.success(data=ReportingService(db).rental_locations())


@router.get("/promotions", response_model=Rows)
@handle_service_errors
async def rental_promotions(db: Session = Depends(get_db)):
    return ResponseFactory.success(data=ReportingService(db).rental_promotions())


@router.get("/integrity", response_model=SuccessResponse[Dict[str, Any]])
@handle_service_errors
async def integrity_report(db: Session = Depends(get_db)):
    """Orphan probe plus row counts per table"""
    service = ReportingService(db)
    return ResponseFactory.success(
        data={
            "orphaned_bookings": service.orphaned_bookings(),
            "table_counts": service.table_counts(),
        }
    )
