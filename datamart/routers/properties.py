from datetime import date
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from ..database import get_db
from ..services.geography_service import GeographyService
from ..services.property_service import PropertyService
from ..services.promotion_service import PromotionService
from ..schemas.property import (
    CityCreate,
    CityResponse,
    LocationCreate,
    LocationResponse,
    RentalCreate,
    RentalUpdate,
    RentalResponse,
    RoomCreate,
    RoomResponse,
    AmenityCreate,
    AmenityResponse,
    PolicyCreate,
    PolicyUpdate,
    PolicyResponse,
    PromotionCreate,
    PromotionResponse,
)
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import (
    handle_service_errors,
    serialize,
    serialize_all,
    RouterResponse,
)
from ..utils.constants import ResponseMessages

router = APIRouter(tags=["properties"])


# Geography


@router.post(
    "/cities",
    response_model=SuccessResponse[CityResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_city(city_data: CityCreate, db: Session = Depends(get_db)):
    city = GeographyService(db).create_city(city_data)
    return ResponseFactory.created(data=serialize(CityResponse, city))


@router.get("/cities", response_model=SuccessResponse[List[CityResponse]])
@handle_service_errors
async def list_cities(db: Session = Depends(get_db)):
    cities = GeographyService(db).list_cities()
    return ResponseFactory.success(data=serialize_all(CityResponse, cities))


@router.delete("/cities/{city_id}")
@handle_service_errors
async def delete_city(city_id: int, db: Session = Depends(get_db)):
    """Locations in the city survive with no city"""
    GeographyService(db).delete_city(city_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


@router.post(
    "/locations",
    response_model=SuccessResponse[LocationResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_location(location_data: LocationCreate, db: Session = Depends(get_db)):
    location = GeographyService(db).create_location(location_data)
    return ResponseFactory.created(data=serialize(LocationResponse, location))


@router.get("/locations/{location_id}", response_model=SuccessResponse[LocationResponse])
@handle_service_errors
async def get_location(location_id: int, db: Session = Depends(get_db)):
    location = GeographyService(db).get_location(location_id)
    return ResponseFactory.success(data=serialize(LocationResponse, location))


@router.delete("/locations/{location_id}")
@handle_service_errors
async def delete_location(location_id: int, db: Session = Depends(get_db)):
    GeographyService(db).delete_location(location_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


# Rentals and rooms


@router.post(
    "/rentals",
    response_model=SuccessResponse[RentalResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_rental(rental_data: RentalCreate, db: Session = Depends(get_db)):
    rental = PropertyService(db).create_rental(rental_data)
    return ResponseFactory.created(data=serialize(RentalResponse, rental))


@router.get("/rentals/{rental_id}", response_model=SuccessResponse[RentalResponse])
@handle_service_errors
async def get_rental(rental_id: int, db: Session = Depends(get_db)):
    rental = PropertyService(db).get_rental(rental_id)
    return ResponseFactory.success(data=serialize(RentalResponse, rental))


@router.get(
    "/hosts/{host_id}/rentals", response_model=SuccessResponse[List[RentalResponse]]
)
@handle_service_errors
async def list_host_rentals(host_id: int, db: Session = Depends(get_db)):
    rentals = PropertyService(db).list_host_rentals(host_id)
    return ResponseFactory.success(data=serialize_all(RentalResponse, rentals))


@router.put("/rentals/{rental_id}", response_model=SuccessResponse[RentalResponse])
@handle_service_errors
async def update_rental(
    rental_id: int, rental_data: RentalUpdate, db: Session = Depends(get_db)
):
    rental = PropertyService(db).update_rental(rental_id, rental_data)
    return ResponseFactory.success(
        data=serialize(RentalResponse, rental), message=ResponseMessages.UPDATED
    )


@router.delete("/rentals/{rental_id}")
@handle_service_errors
async def delete_rental(rental_id: int, db: Session = Depends(get_db)):
    PropertyService(db).delete_rental(rental_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


@router.post(
    "/rooms",
    response_model=SuccessResponse[RoomResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def add_room(room_data: RoomCreate, db: Session = Depends(get_db)):
    room = PropertyService(db).add_room(room_data)
    return ResponseFactory.created(data=serialize(RoomResponse, room))


@router.get(
    "/rentals/{rental_id}/rooms", response_model=SuccessResponse[List[RoomResponse]]
)
@handle_service_errors
async def list_rooms(rental_id: int, db: Session = Depends(get_db)):
    rooms = PropertyService(db).list_rooms(rental_id)
    return ResponseFactory.success(data=serialize_all(RoomResponse, rooms))


@router.delete("/rooms/{room_id}")
@handle_service_errors
async def delete_room(room_id: int, db: Session = Depends(get_db)):
    PropertyService(db).delete_room(room_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


# Amenities


@router.post(
    "/amenities",
    response_model=SuccessResponse[AmenityResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_amenity(amenity_data: AmenityCreate, db: Session = Depends(get_db)):
    amenity = PropertyService(db).create_amenity(amenity_data)
    return ResponseFactory.created(data=serialize(AmenityResponse, amenity))


@router.put(
    "/rentals/{rental_id}/amenities/{amenity_id}",
    response_model=SuccessResponse[dict],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def assign_amenity(rental_id: int, amenity_id: int, db: Session = Depends(get_db)):
    """Assigning the same amenity twice is a conflict"""
    PropertyService(db).assign_amenity(rental_id, amenity_id)
    return ResponseFactory.created(
        data={"vacation_rental_id": rental_id, "amenity_id": amenity_id}
    )


@router.delete("/rentals/{rental_id}/amenities/{amenity_id}")
@handle_service_errors
async def remove_amenity(rental_id: int, amenity_id: int, db: Session = Depends(get_db)):
    PropertyService(db).remove_amenity(rental_id, amenity_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


@router.get(
    "/rentals/{rental_id}/amenities",
    response_model=SuccessResponse[List[AmenityResponse]],
)
@handle_service_errors
async def get_rental_amenities(rental_id: int, db: Session = Depends(get_db)):
    amenities = PropertyService(db).get_rental_amenities(rental_id)
    return ResponseFactory.success(data=serialize_all(AmenityResponse, amenities))


# Cancellation policies


@router.post(
    "/policies",
    response_model=SuccessResponse[PolicyResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_policy(policy_data: PolicyCreate, db: Session = Depends(get_db)):
    policy = PropertyService(db).create_policy(policy_data)
    return ResponseFactory.created(data=serialize(PolicyResponse, policy))


@router.put("/policies/{policy_id}", response_model=SuccessResponse[PolicyResponse])
@handle_service_errors
async def update_policy(
    policy_id: int, policy_data: PolicyUpdate, db: Session = Depends(get_db)
):
    policy = PropertyService(db).update_policy(policy_id, policy_data)
    return ResponseFactory.success(
        data=serialize(PolicyResponse, policy), message=ResponseMessages.UPDATED
    )


@router.put(
    "/rentals/{rental_id}/policies/{policy_id}",
    response_model=SuccessResponse[dict],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def assign_policy(rental_id: int, policy_id: int, db: Session = Depends(get_db)):
    PropertyService(db).assign_policy(rental_id, policy_id)
    return ResponseFactory.created(
        data={"vacation_rental_id": rental_id, "policy_id": policy_id}
    )


@router.delete("/rentals/{rental_id}/policies/{policy_id}")
@handle_service_errors
async def remove_policy(rental_id: int, policy_id: int, db: Session = Depends(get_db)):
    PropertyService(db).remove_policy(rental_id, policy_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


@router.get(
    "/rentals/{rental_id}/policies",
    response_model=SuccessResponse[List[PolicyResponse]],
)
@handle_service_errors
async def get_rental_policies(rental_id: int, db: Session = Depends(get_db)):
    policies = PropertyService(db).get_rental_policies(rental_id)
    return ResponseFactory.success(data=serialize_all(PolicyResponse, policies))


# Promotions


@router.post(
    "/promotions",
    response_model=SuccessResponse[PromotionResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_promotion(
    promotion_data: PromotionCreate, db: Session = Depends(get_db)
):
    promotion = PromotionService(db).create_promotion(promotion_data)
    return ResponseFactory.created(data=serialize(PromotionResponse, promotion))


@router.get(
    "/rentals/{rental_id}/promotions",
    response_model=SuccessResponse[List[PromotionResponse]],
)
@handle_service_errors
async def active_promotions(
    rental_id: int,
    on_date: Optional[date] = Query(None, description="Defaults to today"),
    db: Session = Depends(get_db),
):
    promotions = PromotionService(db).active_promotions(rental_id, on_date)
    return ResponseFactory.success(data=serialize_all(PromotionResponse, promotions))


@router.delete("/promotions/{promotion_id}")
@handle_service_errors
async def delete_promotion(promotion_id: int, db: Session = Depends(get_db)):
    PromotionService(db).delete_promotion(promotion_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)
