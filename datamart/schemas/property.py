from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from ..utils.constants import AppConstants


class CityCreate(BaseModel):
    city_name: str = Field(..., min_length=1, max_length=255)
    country: Optional[str] = Field(None, max_length=255)


class CityResponse(CityCreate):
    id: int

    class Config:
        from_attributes = True


class LocationCreate(BaseModel):
    city_id: Optional[int] = Field(None, description="Unresolved locations have no city")
    country: Optional[str] = Field(None, max_length=255)
    part_of_city: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=AppConstants.MAX_PHONE_LENGTH)
    email: Optional[str] = Field(None, max_length=255)


class LocationResponse(LocationCreate):
    id: int

    class Config:
        from_attributes = True


class RentalBase(BaseModel):
    property_type: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    max_guests: Optional[int] = Field(None, gt=0)
    rate_per_person: Optional[float] = Field(None, ge=0)
    own_bathroom: Optional[bool] = None
    pet_friendly: Optional[bool] = None
    free_parking: Optional[bool] = None
    number_of_beds: Optional[int] = Field(None, ge=0)
    calendar_availability: Optional[str] = None
    proximity_to_beach: Optional[str] = Field(None, max_length=255)
    proximity_to_shops: Optional[str] = Field(None, max_length=255)
    proximity_to_sightseeing: Optional[str] = Field(None, max_length=255)


class RentalCreate(RentalBase):
    host_id: int
    location_id: int


class RentalUpdate(RentalBase):
    pass


class RentalResponse(RentalCreate):
    id: int

    class Config:
        from_attributes = True


class RoomCreate(BaseModel):
    vacation_rental_id: int
    room_type: Optional[str] = Field(None, max_length=255)
    price_per_night: Optional[float] = Field(None, ge=0)
    available_from: Optional[date] = None
    available_to: Optional[date] = None


class RoomResponse(RoomCreate):
    id: int

    class Config:
        from_attributes = True


class AmenityCreate(BaseModel):
    amenity_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class AmenityResponse(AmenityCreate):
    id: int

    class Config:
        from_attributes = True


class PolicyCreate(BaseModel):
    policy_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class PolicyUpdate(BaseModel):
    policy_name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class PolicyResponse(PolicyCreate):
    id: int

    class Config:
        from_attributes = True


class PromotionCreate(BaseModel):
    vacation_rental_id: int
    discount_percentage: float = Field(
        ..., ge=0, le=AppConstants.MAX_DISCOUNT_PERCENTAGE
    )
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class PromotionResponse(PromotionCreate):
    id: int

    class Config:
        from_attributes = True
