from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import date, datetime
from ..utils.constants import AppConstants
from ..utils.validation import CustomValidators


class GuestBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, description="Unique across all guests")
    phone_number: Optional[str] = Field(None, max_length=AppConstants.MAX_PHONE_LENGTH)
    profile_picture: Optional[str] = Field(None, max_length=255)
    street: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=255)
    state: Optional[str] = Field(None, max_length=255)
    country: Optional[str] = Field(None, max_length=255)
    gdpr_acknowledgement: bool = False
    language_settings: Optional[str] = Field(None, max_length=255)

    @validator("email")
    def validate_email(cls, v):
        return CustomValidators.email(v)

    @validator("phone_number")
    def validate_phone(cls, v):
        return CustomValidators.phone(v)


class GuestCreate(GuestBase):
    password: str = Field(..., min_length=1, description="Stored as a hash only")


class GuestUpdate(BaseModel):
    """Explicit field updates; omitted fields are left alone"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, min_length=1)
    phone_number: Optional[str] = Field(None, max_length=AppConstants.MAX_PHONE_LENGTH)
    profile_picture: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    gdpr_acknowledgement: Optional[bool] = None
    language_settings: Optional[str] = None

    @validator("email")
    def validate_email(cls, v):
        return CustomValidators.email(v) if v is not None else v

    @validator("phone_number")
    def validate_phone(cls, v):
        return CustomValidators.phone(v)


class GuestResponse(GuestBase):
    id: int

    class Config:
        from_attributes = True


class HostCreate(BaseModel):
    rating: Optional[float] = Field(
        None, ge=AppConstants.MIN_HOST_RATING, le=AppConstants.MAX_HOST_RATING
    )
    verified: bool = False
    host_since: Optional[date] = None
    stars: Optional[int] = Field(
        None, ge=AppConstants.MIN_STARS, le=AppConstants.MAX_STARS
    )
    external_reviews: Optional[str] = None
    referred_by_host_id: Optional[int] = None


class HostUpdate(BaseModel):
    rating: Optional[float] = Field(
        None, ge=AppConstants.MIN_HOST_RATING, le=AppConstants.MAX_HOST_RATING
    )
    verified: Optional[bool] = None
    stars: Optional[int] = Field(
        None, ge=AppConstants.MIN_STARS, le=AppConstants.MAX_STARS
    )
    external_reviews: Optional[str] = None


class HostResponse(HostCreate):
    id: int
    guest_id: int

    class Config:
        from_attributes = True


class ReferralUpdate(BaseModel):
    referred_by_host_id: Optional[int] = Field(
        None, description="Referring host, or null to clear the referral"
    )


class TravelAdminCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255)
    phone_number: Optional[str] = Field(None, max_length=AppConstants.MAX_PHONE_LENGTH)
    guest_id: int

    @validator("email")
    def validate_email(cls, v):
        return CustomValidators.email(v)

    @validator("phone_number")
    def validate_phone(cls, v):
        return CustomValidators.phone(v)


class TravelAdminResponse(TravelAdminCreate):
    id: int

    class Config:
        from_attributes = True


class SocialNetworkCreate(BaseModel):
    network_name: str = Field(..., min_length=1, max_length=255)
    url: Optional[str] = Field(None, max_length=255)


class SocialNetworkResponse(SocialNetworkCreate):
    id: int

    class Config:
        from_attributes = True


class GuestSocialNetworkCreate(BaseModel):
    network_id: int
    profile_url: Optional[str] = Field(None, max_length=255)


class GuestSocialNetworkResponse(GuestSocialNetworkCreate):
    id: int
    guest_id: int

    class Config:
        from_attributes = True


class LoginRecord(BaseModel):
    ip_address: Optional[str] = Field(None, max_length=255)
    login_timestamp: Optional[datetime] = None


class LoginHistoryResponse(BaseModel):
    id: int
    guest_id: int
    ip_address: Optional[str] = None
    login_timestamp: Optional[datetime] = None

    class Config:
        from_attributes = True


class NotificationCreate(BaseModel):
    content: str = Field(..., min_length=1)
    timestamp: Optional[datetime] = None


class NotificationResponse(NotificationCreate):
    id: int
    guest_id: int

    class Config:
        from_attributes = True
