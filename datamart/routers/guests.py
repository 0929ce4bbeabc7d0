from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..services.identity_service import IdentityService
from ..services.social_service import SocialService
from ..schemas.guest import (
    GuestCreate,
    GuestUpdate,
    GuestResponse,
    HostCreate,
    HostUpdate,
    HostResponse,
    ReferralUpdate,
    TravelAdminCreate,
    TravelAdminResponse,
    SocialNetworkCreate,
    SocialNetworkResponse,
    GuestSocialNetworkCreate,
    GuestSocialNetworkResponse,
    LoginRecord,
    LoginHistoryResponse,
    NotificationCreate,
    NotificationResponse,
)
from ..schemas.common import SuccessResponse, ResponseFactory
from ..utils.router_helpers import (
    handle_service_errors,
    serialize,
    serialize_all,
    RouterResponse,
)
from ..utils.constants import ResponseMessages

router = APIRouter(tags=["guests"])


@router.post(
    "/guests",
    response_model=SuccessResponse[GuestResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_guest(guest_data: GuestCreate, db: Session = Depends(get_db)):
    """Register a guest; the email must not be in use"""
    guest = IdentityService(db).create_guest(guest_data)
    return ResponseFactory.created(data=serialize(GuestResponse, guest))


@router.get("/guests/{guest_id}", response_model=SuccessResponse[GuestResponse])
@handle_service_errors
async def get_guest(guest_id: int, db: Session = Depends(get_db)):
    guest = IdentityService(db).get_guest(guest_id)
    return ResponseFactory.success(data=serialize(GuestResponse, guest))


@router.put("/guests/{guest_id}", response_model=SuccessResponse[GuestResponse])
@handle_service_errors
async def update_guest(
    guest_id: int, guest_data: GuestUpdate, db: Session = Depends(get_db)
):
    guest = IdentityService(db).update_guest(guest_id, guest_data)
    return ResponseFactory.success(
        data=serialize(GuestResponse, guest), message=ResponseMessages.UPDATED
    )


@router.delete("/guests/{guest_id}")
@handle_service_errors
async def delete_guest(guest_id: int, db: Session = Depends(get_db)):
    """Delete a guest together with everything hanging off it"""
    IdentityService(db).delete_guest(guest_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


# Hosts


@router.post(
    "/guests/{guest_id}/host",
    response_model=SuccessResponse[HostResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def promote_to_host(
    guest_id: int, host_data: HostCreate, db: Session = Depends(get_db)
):
    host = IdentityService(db).promote_to_host(guest_id, host_data)
    return ResponseFactory.created(data=serialize(HostResponse, host))


@router.get("/hosts/{host_id}", response_model=SuccessResponse[HostResponse])
@handle_service_errors
async def get_host(host_id: int, db: Session = Depends(get_db)):
    host = IdentityService(db).get_host(host_id)
    return ResponseFactory.success(data=serialize(HostResponse, host))


@router.put("/hosts/{host_id}", response_model=SuccessResponse[HostResponse])
@handle_service_errors
async def update_host(host_id: int, host_data: HostUpdate, db: Session = Depends(get_db)):
    host = IdentityService(db).update_host(host_id, host_data)
    return ResponseFactory.success(
        data=serialize(HostResponse, host), message=ResponseMessages.UPDATED
    )


@router.put("/hosts/{host_id}/referral", response_model=SuccessResponse[HostResponse])
@handle_service_errors
async def set_referral(
    host_id: int, referral: ReferralUpdate, db: Session = Depends(get_db)
):
    """Point a host at its referrer, or clear the link with null"""
    host = IdentityService(db).set_referral(host_id, referral.referred_by_host_id)
    return ResponseFactory.success(
        data=serialize(HostResponse, host), message=ResponseMessages.UPDATED
    )


@router.get(
    "/hosts/{host_id}/referral-chain",
    response_model=SuccessResponse[List[HostResponse]],
)
@handle_service_errors
async def get_referral_chain(host_id: int, db: Session = Depends(get_db)):
    chain = IdentityService(db).referral_chain(host_id)
    return ResponseFactory.success(data=serialize_all(HostResponse, chain))


@router.delete("/hosts/{host_id}")
@handle_service_errors
async def delete_host(host_id: int, db: Session = Depends(get_db)):
    IdentityService(db).delete_host(host_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


# Travel administrators


@router.post(
    "/admins",
    response_model=SuccessResponse[TravelAdminResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_travel_admin(
    admin_data: TravelAdminCreate, db: Session = Depends(get_db)
):
    admin = IdentityService(db).create_travel_admin(admin_data)
    return ResponseFactory.created(data=serialize(TravelAdminResponse, admin))


@router.get("/admins/{admin_id}", response_model=SuccessResponse[TravelAdminResponse])
@handle_service_errors
async def get_travel_admin(admin_id: int, db: Session = Depends(get_db)):
    admin = IdentityService(db).get_travel_admin(admin_id)
    return ResponseFactory.success(data=serialize(TravelAdminResponse, admin))


@router.delete("/admins/{admin_id}")
@handle_service_errors
async def delete_travel_admin(admin_id: int, db: Session = Depends(get_db)):
    IdentityService(db).delete_travel_admin(admin_id)
    return RouterResponse.deleted(ResponseMessages.DELETED)


# Social networks, logins and notifications


@router.post(
    "/social-networks",
    response_model=SuccessResponse[SocialNetworkResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_social_network(
    network_data: SocialNetworkCreate, db: Session = Depends(get_db)
):
    network = SocialService(db).create_social_network(network_data)
    return ResponseFactory.created(data=serialize(SocialNetworkResponse, network))


@router.post(
    "/guests/{guest_id}/social-networks",
    response_model=SuccessResponse[GuestSocialNetworkResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def link_social_network(
    guest_id: int, link_data: GuestSocialNetworkCreate, db: Session = Depends(get_db)
):
    link = SocialService(db).link_social_network(guest_id, link_data)
    return ResponseFactory.created(data=serialize(GuestSocialNetworkResponse, link))


@router.get(
    "/guests/{guest_id}/social-networks",
    response_model=SuccessResponse[List[GuestSocialNetworkResponse]],
)
@handle_service_errors
async def get_guest_networks(guest_id: int, db: Session = Depends(get_db)):
    links = SocialService(db).get_guest_networks(guest_id)
    return ResponseFactory.success(data=serialize_all(GuestSocialNetworkResponse, links))


@router.post(
    "/guests/{guest_id}/logins",
    response_model=SuccessResponse[LoginHistoryResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def record_login(
    guest_id: int, login: LoginRecord, db: Session = Depends(get_db)
):
    entry = SocialService(db).record_login(
        guest_id, ip_address=login.ip_address, timestamp=login.login_timestamp
    )
    return ResponseFactory.created(data=serialize(LoginHistoryResponse, entry))


@router.get(
    "/guests/{guest_id}/logins",
    response_model=SuccessResponse[List[LoginHistoryResponse]],
)
@handle_service_errors
async def get_login_history(
    guest_id: int,
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
):
    entries = SocialService(db).get_login_history(guest_id, limit=limit)
    return ResponseFactory.success(data=serialize_all(LoginHistoryResponse, entries))


@router.post(
    "/guests/{guest_id}/notifications",
    response_model=SuccessResponse[NotificationResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def notify_guest(
    guest_id: int, notification: NotificationCreate, db: Session = Depends(get_db)
):
    entry = SocialService(db).notify_guest(
        guest_id, notification.content, timestamp=notification.timestamp
    )
    return ResponseFactory.created(data=serialize(NotificationResponse, entry))


@router.get(
    "/guests/{guest_id}/notifications",
    response_model=SuccessResponse[List[NotificationResponse]],
)
@handle_service_errors
async def get_notifications(
    guest_id: int,
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
):
    entries = SocialService(db).get_notifications(guest_id, limit=limit)
    return ResponseFactory.success(data=serialize_all(NotificationResponse, entries))
