import logging
from typing import List, Optional

from sqlalchemy import func

from ..models.guest import Guest
from ..models.host import Host
from ..models.travel_admin import TravelAdmin
from ..schemas.guest import (
    GuestCreate,
    GuestUpdate,
    HostCreate,
    HostUpdate,
    TravelAdminCreate,
)
from ..utils.security import get_password_hash, verify_password
from .base import (
    BaseService,
    ReferralCycleViolation,
    UniqueViolation,
)

logger = logging.getLogger(__name__)


class IdentityService(BaseService):
    """Guests, their host and admin roles, and the host referral graph"""

    # Guests

    def create_guest(self, guest_data: GuestCreate) -> Guest:
        """Create a guest; email must be unused"""
        self._ensure_email_free(guest_data.email)

        guest = Guest(
            **guest_data.dict(exclude={"password"}),
            password_hash=get_password_hash(guest_data.password),
        )
        return self._save(guest)

    def get_guest(self, guest_id: int) -> Guest:
        return self._get_or_raise(Guest, guest_id)

    def get_guest_by_email(self, email: str) -> Optional[Guest]:
        return self.db.query(Guest).filter(Guest.email == email).first()

    def update_guest(self, guest_id: int, guest_data: GuestUpdate) -> Guest:
        guest = self._get_or_raise(Guest, guest_id)
        updates = guest_data.dict(exclude_unset=True)

        if "email" in updates and updates["email"] != guest.email:
            self._ensure_email_free(updates["email"], exclude_id=guest_id)
        if "password" in updates:
            updates["password_hash"] = get_password_hash(updates.pop("password"))

        self._apply_updates(guest, updates)
        self._commit("Guest")
        self.db.refresh(guest)
        return guest

    def verify_credentials(self, email: str, password: str) -> bool:
        guest = self.get_guest_by_email(email)
        if not guest:
            return False
        return verify_password(password, guest.password_hash)

    def delete_guest(self, guest_id: int) -> None:
        """
        Remove a guest together with everything owned through the guest row:
        host profile (and its rentals), bookings, reviews written, social
        links, login history and notifications.

        A guest still assigned as travel admin is protected by the foreign
        key and the delete fails with ForeignKeyViolation.
        """
        guest = self._get_or_raise(Guest, guest_id)
        logger.info(f"Deleting guest {guest_id} with cascading dependents")
        self._delete(guest, "Guest")

    def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None):
        query = self.db.query(Guest.id).filter(Guest.email == email)
        if exclude_id is not None:
            query = query.filter(Guest.id != exclude_id)
        if query.first():
            raise UniqueViolation(
                f"Email {email} is already registered",
                entity="Guest",
                field="email",
            )

    # Hosts

    def promote_to_host(self, guest_id: int, host_data: HostCreate) -> Host:
        """Give a guest a host profile (at most one per guest)"""
        self._require_parent(Guest, guest_id, "Host", "guest_id")

        if self.db.query(Host.id).filter(Host.guest_id == guest_id).first():
            raise UniqueViolation(
                f"Guest {guest_id} is already a host",
                entity="Host",
                field="guest_id",
            )

        if host_data.referred_by_host_id is not None:
            self._require_parent(
                Host, host_data.referred_by_host_id, "Host", "referred_by_host_id"
            )

        host = Host(guest_id=guest_id, **host_data.dict())
        return self._save(host)

    def get_host(self, host_id: int) -> Host:
        return self._get_or_raise(Host, host_id)

    def update_host(self, host_id: int, host_data: HostUpdate) -> Host:
        host = self._get_or_raise(Host, host_id)
        self._apply_updates(host, host_data.dict(exclude_unset=True))
        self._commit("Host")
        self.db.refresh(host)
        return host

    def set_referral(self, host_id: int, referrer_id: Optional[int]) -> Host:
        """Point a host at its referrer, or clear it with None"""
        host = self._get_or_raise(Host, host_id)

        if referrer_id is not None:
            self._require_parent(Host, referrer_id, "Host", "referred_by_host_id")
            self._ensure_no_cycle(host_id, referrer_id)

        host.referred_by_host_id = referrer_id
        self._commit("Host", "referred_by_host_id")
        self.db.refresh(host)
        return host

    def referral_chain(self, host_id: int) -> List[Host]:
        """Referrers of a host, nearest first"""
        host = self._get_or_raise(Host, host_id)
        chain = []
        seen = {host.id}
        current = host.referred_by_host_id
        while current is not None and current not in seen:
            seen.add(current)
            referrer = self._lookup(Host, current)
            if referrer is None:
                break
            chain.append(referrer)
            current = referrer.referred_by_host_id
        return chain

    def delete_host(self, host_id: int) -> None:
        """
        Remove a host profile. Its rentals go with it (and everything below
        them); hosts it referred stay, with their referral pointer cleared.
        """
        host = self._get_or_raise(Host, host_id)
        logger.info(f"Deleting host {host_id} with cascading rentals")
        self._delete(host, "Host")

    def _ensure_no_cycle(self, host_id: int, referrer_id: int) -> None:
        """Walk up from the referrer; reaching host_id would close a cycle"""
        limit = self.db.query(func.count(Host.id)).scalar() or 0
        current = referrer_id
        steps = 0
        while current is not None and steps <= limit:
            if current == host_id:
                raise ReferralCycleViolation(
                    f"Host {referrer_id} cannot refer host {host_id}: "
                    "the referral chain would loop back",
                    entity="Host",
                    field="referred_by_host_id",
                )
            current = (
                self.db.query(Host.referred_by_host_id)
                .filter(Host.id == current)
                .scalar()
            )
            steps += 1

    # Travel admins

    def create_travel_admin(self, admin_data: TravelAdminCreate) -> TravelAdmin:
        self._require_parent(Guest, admin_data.guest_id, "TravelAdmin", "guest_id")

        if (
            self.db.query(TravelAdmin.id)
            .filter(TravelAdmin.email == admin_data.email)
            .first()
        ):
            raise UniqueViolation(
                f"Email {admin_data.email} is already used by an admin",
                entity="TravelAdmin",
                field="email",
            )
        if (
            self.db.query(TravelAdmin.id)
            .filter(TravelAdmin.guest_id == admin_data.guest_id)
            .first()
        ):
            raise UniqueViolation(
                f"Guest {admin_data.guest_id} is already a travel admin",
                entity="TravelAdmin",
                field="guest_id",
            )

        return self._save(TravelAdmin(**admin_data.dict()))

    def get_travel_admin(self, admin_id: int) -> TravelAdmin:
        return self._get_or_raise(TravelAdmin, admin_id)

    def delete_travel_admin(self, admin_id: int) -> None:
        admin = self._get_or_raise(TravelAdmin, admin_id)
        logger.info(f"Deleting travel admin {admin_id} and their reservations")
        self._delete(admin, "TravelAdmin")

