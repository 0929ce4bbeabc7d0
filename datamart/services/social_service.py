from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc

from ..models.guest import Guest
from ..models.social_network import SocialNetwork, GuestSocialNetwork
from ..models.login_history import LoginHistory
from ..models.notification import Notification
from ..schemas.guest import SocialNetworkCreate, GuestSocialNetworkCreate
from .base import BaseService


class SocialService(BaseService):
    """
    Social links and the guest audit trail.

    Login history and notifications are append-only: rows are written once
    and there is no update path for them.
    """

    def create_social_network(self, network_data: SocialNetworkCreate) -> SocialNetwork:
        return self._save(SocialNetwork(**network_data.dict()))

    def link_social_network(
        self, guest_id: int, link_data: GuestSocialNetworkCreate
    ) -> GuestSocialNetwork:
        """Link a guest profile; linking the same network twice is allowed"""
        self._require_parent(Guest, guest_id, "GuestSocialNetwork", "guest_id")
        self._require_parent(
            SocialNetwork, link_data.network_id, "GuestSocialNetwork", "network_id"
        )
        return self._save(GuestSocialNetwork(guest_id=guest_id, **link_data.dict()))

    def get_guest_networks(self, guest_id: int) -> List[GuestSocialNetwork]:
        self._get_or_raise(Guest, guest_id)
        return (
            self.db.query(GuestSocialNetwork)
            .filter(GuestSocialNetwork.guest_id == guest_id)
            .order_by(GuestSocialNetwork.id)
            .all()
        )

    def record_login(
        self,
        guest_id: int,
        ip_address: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> LoginHistory:
        self._require_parent(Guest, guest_id, "LoginHistory", "guest_id")
        entry = LoginHistory(guest_id=guest_id, ip_address=ip_address)
        if timestamp is not None:
            entry.login_timestamp = timestamp
        return self._save(entry)

    def get_login_history(self, guest_id: int, limit: int = 50) -> List[LoginHistory]:
        self._get_or_raise(Guest, guest_id)
        return (
            self.db.query(LoginHistory)
            .filter(LoginHistory.guest_id == guest_id)
            .order_by(desc(LoginHistory.login_timestamp), desc(LoginHistory.id))
            .limit(limit)
            .all()
        )

    def notify_guest(
        self, guest_id: int, content: str, timestamp: Optional[datetime] = None
    ) -> Notification:
        self._require_parent(Guest, guest_id, "Notification", "guest_id")
        notification = Notification(guest_id=guest_id, content=content)
        if timestamp is not None:
            notification.timestamp = timestamp
        return self._save(notification)

    def get_notifications(self, guest_id: int, limit: int = 50) -> List[Notification]:
        self._get_or_raise(Guest, guest_id)
        return (
            self.db.query(Notification)
            .filter(Notification.guest_id == guest_id)
            .order_by(desc(Notification.timestamp), desc(Notification.id))
            .limit(limit)
            .all()
        )
