import logging
from typing import List

from ..models.host import Host
from ..models.location import Location
from ..models.vacation_rental import VacationRental
from ..models.room import Room
from ..models.amenity import Amenity, VacationRentalAmenity
from ..models.cancellation_policy import CancellationPolicy, VacationRentalPolicy
from ..schemas.property import (
    RentalCreate,
    RentalUpdate,
    RoomCreate,
    AmenityCreate,
    PolicyCreate,
    PolicyUpdate,
)
from ..utils.validation import ValidationHelpers
from .base import BaseService, BusinessRuleViolation, NotFoundError, UniqueViolation

logger = logging.getLogger(__name__)


class PropertyService(BaseService):
    """Rentals, their rooms, and the amenity/policy catalogs linked to them"""

    # Rentals

    def create_rental(self, rental_data: RentalCreate) -> VacationRental:
        self._require_parent(Host, rental_data.host_id, "VacationRental", "host_id")
        self._require_parent(
            Location, rental_data.location_id, "VacationRental", "location_id"
        )
        return self._save(VacationRental(**rental_data.dict()))

    def get_rental(self, rental_id: int) -> VacationRental:
        return self._get_or_raise(VacationRental, rental_id)

    def list_host_rentals(self, host_id: int) -> List[VacationRental]:
        self._get_or_raise(Host, host_id)
        return (
            self.db.query(VacationRental)
            .filter(VacationRental.host_id == host_id)
            .order_by(VacationRental.id)
            .all()
        )

    def update_rental(self, rental_id: int, rental_data: RentalUpdate) -> VacationRental:
        rental = self._get_or_raise(VacationRental, rental_id)
        self._apply_updates(rental, rental_data.dict(exclude_unset=True))
        self._commit("VacationRental")
        self.db.refresh(rental)
        return rental

    def delete_rental(self, rental_id: int) -> None:
        """Rooms, their bookings, amenity/policy links and promotions go too"""
        rental = self._get_or_raise(VacationRental, rental_id)
        logger.info(f"Deleting vacation rental {rental_id} with cascading rooms")
        self._delete(rental, "VacationRental")

    # Rooms

    def add_room(self, room_data: RoomCreate) -> Room:
        self._require_parent(
            VacationRental, room_data.vacation_rental_id, "Room", "vacation_rental_id"
        )
        if not ValidationHelpers.validate_date_window(
            room_data.available_from, room_data.available_to
        ):
            raise BusinessRuleViolation(
                "Room availability must open on or before it closes "
                f"({room_data.available_from} > {room_data.available_to})"
            )
        return self._save(Room(**room_data.dict()))

    def get_room(self, room_id: int) -> Room:
        return self._get_or_raise(Room, room_id)

    def list_rooms(self, rental_id: int) -> List[Room]:
        self._get_or_raise(VacationRental, rental_id)
        return (
            self.db.query(Room)
            .filter(Room.vacation_rental_id == rental_id)
            .order_by(Room.id)
            .all()
        )

    def delete_room(self, room_id: int) -> None:
        room = self._get_or_raise(Room, room_id)
        self._delete(room, "Room")

    # Amenities

    def create_amenity(self, amenity_data: AmenityCreate) -> Amenity:
        return self._save(Amenity(**amenity_data.dict()))

    def assign_amenity(self, rental_id: int, amenity_id: int) -> VacationRentalAmenity:
        self._require_parent(
            VacationRental, rental_id, "VacationRentalAmenity", "vacation_rental_id"
        )
        self._require_parent(Amenity, amenity_id, "VacationRentalAmenity", "amenity_id")

        if self._lookup(VacationRentalAmenity, (rental_id, amenity_id)) is not None:
            raise UniqueViolation(
                f"Amenity {amenity_id} is already assigned to rental {rental_id}",
                entity="VacationRentalAmenity",
                field="vacation_rental_id, amenity_id",
            )

        link = VacationRentalAmenity(vacation_rental_id=rental_id, amenity_id=amenity_id)
        return self._save(link)

    def remove_amenity(self, rental_id: int, amenity_id: int) -> None:
        link = self._lookup(VacationRentalAmenity, (rental_id, amenity_id))
        if link is None:
            raise NotFoundError(
                f"Amenity {amenity_id} is not assigned to rental {rental_id}"
            )
        self._delete(link)

    def get_rental_amenities(self, rental_id: int) -> List[Amenity]:
        self._get_or_raise(VacationRental, rental_id)
        return (
            self.db.query(Amenity)
            .join(VacationRentalAmenity, VacationRentalAmenity.amenity_id == Amenity.id)
            .filter(VacationRentalAmenity.vacation_rental_id == rental_id)
            .order_by(Amenity.amenity_name)
            .all()
        )

    # Cancellation policies

    def create_policy(self, policy_data: PolicyCreate) -> CancellationPolicy:
        return self._save(CancellationPolicy(**policy_data.dict()))

    def update_policy(
        self, policy_id: int, policy_data: PolicyUpdate
    ) -> CancellationPolicy:
        """Edit the catalog entry; reservation snapshots are not touched"""
        policy = self._get_or_raise(CancellationPolicy, policy_id)
        self._apply_updates(policy, policy_data.dict(exclude_unset=True))
        self._commit("CancellationPolicy")
        self.db.refresh(policy)
        return policy

    def assign_policy(self, rental_id: int, policy_id: int) -> VacationRentalPolicy:
        self._require_parent(
            VacationRental, rental_id, "VacationRentalPolicy", "vacation_rental_id"
        )
        self._require_parent(
            CancellationPolicy, policy_id, "VacationRentalPolicy", "policy_id"
        )

        if self._lookup(VacationRentalPolicy, (rental_id, policy_id)) is not None:
            raise UniqueViolation(
                f"Policy {policy_id} is already assigned to rental {rental_id}",
                entity="VacationRentalPolicy",
                field="vacation_rental_id, policy_id",
            )

        link = VacationRentalPolicy(vacation_rental_id=rental_id, policy_id=policy_id)
        return self._save(link)

    def remove_policy(self, rental_id: int, policy_id: int) -> None:
        link = self._lookup(VacationRentalPolicy, (rental_id, policy_id))
        if link is None:
            raise NotFoundError(
                f"Policy {policy_id} is not assigned to rental {rental_id}"
            )
        self._delete(link)

    def get_rental_policies(self, rental_id: int) -> List[CancellationPolicy]:
        self._get_or_raise(VacationRental, rental_id)
        return (
            self.db.query(CancellationPolicy)
            .join(
                VacationRentalPolicy,
                VacationRentalPolicy.policy_id == CancellationPolicy.id,
            )
            .filter(VacationRentalPolicy.vacation_rental_id == rental_id)
            .order_by(CancellationPolicy.id)
            .all()
        )
