from datetime import date

import pytest

from datamart.models import (
    Amenity,
    Booking,
    CancellationPolicy,
    Location,
    Promotion,
    Room,
    VacationRental,
    VacationRentalAmenity,
    VacationRentalPolicy,
)
from datamart.schemas.property import (
    LocationCreate,
    PolicyUpdate,
    PromotionCreate,
    RentalCreate,
    RentalUpdate,
    RoomCreate,
)
from datamart.services import (
    BusinessRuleViolation,
    ForeignKeyViolation,
    GeographyService,
    NotFoundError,
    PromotionService,
    PropertyService,
    UniqueViolation,
)


class TestRentals:
    def test_rental_requires_existing_host(self, db_session, build):
        location = build.location()

        with pytest.raises(ForeignKeyViolation) as exc_info:
            PropertyService(db_session).create_rental(
                RentalCreate(host_id=77, location_id=location.id)
            )

        assert exc_info.value.field == "host_id"
        assert db_session.query(VacationRental).count() == 0

    def test_update_rental(self, db_session, build):
        rental = build.rental(max_guests=2)

        updated = PropertyService(db_session).update_rental(
            rental.id, RentalUpdate(max_guests=6, pet_friendly=True)
        )

        assert updated.max_guests == 6
        assert updated.pet_friendly is True
        assert updated.property_type == "Apartment"

    def test_list_host_rentals(self, db_session, build):
        host = build.host()
        first = build.rental(host=host)
        second = build.rental(host=host)
        build.rental()

        rentals = PropertyService(db_session).list_host_rentals(host.id)

        assert [r.id for r in rentals] == [first.id, second.id]

    def test_delete_rental_cascades(self, db_session, build):
        rental = build.rental()
        room = build.room(rental=rental)
        build.booking(room=room)
        service = PropertyService(db_session)
        amenity = build.amenity()
        policy = build.policy()
        service.assign_amenity(rental.id, amenity.id)
        service.assign_policy(rental.id, policy.id)
        PromotionService(db_session).create_promotion(
            PromotionCreate(vacation_rental_id=rental.id, discount_percentage=10.0)
        )

        service.delete_rental(rental.id)

        db_session.expire_all()
        for model in (
            VacationRental,
            Room,
            Booking,
            VacationRentalAmenity,
            VacationRentalPolicy,
            Promotion,
        ):
            assert db_session.query(model).count() == 0, model.__name__
        # Catalog rows are shared and stay
        assert db_session.query(Amenity).count() == 1
        assert db_session.query(CancellationPolicy).count() == 1


class TestRooms:
    def test_room_window_must_be_ordered(self, db_session, build):
        rental = build.rental()

        with pytest.raises(BusinessRuleViolation):
            PropertyService(db_session).add_room(
                RoomCreate(
                    vacation_rental_id=rental.id,
                    available_from=date(2024, 3, 31),
                    available_to=date(2024, 1, 1),
                )
            )

    def test_open_ended_room_window_accepted(self, db_session, build):
        rental = build.rental()

        room = PropertyService(db_session).add_room(
            RoomCreate(vacation_rental_id=rental.id, available_from=date(2024, 1, 1))
        )

        assert room.available_to is None

    def test_room_needs_rental(self, db_session):
        with pytest.raises(ForeignKeyViolation):
            PropertyService(db_session).add_room(RoomCreate(vacation_rental_id=3))


class TestAmenitiesAndPolicies:
    def test_amenity_assignment_is_unique(self, db_session, build):
        rental = build.rental()
        amenity = build.amenity("WiFi")
        service = PropertyService(db_session)
        service.assign_amenity(rental.id, amenity.id)

        with pytest.raises(UniqueViolation) as exc_info:
            service.assign_amenity(rental.id, amenity.id)

        assert exc_info.value.entity == "VacationRentalAmenity"
        assert db_session.query(VacationRentalAmenity).count() == 1

    def test_rental_amenities_sorted_by_name(self, db_session, build):
        rental = build.rental()
        service = PropertyService(db_session)
        for name in ("Parking", "Air Conditioning", "WiFi"):
            service.assign_amenity(rental.id, build.amenity(name).id)

        names = [a.amenity_name for a in service.get_rental_amenities(rental.id)]

        assert names == ["Air Conditioning", "Parking", "WiFi"]

    def test_remove_amenity(self, db_session, build):
        rental = build.rental()
        amenity = build.amenity()
        service = PropertyService(db_session)
        service.assign_amenity(rental.id, amenity.id)

        service.remove_amenity(rental.id, amenity.id)

        assert service.get_rental_amenities(rental.id) == []
        with pytest.raises(NotFoundError):
            service.remove_amenity(rental.id, amenity.id)

    def test_deleting_amenity_unlinks_it(self, db_session, build):
        rental = build.rental()
        amenity = build.amenity()
        service = PropertyService(db_session)
        service.assign_amenity(rental.id, amenity.id)

        service._delete(db_session.get(Amenity, amenity.id))

        db_session.expire_all()
        assert db_session.query(VacationRentalAmenity).count() == 0
        assert db_session.get(VacationRental, rental.id) is not None

    def test_policy_assignment_is_unique(self, db_session, build):
        rental = build.rental()
        policy = build.policy()
        service = PropertyService(db_session)
        service.assign_policy(rental.id, policy.id)

        with pytest.raises(UniqueViolation):
            service.assign_policy(rental.id, policy.id)

    def test_list_and_remove_policies(self, db_session, build):
        rental = build.rental()
        flexible = build.policy()
        strict = build.policy("Strict", "50% refund up to 7 days before arrival")
        service = PropertyService(db_session)
        service.assign_policy(rental.id, strict.id)
        service.assign_policy(rental.id, flexible.id)

        assert [p.policy_name for p in service.get_rental_policies(rental.id)] == [
            "Flexible",
            "Strict",
        ]

        service.remove_policy(rental.id, flexible.id)

        assert [p.id for p in service.get_rental_policies(rental.id)] == [strict.id]
        assert db_session.get(CancellationPolicy, flexible.id) is not None

    def test_update_policy(self, db_session, build):
        policy = build.policy("Strict", "50% refund up to 7 days before arrival")

        updated = PropertyService(db_session).update_policy(
            policy.id, PolicyUpdate(description="50% refund up to 10 days before arrival")
        )

        assert updated.policy_name == "Strict"
        assert updated.description == "50% refund up to 10 days before arrival"


class TestGeography:
    def test_city_delete_cascades_locations(self, db_session, build):
        city = build.city("Zagreb", "Croatia")
        location = build.location(city=city)
        location_id = location.id
        build.room(rental=build.rental(location=location))
        unplaced = GeographyService(db_session).create_location(
            LocationCreate(country="Lebanon", address="Hamra Street, Beirut")
        )

        GeographyService(db_session).delete_city(city.id)

        db_session.expire_all()
        assert [loc.id for loc in db_session.query(Location).all()] == [unplaced.id]
        assert db_session.query(VacationRental).count() == 0
        assert db_session.query(Room).count() == 0
        with pytest.raises(NotFoundError):
            GeographyService(db_session).get_location(location_id)

    def test_location_without_city(self, db_session):
        location = GeographyService(db_session).create_location(
            LocationCreate(country="Lebanon", address="Hamra Street, Beirut")
        )

        assert location.city_id is None

    def test_location_delete_cascades_rentals(self, db_session, build):
        location = build.location()
        build.room(rental=build.rental(location=location))

        GeographyService(db_session).delete_location(location.id)

        db_session.expire_all()
        assert db_session.query(VacationRental).count() == 0
        assert db_session.query(Room).count() == 0

    def test_list_cities_sorted(self, db_session, build):
        for name in ("Wien", "Beirut", "Rome"):
            build.city(name, "X")

        names = [c.city_name for c in GeographyService(db_session).list_cities()]

        assert names == ["Beirut", "Rome", "Wien"]


class TestPromotions:
    def test_promotion_window_must_be_ordered(self, db_session, build):
        rental = build.rental()

        with pytest.raises(BusinessRuleViolation):
            PromotionService(db_session).create_promotion(
                PromotionCreate(
                    vacation_rental_id=rental.id,
                    discount_percentage=10,
                    start_date=date(2024, 9, 7),
                    end_date=date(2024, 9, 1),
                )
            )

    def test_active_promotions(self, db_session, build):
        rental = build.rental()
        service = PromotionService(db_session)
        september = service.create_promotion(
            PromotionCreate(
                vacation_rental_id=rental.id,
                discount_percentage=10,
                start_date=date(2024, 9, 1),
                end_date=date(2024, 9, 30),
            )
        )
        open_ended = service.create_promotion(
            PromotionCreate(
                vacation_rental_id=rental.id,
                discount_percentage=15,
                start_date=date(2024, 8, 1),
            )
        )

        active = service.active_promotions(rental.id, date(2024, 9, 15))
        later = service.active_promotions(rental.id, date(2024, 12, 1))

        assert [p.id for p in active] == [open_ended.id, september.id]
        assert [p.id for p in later] == [open_ended.id]

    def test_discount_bounds_rejected_by_schema(self):
        with pytest.raises(ValueError):
            PromotionCreate(vacation_rental_id=1, discount_percentage=120)
