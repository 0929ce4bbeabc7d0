from datamart.seed_data import load_baseline
from datamart.services import (
    DatamartServiceError,
    EnumViolation,
    NotFoundError,
    ReferralCycleViolation,
)
from datamart.utils.router_helpers import status_for


def create_guest_dict(name="Alice Martin", email="alice@example.com"):
    return {"name": name, "email": email, "password": "secret123", "country": "France"}


def create_booking_dict(guest_id, room_id, check_in="2024-09-01", check_out="2024-09-07"):
    return {
        "guest_id": guest_id,
        "room_id": room_id,
        "check_in_date": check_in,
        "check_out_date": check_out,
        "total_price": 900.0,
    }


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"]["foreign_keys"] is True


def test_create_and_get_guest(client):
    response = client.post("/api/guests", json=create_guest_dict())

    assert response.status_code == 201
    guest = response.json()["data"]
    assert guest["email"] == "alice@example.com"
    assert "password" not in guest
    assert "password_hash" not in guest

    fetched = client.get(f"/api/guests/{guest['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["name"] == "Alice Martin"


def test_duplicate_email_is_conflict(client):
    client.post("/api/guests", json=create_guest_dict())

    response = client.post("/api/guests", json=create_guest_dict(name="Other"))

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["error_code"] == "UNIQUE_VIOLATION"
    assert detail["constraint"] == "unique"
    assert detail["entity"] == "Guest"
    assert detail["field"] == "email"


def test_missing_guest_is_not_found(client):
    response = client.get("/api/guests/999")

    assert response.status_code == 404
    assert response.json()["detail"]["error_code"] == "NOT_FOUND"


def test_invalid_stay_is_unprocessable(client, build):
    guest = build.guest()
    room = build.room()

    response = client.post(
        "/api/bookings",
        json=create_booking_dict(guest.id, room.id, check_in="2024-09-07", check_out="2024-09-01"),
    )

    assert response.status_code == 422
    assert response.json()["detail"]["error_code"] == "BUSINESS_RULE_VIOLATION"


def test_unknown_payment_status_is_unprocessable(client, build):
    booking = build.booking()

    response = client.put(
        f"/api/bookings/{booking.id}/status", json={"payment_status": "Refunded"}
    )

    assert response.status_code == 422


def test_booking_flow(client, build):
    guest = build.guest()
    room = build.room()

    created = client.post("/api/bookings", json=create_booking_dict(guest.id, room.id))
    assert created.status_code == 201
    booking = created.json()["data"]
    assert booking["length_of_stay"] == 6
    assert booking["payment_status"] == "Pending"

    paid = client.post(
        "/api/transactions",
        json={
            "guest_id": guest.id,
            "booking_id": booking["id"],
            "amount": 900.0,
            "payment_method": "SOFORT_Payment",
            "transaction_type": "Payment",
            "description": "Booking for vacation rental",
        },
    )
    assert paid.status_code == 201

    cancelled = client.put(
        f"/api/bookings/{booking['id']}/status",
        json={
            "payment_status": "Cancelled",
            "date_of_cancellation": "2024-08-30",
            "cancellation_refund": 450.0,
        },
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["data"]["date_of_cancellation"] == "2024-08-30"

    ledger = client.get(f"/api/bookings/{booking['id']}/transactions")
    assert [t["payment_method"] for t in ledger.json()["data"]] == ["SOFORT_Payment"]


def test_referral_cycle_is_conflict(client, build):
    a = build.host()
    b = build.host(referred_by_host_id=a.id)

    response = client.put(
        f"/api/hosts/{a.id}/referral", json={"referred_by_host_id": b.id}
    )

    assert response.status_code == 409
    assert response.json()["detail"]["error_code"] == "REFERRAL_CYCLE"


def test_duplicate_amenity_assignment_is_conflict(client, build):
    rental = build.rental()
    amenity = build.amenity()
    url = f"/api/rentals/{rental.id}/amenities/{amenity.id}"

    assert client.put(url).status_code == 201
    response = client.put(url)

    assert response.status_code == 409
    assert response.json()["detail"]["entity"] == "VacationRentalAmenity"


def test_deleting_admin_guest_is_conflict(client, build):
    guest = build.guest()
    build.admin(guest=guest)

    response = client.delete(f"/api/guests/{guest.id}")

    assert response.status_code == 409
    assert response.json()["detail"]["error_code"] == "FOREIGN_KEY_VIOLATION"


def test_guest_audit_trail(client, build):
    guest = build.guest()
    network = client.post("/api/social-networks", json={"network_name": "Facebook"})
    network_id = network.json()["data"]["id"]

    client.post(
        f"/api/guests/{guest.id}/social-networks",
        json={"network_id": network_id, "profile_url": "https://facebook.com/guest"},
    )
    client.post(
        f"/api/guests/{guest.id}/logins",
        json={"ip_address": "10.0.0.1", "login_timestamp": "2024-08-01T09:00:00"},
    )
    client.post(
        f"/api/guests/{guest.id}/logins",
        json={"ip_address": "10.0.0.2", "login_timestamp": "2024-08-02T09:00:00"},
    )
    client.post(f"/api/guests/{guest.id}/notifications", json={"content": "Welcome!"})

    networks = client.get(f"/api/guests/{guest.id}/social-networks").json()["data"]
    logins = client.get(f"/api/guests/{guest.id}/logins").json()["data"]
    notifications = client.get(f"/api/guests/{guest.id}/notifications").json()["data"]

    assert [n["network_id"] for n in networks] == [network_id]
    assert [entry["ip_address"] for entry in logins] == ["10.0.0.2", "10.0.0.1"]
    assert notifications[0]["content"] == "Welcome!"
    assert client.get("/api/guests/999/logins").status_code == 404


def test_missing_parent_is_conflict(client):
    response = client.post(
        "/api/rooms", json={"vacation_rental_id": 42, "room_type": "Suite"}
    )

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["error_code"] == "FOREIGN_KEY_VIOLATION"
    assert detail["field"] == "vacation_rental_id"


def test_reports(client, db_session):
    load_baseline(db_session)

    bookings = client.get("/api/reports/guest-bookings")
    integrity = client.get("/api/reports/integrity")

    assert bookings.status_code == 200
    assert len(bookings.json()["data"]) == 5
    assert integrity.json()["data"]["orphaned_bookings"] == []
    assert integrity.json()["data"]["table_counts"]["guests"] == 5


def test_status_mapping():
    assert status_for(NotFoundError("missing")) == 404
    assert status_for(ReferralCycleViolation("cycle")) == 409
    assert status_for(EnumViolation("bad value")) == 422
    assert status_for(DatamartServiceError("unexpected")) == 500


def test_delete_returns_plain_message(client, build):
    rental_id = build.rental().id

    response = client.delete(f"/api/rentals/{rental_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Deleted successfully"}
    assert client.get(f"/api/rentals/{rental_id}").status_code == 404
