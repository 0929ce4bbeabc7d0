from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from datamart.database import Base
from datamart.database_reset import drop_order, main, reset_database
from datamart.models import Guest, Booking
from datamart.services import ReportingService


def count(engine, model):
    session = sessionmaker(bind=engine)()
    try:
        return session.query(model).count()
    finally:
        session.close()


def test_drop_order_children_before_parents():
    order = drop_order()

    assert set(order) == set(Base.metadata.tables)
    assert order.index("bookings") < order.index("rooms")
    assert order.index("rooms") < order.index("vacation_rentals")
    assert order.index("vacation_rentals") < order.index("hosts")
    assert order.index("hosts") < order.index("guests")
    assert order.index("reservations") < order.index("travel_admins")
    assert order.index("vacation_rental_amenities") < order.index("amenities")


def test_reset_loads_baseline(engine):
    summary = reset_database(engine)

    assert summary["dropped"] == drop_order()
    assert summary["baseline"]["guests"] == 5
    assert count(engine, Guest) == 5
    assert count(engine, Booking) == 5


def test_reset_is_repeatable(engine):
    reset_database(engine)
    reset_database(engine)

    assert count(engine, Guest) == 5


def test_reset_without_baseline_clears_rows(engine):
    reset_database(engine)

    summary = reset_database(engine, load_baseline=False)

    assert summary["baseline"] is None
    session = sessionmaker(bind=engine)()
    try:
        counts = ReportingService(session).table_counts()
    finally:
        session.close()
    assert set(counts.values()) == {0}


def test_foreign_keys_enabled_after_reset(engine):
    reset_database(engine, load_baseline=False)

    with engine.connect() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_cli_without_baseline(monkeypatch, engine):
    monkeypatch.setattr("datamart.database_reset.default_engine", engine)

    assert main(["--no-baseline"]) == 0
    assert count(engine, Guest) == 0
