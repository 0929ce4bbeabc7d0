from create_mock_data import MockDataGenerator
from datamart.database_setup import setup_database
from datamart.database_validator import (
    validate_delete_rules,
    validate_foreign_key_indexes,
    validate_model_relationships,
)
from datamart.services import ReportingService


def test_model_relationships_complete():
    assert validate_model_relationships() == []


def test_delete_rules_match_expected():
    assert validate_delete_rules() == []


def test_every_foreign_key_indexed(engine):
    assert validate_foreign_key_indexes(engine) == []


def test_setup_is_idempotent(engine):
    tables = setup_database(engine)

    assert "bookings" in tables
    assert setup_database(engine) == tables


def test_mock_data_respects_integrity(db_session):
    created = MockDataGenerator(db_session, seed=7).generate_all_data(guests=12, bookings=15)

    reporting = ReportingService(db_session)
    counts = reporting.table_counts()
    assert counts["guests"] == created["guests"] == 12
    assert counts["bookings"] == 15
    assert reporting.orphaned_bookings() == []
