#!/usr/bin/env python3
"""
Data Model Validation Script
Validates relationships, delete rules, and foreign-key indexes
"""

import logging

from sqlalchemy import inspect

from .database import engine, Base
from . import models  # noqa: F401  registers every model on Base

logger = logging.getLogger(__name__)

# Expected ON DELETE behaviour per (table, column)
DELETE_RULES = {
    ("hosts", "guest_id"): "CASCADE",
    ("hosts", "referred_by_host_id"): "SET NULL",
    ("travel_admins", "guest_id"): "RESTRICT",
    ("guest_social_networks", "guest_id"): "CASCADE",
    ("guest_social_networks", "network_id"): "CASCADE",
    ("login_history", "guest_id"): "CASCADE",
    ("notifications", "guest_id"): "CASCADE",
    ("locations", "city_id"): "CASCADE",
    ("vacation_rentals", "host_id"): "CASCADE",
    ("vacation_rentals", "location_id"): "CASCADE",
    ("rooms", "vacation_rental_id"): "CASCADE",
    ("vacation_rental_amenities", "vacation_rental_id"): "CASCADE",
    ("vacation_rental_amenities", "amenity_id"): "CASCADE",
    ("vacation_rental_policies", "vacation_rental_id"): "CASCADE",
    ("vacation_rental_policies", "policy_id"): "CASCADE",
    ("bookings", "guest_id"): "CASCADE",
    ("bookings", "room_id"): "CASCADE",
    ("transactions", "guest_id"): "CASCADE",
    ("transactions", "booking_id"): "CASCADE",
    ("reservations", "booking_id"): "CASCADE",
    ("reservations", "admin_id"): "CASCADE",
    ("reviews", "booking_id"): "CASCADE",
    ("reviews", "reviewer_id"): "CASCADE",
    ("customer_service", "booking_id"): "CASCADE",
    ("events", "booking_id"): "CASCADE",
    ("promotions", "vacation_rental_id"): "CASCADE",
}


def validate_model_relationships() -> list:
    """Every foreign key column needs a relationship to the table it points at"""
    logger.info("Validating model relationships...")
    issues = []

    for mapper in Base.registry.mappers:
        model = mapper.class_
        relationships = list(mapper.relationships)

        for column in mapper.columns:
            for fk in column.foreign_keys:
                target_table = fk.column.table.name
                has_relationship = any(
                    rel.mapper.class_.__tablename__ == target_table
                    for rel in relationships
                )
                if not has_relationship:
                    issues.append(
                        f"{model.__name__}.{column.name} -> {target_table}: Missing relationship"
                    )

    for issue in issues:
        logger.warning(issue)
    return issues


def validate_delete_rules() -> list:
    """Compare declared ON DELETE rules with the expected table"""
    logger.info("Validating delete rules...")
    issues = []
    declared = {}

    for table in Base.metadata.sorted_tables:
        for fk in table.foreign_keys:
            declared[(table.name, fk.parent.name)] = (fk.ondelete or "NO ACTION").upper()

    for key, expected in DELETE_RULES.items():
        actual = declared.get(key)
        if actual != expected:
            issues.append(f"{key[0]}.{key[1]}: expected {expected}, found {actual}")

    for key in declared.keys() - DELETE_RULES.keys():
        issues.append(f"{key[0]}.{key[1]}: no expected delete rule")

    for issue in issues:
        logger.warning(issue)
    return issues


def validate_foreign_key_indexes(bind=None) -> list:
    """Every foreign key must lead some index, unique constraint or primary key"""
    logger.info("Validating foreign key indexes...")
    inspector = inspect(bind or engine)
    issues = []

    for table_name in inspector.get_table_names():
        covered = set()
        for index in inspector.get_indexes(table_name):
            if index["column_names"]:
                covered.add(index["column_names"][0])
        for constraint in inspector.get_unique_constraints(table_name):
            if constraint["column_names"]:
                covered.add(constraint["column_names"][0])
        primary_key = inspector.get_pk_constraint(table_name)["constrained_columns"]
        if primary_key:
            covered.add(primary_key[0])

        foreign_keys = inspector.get_foreign_keys(table_name)
        logger.info(
            f"  {table_name}: {len(covered)} indexed leading columns, "
            f"{len(foreign_keys)} foreign keys"
        )
        for fk in foreign_keys:
            column = fk["constrained_columns"][0]
            if column not in covered:
                issues.append(f"{table_name}.{column}: foreign key without index")

    for issue in issues:
        logger.warning(issue)
    return issues


def main():
    """Run all validations"""
    logger.info("Starting data model validation...")

    results = {
        "Relationships": validate_model_relationships(),
        "Delete rules": validate_delete_rules(),
        "Foreign key indexes": validate_foreign_key_indexes(),
    }

    for name, issues in results.items():
        logger.info(f"  {name}: {'ok' if not issues else f'{len(issues)} issue(s)'}")

    if any(results.values()):
        logger.warning("Some issues found. Please review and fix before proceeding.")
        return 1
    logger.info("Data model validation passed.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
