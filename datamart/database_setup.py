#!/usr/bin/env python3
"""
Database Setup Module
Creates any missing tables without touching existing rows
"""

import logging

from .database import engine, Base, init_db

logger = logging.getLogger(__name__)


def setup_database(bind=None) -> list:
    logger.info("Creating all database tables...")
    init_db(bind or engine)
    tables = sorted(Base.metadata.tables.keys())
    logger.info(f"Database setup complete: {len(tables)} tables")
    for table in tables:
        logger.info(f"  - {table}")
    return tables


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    setup_database()
