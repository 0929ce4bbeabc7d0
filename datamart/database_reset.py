#!/usr/bin/env python3
"""
Database Reset Module
Drops every table, rebuilds the schema and optionally reloads the baseline.

This is a maintenance operation: it is not reachable from the API.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import sessionmaker

from .database import engine as default_engine, Base
from . import models  # noqa: F401  registers every model on Base
from .seed_data import load_baseline as load_baseline_rows

logger = logging.getLogger(__name__)

# (disable, enable) statements per dialect
FOREIGN_KEY_SWITCHES = {
    "sqlite": ("PRAGMA foreign_keys=OFF", "PRAGMA foreign_keys=ON"),
    "mysql": ("SET FOREIGN_KEY_CHECKS = 0", "SET FOREIGN_KEY_CHECKS = 1"),
    "mariadb": ("SET FOREIGN_KEY_CHECKS = 0", "SET FOREIGN_KEY_CHECKS = 1"),
    "postgresql": (
        "SET session_replication_role = replica",
        "SET session_replication_role = DEFAULT",
    ),
}


def drop_order() -> list:
    """Table names leaf-most first"""
    return [table.name for table in reversed(Base.metadata.sorted_tables)]


@contextmanager
def _foreign_keys_suspended(connection: Connection):
    """
    Turn foreign-key checking off for this connection only. Checking is
    switched back on whether or not the body succeeds.
    """
    switches = FOREIGN_KEY_SWITCHES.get(connection.dialect.name)
    if switches is None:
        logger.warning(
            f"No foreign key switch for dialect {connection.dialect.name}; "
            "dropping with checks enabled"
        )
        yield
        return

    disable, enable = switches
    # SQLite ignores the pragma inside a transaction; issue it before any work
    connection.exec_driver_sql(disable)
    logger.info("Foreign key checks suspended")
    try:
        yield
    except Exception:
        connection.rollback()
        raise
    finally:
        connection.exec_driver_sql(enable)
        connection.commit()
        logger.info("Foreign key checks restored")


def reset_database(engine: Engine = None, load_baseline: bool = True) -> dict:
    """
    Drop all tables, recreate the schema and load the baseline dataset.

    Returns a summary with the dropped tables and, when loaded, the
    baseline row counts.
    """
    engine = engine or default_engine
    dropped = drop_order()
    logger.info(f"Resetting database at {engine.url!r}")

    with engine.connect() as connection:
        with _foreign_keys_suspended(connection):
            for table in reversed(Base.metadata.sorted_tables):
                table.drop(connection, checkfirst=True)
                logger.info(f"  dropped {table.name}")
            connection.commit()

    Base.metadata.create_all(bind=engine)
    logger.info(f"Recreated {len(Base.metadata.tables)} tables")

    summary = {"dropped": dropped, "baseline": None}
    if load_baseline:
        Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
        db = Session()
        try:
            summary["baseline"] = load_baseline_rows(db)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    return summary


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        description="Drop and rebuild the datamart schema"
    )
    parser.add_argument(
        "--no-baseline",
        action="store_true",
        help="Leave the rebuilt tables empty",
    )
    args = parser.parse_args(argv)

    summary = reset_database(load_baseline=not args.no_baseline)
    logger.info(f"Reset complete: {len(summary['dropped'])} tables rebuilt")
    if summary["baseline"]:
        logger.info(f"Baseline rows: {summary['baseline']}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
