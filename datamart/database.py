from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv
from contextlib import contextmanager
import sqlite3
import logging
import os

load_dotenv()

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database URLs
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./datamart.db")
SQL_ECHO = _env_flag("SQL_ECHO")

# Payment status transition policy (open by default)
ENFORCE_PAYMENT_TRANSITIONS = _env_flag("ENFORCE_PAYMENT_TRANSITIONS")

PASSWORD_HASH_SCHEMES = [
    scheme.strip()
    for scheme in os.getenv("PASSWORD_HASH_SCHEMES", "pbkdf2_sha256").split(",")
    if scheme.strip()
]


def build_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """Create an engine with the connection settings used across the project"""
    options = {
        "connect_args": {"check_same_thread": False} if "sqlite" in url else {},
        "echo": SQL_ECHO,
    }
    if "sqlite" not in url:
        options["pool_pre_ping"] = True  # Good for PostgreSQL/MySQL connections
        options["pool_recycle"] = 300  # Recycle connections every 5 minutes
    options.update(kwargs)
    return create_engine(url, **options)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ships with foreign keys off; ON DELETE rules need them on"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# SQLAlchemy setup
engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# SQLAlchemy dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(bind: Engine = None):
    db = SessionLocal(bind=bind) if bind is not None else SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# Database initialization
def init_db(bind: Engine = None):
    """Initialize database tables"""
    from . import models  # noqa: F401  registers every model on Base

    Base.metadata.create_all(bind=bind or engine)


# Health check function
def check_db_connection(bind: Engine = None) -> dict:
    """Check database connectivity"""
    status = {"sqlalchemy": False, "foreign_keys": None}

    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
            status["sqlalchemy"] = True
            if conn.dialect.name == "sqlite":
                status["foreign_keys"] = bool(
                    conn.execute(text("PRAGMA foreign_keys")).scalar()
                )
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")

    return status
