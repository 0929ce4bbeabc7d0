import logging
import re
from typing import Any, Dict, Optional, Type

from sqlalchemy.exc import IntegrityError, StatementError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import ObjectDeletedError

from ..database import Base

logger = logging.getLogger(__name__)


# Custom Exceptions
class DatamartServiceError(Exception):
    """Base exception for datamart service errors"""

    error_code = "SERVICE_ERROR"


class NotFoundError(DatamartServiceError):
    """Row addressed by id does not exist"""

    error_code = "NOT_FOUND"


class BusinessRuleViolation(DatamartServiceError):
    """Write rejected by a rule checked at the service boundary"""

    error_code = "BUSINESS_RULE_VIOLATION"


class InvalidStatusTransition(DatamartServiceError):
    """Payment status change not allowed by the strict transition table"""

    error_code = "INVALID_STATUS_TRANSITION"


class IntegrityViolation(DatamartServiceError):
    """A storage constraint rejected the write"""

    error_code = "INTEGRITY_VIOLATION"
    constraint_kind = "integrity"

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        field: Optional[str] = None,
        constraint: Optional[str] = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.field = field
        self.constraint = constraint or self.constraint_kind

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": str(self),
            "constraint": self.constraint,
            "entity": self.entity,
            "field": self.field,
        }


class UniqueViolation(IntegrityViolation):
    error_code = "UNIQUE_VIOLATION"
    constraint_kind = "unique"


class ForeignKeyViolation(IntegrityViolation):
    error_code = "FOREIGN_KEY_VIOLATION"
    constraint_kind = "foreign_key"


class NotNullViolation(IntegrityViolation):
    error_code = "NOT_NULL_VIOLATION"
    constraint_kind = "not_null"


class EnumViolation(IntegrityViolation):
    error_code = "ENUM_VIOLATION"
    constraint_kind = "enum"


class CheckViolation(IntegrityViolation):
    error_code = "CHECK_VIOLATION"
    constraint_kind = "check"


class ReferralCycleViolation(IntegrityViolation):
    error_code = "REFERRAL_CYCLE"
    constraint_kind = "referral_cycle"


# Enum CHECK constraints carry the enum type name
ENUM_CONSTRAINT_NAMES = {
    "payment_status",
    "reservation_payment_status",
    "payment_method",
    "transaction_type",
    "reviewer_type",
}

_SQLITE_COLUMN = re.compile(r"constraint failed: (\w+)\.(\w+)")
_PG_NOT_NULL = re.compile(r'null value in column "(\w+)"(?: of relation "(\w+)")?')
_PG_CONSTRAINT = re.compile(r'constraint "(\w+)"')
_MYSQL_NOT_NULL = re.compile(r"Column '(\w+)' cannot be null")
_MYSQL_KEY = re.compile(r"for key '(?:(\w+)\.)?(\w+)'")
_CHECK_NAME = re.compile(r"check constraint (?:failed: )?['\"]?(\w+)", re.IGNORECASE)

_TABLE_ENTITIES: Dict[str, str] = {}


def entity_for_table(table_name: Optional[str]) -> Optional[str]:
    """Map a table name back to its model class name"""
    if table_name is None:
        return None
    if not _TABLE_ENTITIES:
        for mapper in Base.registry.mappers:
            _TABLE_ENTITIES[mapper.local_table.name] = mapper.class_.__name__
    return _TABLE_ENTITIES.get(table_name, table_name)


def translate_integrity_error(
    exc: IntegrityError, entity: Optional[str] = None, field: Optional[str] = None
) -> IntegrityViolation:
    """Turn a driver IntegrityError into the matching IntegrityViolation"""
    raw = str(exc.orig) if exc.orig is not None else str(exc)
    lowered = raw.lower()

    if "unique" in lowered or "duplicate" in lowered:
        match = _SQLITE_COLUMN.search(raw)
        if match:
            entity = entity_for_table(match.group(1))
            field = match.group(2)
        else:
            match = _MYSQL_KEY.search(raw) or _PG_CONSTRAINT.search(raw)
            if match:
                field = field or match.group(match.lastindex)
        return UniqueViolation(
            f"Duplicate value violates uniqueness on {entity or 'row'}"
            + (f".{field}" if field else ""),
            entity=entity,
            field=field,
        )

    if "foreign key" in lowered:
        return ForeignKeyViolation(
            f"Foreign key constraint failed for {entity or 'row'}"
            + (f".{field}" if field else ""),
            entity=entity,
            field=field,
        )

    if "not null" in lowered or "not-null" in lowered or "cannot be null" in lowered:
        match = _SQLITE_COLUMN.search(raw)
        if match:
            entity, field = entity_for_table(match.group(1)), match.group(2)
        else:
            match = _PG_NOT_NULL.search(raw)
            if match:
                field = match.group(1)
                entity = entity_for_table(match.group(2)) or entity
            else:
                match = _MYSQL_NOT_NULL.search(raw)
                if match:
                    field = match.group(1)
        return NotNullViolation(
            f"Missing required value for {entity or 'row'}"
            + (f".{field}" if field else ""),
            entity=entity,
            field=field,
        )

    if "check" in lowered:
        match = _CHECK_NAME.search(raw)
        name = match.group(1) if match else None
        if name in ENUM_CONSTRAINT_NAMES:
            return EnumViolation(
                f"Value outside the allowed set for {entity or 'row'}.{name}",
                entity=entity,
                field=field or name,
                constraint=name,
            )
        if name == "ck_hosts_not_self_referred":
            return ReferralCycleViolation(
                "A host cannot refer itself",
                entity="Host",
                field="referred_by_host_id",
                constraint=name,
            )
        return CheckViolation(
            f"Check constraint {name or ''} failed for {entity or 'row'}".replace("  ", " "),
            entity=entity,
            field=field,
            constraint=name,
        )

    return IntegrityViolation(raw, entity=entity, field=field)


def coerce_enum(enum_class, value, entity: str, field: str):
    """Return the enum member for value, raising EnumViolation otherwise"""
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_class)
        raise EnumViolation(
            f"{value!r} is not a valid {field} for {entity} (allowed: {allowed})",
            entity=entity,
            field=field,
        )


class BaseService:
    """Shared transaction handling for all datamart services"""

    def __init__(self, db: Session):
        self.db = db

    def _lookup(self, model: Type[Base], pk):
        """
        Get row by primary key, or None.

        Rows removed by an ON DELETE cascade can still sit expired in the
        identity map; refreshing them raises ObjectDeletedError, so they are
        evicted and reported as missing.
        """
        try:
            return self.db.get(model, pk)
        except ObjectDeletedError:
            stale = self.db.identity_map.get(self.db.identity_key(model, pk))
            if stale is not None:
                self.db.expunge(stale)
            return None

    def _get_or_raise(self, model: Type[Base], pk, label: Optional[str] = None):
        """Get row by primary key or raise NotFoundError"""
        instance = self._lookup(model, pk)
        if instance is None:
            raise NotFoundError(f"{label or model.__name__} {pk} not found")
        return instance

    def _require_parent(
        self, model: Type[Base], pk, entity: str, field: str
    ) -> Base:
        """Referenced parent must exist before a child row is written"""
        instance = self._lookup(model, pk) if pk is not None else None
        if instance is None:
            raise ForeignKeyViolation(
                f"{entity}.{field} references missing {model.__name__} {pk}",
                entity=entity,
                field=field,
            )
        return instance

    def _commit(self, entity: Optional[str] = None, field: Optional[str] = None):
        """Commit the unit of work; roll back and translate on failure"""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            violation = translate_integrity_error(e, entity=entity, field=field)
            logger.warning(f"Write rejected ({violation.constraint}): {violation}")
            raise violation from e
        except StatementError as e:
            self.db.rollback()
            if isinstance(e.orig, LookupError):
                violation = EnumViolation(str(e.orig), entity=entity, field=field)
                logger.warning(f"Write rejected (enum): {violation}")
                raise violation from e
            raise
        except Exception:
            self.db.rollback()
            raise

    def _save(self, instance: Base, entity: Optional[str] = None) -> Base:
        """Add, commit and refresh a single row"""
        self.db.add(instance)
        self._commit(entity or type(instance).__name__)
        self.db.refresh(instance)
        return instance

    def _delete(self, instance: Base, entity: Optional[str] = None) -> None:
        """Delete a row; ON DELETE rules run inside the same transaction"""
        self.db.delete(instance)
        self._commit(entity or type(instance).__name__)

    @staticmethod
    def _apply_updates(instance: Base, updates: Dict[str, Any]) -> None:
        for field, value in updates.items():
            setattr(instance, field, value)
