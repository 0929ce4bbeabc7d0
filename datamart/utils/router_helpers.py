# datamart/utils/router_helpers.py

from fastapi import HTTPException, status
from typing import Callable, Any, Iterable, List, Type
from functools import wraps
import logging

from pydantic import BaseModel

from .constants import ErrorCodes
from ..services.base import (
    DatamartServiceError,
    NotFoundError,
    BusinessRuleViolation,
    InvalidStatusTransition,
    IntegrityViolation,
    UniqueViolation,
    ForeignKeyViolation,
    ReferralCycleViolation,
)

logger = logging.getLogger(__name__)

CONFLICT_ERRORS = (
    UniqueViolation,
    ForeignKeyViolation,
    ReferralCycleViolation,
    InvalidStatusTransition,
)


def error_detail(exc: DatamartServiceError) -> dict:
    """Body carried by every mapped service error"""
    if isinstance(exc, IntegrityViolation):
        return exc.to_dict()
    return {
        "error_code": exc.error_code,
        "message": str(exc),
        "constraint": None,
        "entity": None,
        "field": None,
    }


def status_for(exc: DatamartServiceError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, CONFLICT_ERRORS):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, (IntegrityViolation, BusinessRuleViolation)):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_service_errors(func: Callable) -> Callable:
    """Decorator to standardize service error handling in routers"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        # Missing rows -> 404, constraint conflicts -> 409, rejected values -> 422
        except DatamartServiceError as e:
            code = status_for(e)
            logger.warning(f"{type(e).__name__} in {func.__name__}: {str(e)}")
            raise HTTPException(status_code=code, detail=error_detail(e))

        # Unexpected errors -> 500 Internal Server Error
        except Exception as e:
            logger.error(
                f"Unexpected error in {func.__name__}: {str(e)}", exc_info=True
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={
                    "error_code": ErrorCodes.INTERNAL_ERROR,
                    "message": "An unexpected error occurred",
                },
            )

    return wrapper


def serialize(schema: Type[BaseModel], instance: Any) -> BaseModel:
    """Read an ORM row through its response schema"""
    return schema.model_validate(instance)


def serialize_all(schema: Type[BaseModel], instances: Iterable[Any]) -> List[BaseModel]:
    return [schema.model_validate(instance) for instance in instances]


class RouterResponse:
    """Helper class for creating standardized API responses"""

    @staticmethod
    def deleted(message: str = "Resource deleted successfully") -> dict:
        """Create resource deletion response"""
        return {"success": True, "message": message}
