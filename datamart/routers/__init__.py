# datamart/routers/__init__.py

from . import guests
from . import properties
from . import bookings
from . import feedback
from . import reports

__all__ = [
    "guests",
    "properties",
    "bookings",
    "feedback",
    "reports",
]
