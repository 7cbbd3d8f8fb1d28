"""Driver protocols and adapters."""

from .driver import Driver, PreparedStatement
from .exceptions import DriverError, PreparationError
from .sqlalchemy_driver import SQLAlchemyDriver, SQLAlchemyStatement

__all__ = [
    "Driver",
    "DriverError",
    "PreparationError",
    "PreparedStatement",
    "SQLAlchemyDriver",
    "SQLAlchemyStatement",
]
