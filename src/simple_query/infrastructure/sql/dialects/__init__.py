"""
Pagination dialects.

The driver identifier reported by the connection selects the dialect: the
configured OFFSET/FETCH identifier (``mssql`` by default) maps to
SqlServerDialect, every other identifier to GenericDialect.
"""

from typing import Optional, Union

from simple_query.config import get_settings

from .generic import GenericDialect
from .sqlserver import SqlServerDialect

Dialect = Union[GenericDialect, SqlServerDialect]


def get_dialect(
    driver: Optional[str], offset_fetch_driver: Optional[str] = None
) -> Dialect:
    """
    Select the pagination dialect for a driver identifier.

    Args:
        driver: Driver identifier (e.g. "postgresql", "sqlite", "mssql")
        offset_fetch_driver: Identifier selecting OFFSET/FETCH; defaults to
            the offset_fetch_driver setting

    Returns:
        Dialect instance
    """
    designated = offset_fetch_driver or get_settings().offset_fetch_driver
    if driver and driver.lower() == designated.lower():
        return SqlServerDialect()
    return GenericDialect()


__all__ = [
    "Dialect",
    "GenericDialect",
    "SqlServerDialect",
    "get_dialect",
]
