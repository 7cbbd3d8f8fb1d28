"""Configuration management for SimpleQuery.

Usage:
    >>> from simple_query.config import get_settings
    >>> settings = get_settings()
    >>> settings.offset_fetch_driver
    'mssql'
"""

from simple_query.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
