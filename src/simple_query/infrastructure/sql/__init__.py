"""
SQL module for centralized SQL generation.

This module provides the statement builder, the named-parameter registry,
table naming conventions and the pagination dialects.
"""

from .core.naming import NamingResolver, pluralize
from .core.parameters import BindType, ParameterRegistry, bind_type
from .core.statement import Statement
from .dialects import GenericDialect, SqlServerDialect, get_dialect
from .operations.select import StatementBuilder
from .operations.write import build_delete, build_insert, build_update

__all__ = [
    "BindType",
    "GenericDialect",
    "NamingResolver",
    "ParameterRegistry",
    "SqlServerDialect",
    "Statement",
    "StatementBuilder",
    "bind_type",
    "build_delete",
    "build_insert",
    "build_update",
    "get_dialect",
    "pluralize",
]
