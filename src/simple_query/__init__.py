"""
SimpleQuery - Minimal relational data access toolkit.

A fluent SQL statement builder with LIMIT/OFFSET and OFFSET/FETCH pagination
dialects, plus a transactional create/read/update/delete life-cycle for
mapped records.
"""

__version__ = "0.1.0"

from simple_query.infrastructure.sql import (
    NamingResolver,
    ParameterRegistry,
    Statement,
    StatementBuilder,
    pluralize,
)
from simple_query.io.connectors import (
    Driver,
    DriverError,
    PreparationError,
    PreparedStatement,
    SQLAlchemyDriver,
)
from simple_query.io.repositories import (
    Attribute,
    CreateError,
    DeleteError,
    Failed,
    FetchResult,
    Found,
    NotFound,
    Record,
    RecordLifecycle,
    RecordOperationError,
    RetrievalError,
    UpdateError,
)

__all__ = [
    "Attribute",
    "CreateError",
    "DeleteError",
    "Driver",
    "DriverError",
    "Failed",
    "FetchResult",
    "Found",
    "NamingResolver",
    "NotFound",
    "ParameterRegistry",
    "PreparationError",
    "PreparedStatement",
    "Record",
    "RecordLifecycle",
    "RecordOperationError",
    "RetrievalError",
    "SQLAlchemyDriver",
    "Statement",
    "StatementBuilder",
    "UpdateError",
    "pluralize",
]
