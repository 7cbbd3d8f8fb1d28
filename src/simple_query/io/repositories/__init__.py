"""
Record repositories.

RecordLifecycle provides fluent queries and transactional CRUD for Record
subclasses over any Driver implementation.
"""

from .lifecycle import RecordLifecycle
from .models import (
    CreateError,
    DeleteError,
    Failed,
    FetchResult,
    Found,
    NotFound,
    RecordOperationError,
    RetrievalError,
    UpdateError,
)
from .record import Attribute, AttributeValue, Record, is_empty, is_missing, is_numeric

__all__ = [
    "Attribute",
    "AttributeValue",
    "CreateError",
    "DeleteError",
    "Failed",
    "FetchResult",
    "Found",
    "NotFound",
    "Record",
    "RecordLifecycle",
    "RecordOperationError",
    "RetrievalError",
    "UpdateError",
    "is_empty",
    "is_missing",
    "is_numeric",
]
