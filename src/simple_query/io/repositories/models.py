"""
Record life-cycle errors and fetch results.

Fetches return one of three result types: Found, NotFound or Failed. Callers
can tell "no match" apart from "failure" without catching exceptions, and
``unwrap()`` turns a result back into a value, None, or a raised error.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


class RecordOperationError(Exception):
    """Base error for failed record operations, carrying a server-side status."""

    status_code = 500
    operation = "operation"
    default_message = "Record operation failed."

    def __init__(
        self,
        message: str = "",
        table: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        self.table = table
        self.original_error = original_error
        super().__init__(message or self.default_message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to structured dict for logging.

        Only the cause's type is included, never its message. The cause
        itself is available as original_error and __cause__.
        """
        data: Dict[str, Any] = {
            "error_type": type(self).__name__,
            "operation": self.operation,
            "status_code": self.status_code,
            "table": self.table,
            "message": str(self),
        }
        if self.original_error is not None:
            data["original_error_type"] = type(self.original_error).__name__
        return data


class RetrievalError(RecordOperationError):
    operation = "fetch"
    default_message = "Failed to retrieve data from the database."


class CreateError(RecordOperationError):
    operation = "create"
    default_message = "Failed to create record."


class UpdateError(RecordOperationError):
    operation = "update"
    default_message = "Failed to update record."


class DeleteError(RecordOperationError):
    operation = "delete"
    default_message = "Failed to delete data from the database."


@dataclass(frozen=True)
class Found:
    """A fetch that matched rows; value is a record, a row dict, or a list of either."""

    value: Any

    @property
    def found(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """A fetch that matched zero rows."""

    @property
    def found(self) -> bool:
        return False

    def unwrap(self) -> None:
        return None


@dataclass(frozen=True)
class Failed:
    """A fetch whose statement could not be prepared or executed."""

    error: RecordOperationError

    @property
    def found(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error from self.error.original_error


FetchResult = Union[Found, NotFound, Failed]
