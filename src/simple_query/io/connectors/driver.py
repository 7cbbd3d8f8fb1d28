"""
Driver protocols consumed by the record life-cycle.

Any object exposing these methods can back a RecordLifecycle; the package
ships SQLAlchemyDriver as the concrete implementation.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from simple_query.infrastructure.sql.core.parameters import BindType


@runtime_checkable
class PreparedStatement(Protocol):
    """A statement ready for parameter binding and execution."""

    def bind(self, name: str, value: Any, bind_type: BindType) -> None: ...

    def execute(self) -> bool: ...

    def row_count(self) -> int: ...

    def fetch_all(self) -> List[Dict[str, Any]]: ...

    def fetch_one(self) -> Optional[Dict[str, Any]]: ...


@runtime_checkable
class Driver(Protocol):
    """Relational driver: prepares statements and owns transaction control."""

    @property
    def name(self) -> str: ...

    def prepare(self, sql: str) -> PreparedStatement: ...

    def begin_transaction(self) -> None: ...

    def commit(self) -> None: ...

    def roll_back(self) -> None: ...
