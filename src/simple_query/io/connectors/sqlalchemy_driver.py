"""
SQLAlchemy driver adapter.

Wraps a SQLAlchemy 2.x Connection behind the Driver protocol. Statements are
prepared with ``sqlalchemy.text`` and parameters are attached as typed
``bindparam`` objects.

The Connection is owned by the caller: this adapter never opens, closes or
pools connections.
"""

from typing import Any, Dict, List, Optional

import sqlalchemy as sa
from sqlalchemy import exc
from sqlalchemy.engine import Connection, RootTransaction
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.types import NullType

from simple_query.infrastructure.sql.core.parameters import BindType
from simple_query.utils.logging import get_logger

from .exceptions import DriverError, PreparationError

logger = get_logger(__name__)

BIND_TYPES = {
    BindType.INTEGER: sa.Integer,
    BindType.BOOLEAN: sa.Boolean,
    BindType.NULL: NullType,
    BindType.STRING: sa.String,
}


def _error_message(error: exc.SQLAlchemyError) -> str:
    """Driver-level message without the SQL text and bound parameter block."""
    if isinstance(error, exc.StatementError):
        if error.orig is not None:
            return f"{type(error.orig).__name__}: {error.orig}"
        return type(error).__name__
    return str(error)


class SQLAlchemyStatement:
    """Prepared text statement with buffered results."""

    def __init__(self, driver: "SQLAlchemyDriver", clause: TextClause):
        self._driver = driver
        self._clause = clause
        self._rows: List[Dict[str, Any]] = []
        self._row_count = 0

    @property
    def clause(self) -> TextClause:
        return self._clause

    def bind(self, name: str, value: Any, bind_type: BindType) -> None:
        key = name.lstrip(":")
        try:
            self._clause = self._clause.bindparams(
                sa.bindparam(key, value, type_=BIND_TYPES[bind_type]())
            )
        except exc.ArgumentError as e:
            raise PreparationError(f"Cannot bind parameter '{name}': {e}") from e

    def execute(self) -> bool:
        connection = self._driver.connection
        try:
            result = connection.execute(self._clause)
            if result.returns_rows:
                self._rows = [dict(row) for row in result.mappings()]
                self._row_count = len(self._rows)
            else:
                self._rows = []
                self._row_count = result.rowcount
        except exc.SQLAlchemyError as e:
            self._driver._end_implicit_transaction(success=False)
            raise DriverError(_error_message(e)) from e

        self._driver._end_implicit_transaction(success=True)
        return True

    def row_count(self) -> int:
        return self._row_count

    def fetch_all(self) -> List[Dict[str, Any]]:
        return list(self._rows)

    def fetch_one(self) -> Optional[Dict[str, Any]]:
        return self._rows[0] if self._rows else None


class SQLAlchemyDriver:
    """
    Driver protocol implementation over a SQLAlchemy Connection.

    Statements executed outside ``begin_transaction()`` are committed as soon
    as they finish, mirroring autocommit drivers.

    Example:
        >>> engine = sa.create_engine("sqlite://")
        >>> with engine.connect() as conn:
        ...     driver = SQLAlchemyDriver(conn)
        ...     driver.name
        'sqlite'
    """

    def __init__(self, connection: Connection):
        """
        Initialize the driver with a database connection.

        Args:
            connection: SQLAlchemy Connection. Caller owns its lifetime.
        """
        self.connection = connection
        self._transaction: Optional[RootTransaction] = None

    @property
    def name(self) -> str:
        return self.connection.dialect.name

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None

    def prepare(self, sql: str) -> SQLAlchemyStatement:
        if not sql or not sql.strip():
            raise PreparationError()
        try:
            clause = sa.text(sql)
        except exc.ArgumentError as e:
            raise PreparationError(str(e)) from e
        return SQLAlchemyStatement(self, clause)

    def begin_transaction(self) -> None:
        if self._transaction is not None or self.connection.in_transaction():
            raise DriverError("Connection already has an open transaction")
        self._transaction = self.connection.begin()
        logger.debug("driver.transaction.begin", driver=self.name)

    def commit(self) -> None:
        if self._transaction is None:
            raise DriverError("No active transaction to commit")
        transaction, self._transaction = self._transaction, None
        transaction.commit()
        logger.debug("driver.transaction.commit", driver=self.name)

    def roll_back(self) -> None:
        if self._transaction is None:
            return
        transaction, self._transaction = self._transaction, None
        transaction.rollback()
        logger.debug("driver.transaction.rollback", driver=self.name)

    def _end_implicit_transaction(self, success: bool) -> None:
        """Resolve the transaction SQLAlchemy autobegins outside begin_transaction()."""
        if self._transaction is not None or not self.connection.in_transaction():
            return
        if success:
            self.connection.commit()
        else:
            self.connection.rollback()
