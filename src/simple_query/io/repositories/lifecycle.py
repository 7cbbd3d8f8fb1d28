"""
Record life-cycle: fluent queries and CRUD for mapped records.

RecordLifecycle composes a StatementBuilder, a Driver and a NamingResolver
injected through its constructor.

Transaction policy:
- create() and update() run their single statement inside one
  begin/commit transaction and roll back before re-raising on failure;
  a failed commit is the terminal call and is not followed by a rollback
- fetch() and delete() run outside any explicit transaction
- Failed validation returns False without touching the driver
- Driver failures are re-raised as operation errors with the cause chained
"""

from datetime import datetime
from typing import Any, Generic, Mapping, Optional, Sequence, Type, TypeVar

from simple_query.config import get_settings
from simple_query.infrastructure.sql.core.naming import NamingResolver
from simple_query.infrastructure.sql.core.parameters import bind_type
from simple_query.infrastructure.sql.core.statement import Statement
from simple_query.infrastructure.sql.operations.select import StatementBuilder
from simple_query.infrastructure.sql.operations.write import (
    build_delete,
    build_insert,
    build_update,
)
from simple_query.io.connectors.driver import Driver, PreparedStatement
from simple_query.io.connectors.exceptions import PreparationError
from simple_query.utils.logging import get_logger

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
from .record import Record

logger = get_logger(__name__)

R = TypeVar("R", bound=Record)

TIMESTAMP_ATTRIBUTE = "updated_at"


class RecordLifecycle(Generic[R]):
    """
    Fluent query and CRUD access for one Record type.

    Attributes:
        record_type: Record subclass hydrated from fetched rows
        driver: Driver used to prepare and execute statements
        builder: StatementBuilder for the current query session
        table: Resolved table name, fixed for the life-cycle's lifetime

    Example::

        users = RecordLifecycle(User, SQLAlchemyDriver(conn))
        ada = users.select(["id", "name"]).where("name = :name", {"name": "Ada"}).fetch()
        ada.set("email", "ada@example.com")
        users.save(ada)  # True
    """

    def __init__(
        self,
        record_type: Type[R],
        driver: Driver,
        builder: Optional[StatementBuilder] = None,
        naming: Optional[NamingResolver] = None,
    ) -> None:
        self.record_type = record_type
        self.driver = driver
        self.naming = naming or NamingResolver()
        self.table = record_type.__table__ or self.naming(record_type.__name__)
        self.primary_key = record_type.primary_key()

        self.builder = builder or StatementBuilder()
        self.builder.set_table(self.table)
        self.builder.set_driver(driver.name)

    # ------------------------------------------------------------------
    # Fluent query API
    # ------------------------------------------------------------------

    def select(
        self, fields: Sequence[str] = ("*",), distinct: bool = False
    ) -> "RecordLifecycle[R]":
        """Start a new query; clears every fragment and parameter."""
        self.builder.reset()
        self.builder.set_statement("fields", list(fields))
        self.builder.set_statement("distinct", distinct)
        return self

    def from_(self, table: str) -> "RecordLifecycle[R]":
        self.builder.set_table(table)
        return self

    def where(
        self, condition: str, parameters: Optional[Mapping[str, Any]] = None
    ) -> "RecordLifecycle[R]":
        """
        Append a condition to the WHERE clause.

        Conditions are joined with a single space, so follow-up calls must
        carry their own connector, e.g. ``where("AND active = :active")``.
        """
        current = self.builder.get_statement("where")
        self.builder.set_statement("where", f"{current} {condition}" if current else condition)
        self.builder.set_parameter(parameters or {})
        return self

    def inner(self, table: str, condition: str) -> "RecordLifecycle[R]":
        self.builder.set_join("INNER", table, condition)
        return self

    def left(self, table: str, condition: str) -> "RecordLifecycle[R]":
        self.builder.set_join("LEFT", table, condition)
        return self

    def right(self, table: str, condition: str) -> "RecordLifecycle[R]":
        self.builder.set_join("RIGHT", table, condition)
        return self

    def asc(self, column: str) -> "RecordLifecycle[R]":
        self.builder.set_order(column, "ASC")
        return self

    def desc(self, column: str) -> "RecordLifecycle[R]":
        self.builder.set_order(column, "DESC")
        return self

    def limit(self, limit: int) -> "RecordLifecycle[R]":
        self.builder.set_limit(limit)
        return self

    def offset(self, offset: int) -> "RecordLifecycle[R]":
        self.builder.set_offset(offset)
        return self

    def to_sql(self) -> str:
        return self.builder.build_query()

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def begin_transaction(self) -> None:
        self.driver.begin_transaction()

    def commit(self) -> None:
        self.driver.commit()

    def roll_back(self) -> None:
        self.driver.roll_back()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_result(self, fetch_all: bool = False, associative: bool = False) -> FetchResult:
        """
        Execute the current query.

        Args:
            fetch_all: Return every matched row instead of the first one
            associative: Return raw row dicts instead of hydrated records

        Returns:
            Found with a record, a row dict, or a list of either;
            NotFound when no rows match; Failed wrapping a RetrievalError
        """
        statement = self.builder.build_statement()
        try:
            prepared = self._prepare(statement)
            prepared.execute()

            if not prepared.row_count():
                logger.debug("record.fetch.not_found", table=self.table)
                return NotFound()

            if fetch_all and associative:
                return Found(prepared.fetch_all())
            if fetch_all:
                return Found([self._hydrate(row) for row in prepared.fetch_all()])

            row = prepared.fetch_one()
            if row is None:
                return NotFound()
            return Found(row if associative else self._hydrate(row))
        except Exception as exc:
            error = RetrievalError(table=self.table, original_error=exc)
            logger.error("record.fetch.failed", **error.to_dict())
            return Failed(error)

    def fetch(self, fetch_all: bool = False, associative: bool = False) -> Any:
        """
        Execute the current query and return its value.

        Returns None when no rows match.

        Raises:
            RetrievalError: If the statement could not be prepared or executed
        """
        return self.fetch_result(fetch_all, associative).unwrap()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, record: R) -> bool:
        """Insert records with an empty primary key, update the rest."""
        if record.is_new():
            return self.create(record)
        return self.update(record)

    def create(self, record: R) -> bool:
        if not self._validate(record, "create"):
            return False

        values = record.writable_attributes()
        statement = Statement(build_insert(self.table, list(values)), values)
        return self._execute_in_transaction(statement, "create", CreateError)

    def update(self, record: R) -> bool:
        # Stamped before validation so the timestamp can satisfy a required check
        if record.__timestamps__:
            record.set(
                TIMESTAMP_ATTRIBUTE,
                datetime.now().strftime(get_settings().timestamp_format),
            )

        if not self._validate(record, "update"):
            return False

        primary_key_value = record.primary_key_value
        values = record.writable_attributes()
        parameters = dict(values)
        parameters[self.primary_key] = primary_key_value

        statement = Statement(
            build_update(self.table, list(values), self.primary_key), parameters
        )
        return self._execute_in_transaction(statement, "update", UpdateError)

    def delete(self, record_id: Any) -> bool:
        """Delete one row by primary key, outside any explicit transaction."""
        statement = Statement(build_delete(self.table, self.primary_key), {"id": record_id})
        try:
            prepared = self._prepare(statement)
            executed = prepared.execute()
        except Exception as exc:
            error = DeleteError(table=self.table, original_error=exc)
            logger.error("record.delete.failed", **error.to_dict())
            raise error from exc

        logger.info(
            "record.delete.completed",
            table=self.table,
            rows_affected=prepared.row_count(),
        )
        return executed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _prepare(self, statement: Statement) -> PreparedStatement:
        prepared = self.driver.prepare(statement.sql)
        if not prepared:
            raise PreparationError()

        for name, value in statement.parameters.items():
            prepared.bind(name, value, bind_type(value))
        return prepared

    def _hydrate(self, row: Mapping[str, Any]) -> R:
        return self.record_type.from_mapping(row)

    def _validate(self, record: R, operation: str) -> bool:
        missing = record.missing_required()
        if missing:
            logger.warning(
                f"record.{operation}.invalid",
                table=self.table,
                missing_columns=missing,
            )
            return False
        return True

    def _execute_in_transaction(
        self,
        statement: Statement,
        operation: str,
        error_type: Type[RecordOperationError],
    ) -> bool:
        logger.debug(
            f"record.{operation}.started",
            table=self.table,
            parameters=list(statement.parameters),
        )
        try:
            self.driver.begin_transaction()
            prepared = self._prepare(statement)
            executed = prepared.execute()
        except Exception as exc:
            self._roll_back_after_failure(operation)
            raise self._operation_error(error_type, operation, exc) from exc

        if not executed:
            self.driver.roll_back()
            logger.warning(f"record.{operation}.not_executed", table=self.table)
            return False

        # A failed commit is the terminal call; no rollback follows it
        try:
            self.driver.commit()
        except Exception as exc:
            raise self._operation_error(error_type, operation, exc) from exc

        logger.info(f"record.{operation}.completed", table=self.table)
        return True

    def _operation_error(
        self,
        error_type: Type[RecordOperationError],
        operation: str,
        cause: Exception,
    ) -> RecordOperationError:
        error = error_type(table=self.table, original_error=cause)
        logger.error(f"record.{operation}.failed", **error.to_dict())
        return error

    def _roll_back_after_failure(self, operation: str) -> None:
        try:
            self.driver.roll_back()
        except Exception as rollback_error:
            logger.warning(
                f"record.{operation}.rollback_failed",
                table=self.table,
                error_type=type(rollback_error).__name__,
            )
