"""
SQL SELECT statement builder.

Accumulates named statement fragments (fields, joins, where, order, limit,
offset) and assembles the final SELECT text, delegating pagination syntax to
the dialect selected by the configured driver identifier.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol

from ..core.parameters import ParameterRegistry
from ..core.statement import Statement
from ..dialects import get_dialect

VALID_JOINS = ("INNER", "LEFT", "RIGHT")
VALID_DIRECTIONS = ("ASC", "DESC")


class PaginationDialect(Protocol):
    """Protocol for pagination dialects."""

    name: str

    def build_pagination(
        self, limit: Optional[int], offset: Optional[int], ordered: bool
    ) -> str: ...


class StatementBuilder:
    """
    Fluent builder for SELECT statements.

    Fragments persist across calls until ``reset()``; table and driver
    configuration survive a reset.

    Example:
        >>> builder = StatementBuilder("users")
        >>> builder.set_statement("fields", ["id", "name"])
        >>> builder.set_order("name", "desc")
        >>> builder.set_limit(10)
        >>> builder.build_query()
        'SELECT id, name FROM users ORDER BY name DESC LIMIT 10'
    """

    def __init__(self, table: str = "", driver: Optional[str] = None):
        self.table = table
        self.driver = driver
        self._statements: Dict[str, Any] = {}
        self._parameters = ParameterRegistry()

    def set_table(self, table: str) -> None:
        self.table = table

    def set_driver(self, driver: Optional[str]) -> None:
        self.driver = driver

    def get_statement(self, name: str) -> Any:
        """Return a fragment, or None when it is unset or falsy."""
        value = self._statements.get(name)
        return value if value else None

    def set_statement(self, name: str, value: Any) -> None:
        self._statements[name] = value

    def set_parameter(self, parameters: Mapping[str, Any]) -> None:
        self._parameters.set_parameters(parameters)

    def get_parameters(self) -> Dict[str, Any]:
        return self._parameters.get_parameters()

    def set_join(self, join_type: str, table: str, condition: str) -> None:
        """
        Append a JOIN clause.

        Raises:
            ValueError: If join_type is not INNER, LEFT or RIGHT
        """
        join_type = join_type.upper()
        if join_type not in VALID_JOINS:
            raise ValueError(
                f"Invalid JOIN type '{join_type}' provided. "
                f"Valid types are: {', '.join(VALID_JOINS)}"
            )

        joins: List[str] = list(self.get_statement("join") or [])
        joins.append(f"{join_type} JOIN {table} ON {condition}")
        self.set_statement("join", joins)

    def set_order(self, column: str, direction: str) -> None:
        """
        Set the single ORDER BY column, replacing any previous one.

        Raises:
            ValueError: If direction is not ASC or DESC
        """
        direction = direction.upper()
        if direction not in VALID_DIRECTIONS:
            raise ValueError(
                f"Invalid direction '{direction}' provided. "
                f"Valid directions are: {', '.join(VALID_DIRECTIONS)}"
            )

        self.set_statement("order", {"column": column, "direction": direction})

    def set_limit(self, limit: int) -> None:
        self.set_statement("limit", int(limit))

    def set_offset(self, offset: int) -> None:
        self.set_statement("offset", int(offset))

    def build_query(self) -> str:
        parts = [
            self._build_select(),
            self._build_joins(),
            self._build_where(),
            self._build_order_by(),
            self._build_limit_offset(),
        ]
        return " ".join(part for part in parts if part)

    def build_statement(self) -> Statement:
        """Build the SQL text together with a snapshot of the parameters."""
        return Statement(self.build_query(), self.get_parameters())

    def reset(self) -> None:
        self._statements = {}
        self._parameters.clear()

    def _build_select(self) -> str:
        prefix = "SELECT DISTINCT " if self.get_statement("distinct") else "SELECT "
        fields = ", ".join(self.get_statement("fields") or [])
        return f"{prefix}{fields} FROM {self.table}"

    def _build_joins(self) -> str:
        joins = self.get_statement("join")
        return " ".join(joins) if joins else ""

    def _build_where(self) -> str:
        where = self.get_statement("where")
        return f"WHERE {where}" if where else ""

    def _build_order_by(self) -> str:
        order = self.get_statement("order")
        return f"ORDER BY {order['column']} {order['direction']}" if order else ""

    def _build_limit_offset(self) -> str:
        limit = self.get_statement("limit")
        if not limit:
            return ""

        dialect: PaginationDialect = get_dialect(self.driver)
        return dialect.build_pagination(
            limit,
            self.get_statement("offset"),
            ordered=self.get_statement("order") is not None,
        )
