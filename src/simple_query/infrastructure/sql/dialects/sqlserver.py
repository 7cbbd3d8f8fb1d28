"""
SQL Server dialect implementation.

SQL Server paginates with OFFSET ... ROWS FETCH NEXT ... ROWS ONLY, which is
only valid after an ORDER BY clause.
"""

from typing import Optional, Union

DEFAULT_ORDER = "ORDER BY 1"


class SqlServerDialect:
    """OFFSET/FETCH pagination dialect."""

    name = "sqlserver"

    def build_pagination(
        self, limit: Optional[int], offset: Optional[int], ordered: bool
    ) -> str:
        """
        Build the pagination clause.

        When the statement has no ORDER BY, an ordinal ordering on the first
        selected column is prepended.

        Examples:
            >>> SqlServerDialect().build_pagination(10, None, False)
            'ORDER BY 1 OFFSET 0 ROWS FETCH NEXT 10 ROWS ONLY'
            >>> SqlServerDialect().build_pagination(10, 20, True)
            'OFFSET 20 ROWS FETCH NEXT 10 ROWS ONLY'
        """
        rows: Union[int, str] = "ALL" if limit is None else limit
        query = f"OFFSET {offset or 0} ROWS FETCH NEXT {rows} ROWS ONLY"
        if ordered:
            return query
        return f"{DEFAULT_ORDER} {query}"
