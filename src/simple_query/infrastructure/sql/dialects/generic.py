"""
Generic SQL dialect implementation.

Provides LIMIT/OFFSET pagination as understood by PostgreSQL, MySQL,
SQLite and most other engines.
"""

from typing import Optional


class GenericDialect:
    """LIMIT/OFFSET pagination dialect."""

    name = "generic"

    def build_pagination(
        self, limit: Optional[int], offset: Optional[int], ordered: bool
    ) -> str:
        """
        Build the pagination clause.

        Args:
            limit: Row limit (the builder skips pagination when it is unset)
            offset: Rows to skip; omitted when None or 0
            ordered: Whether the statement carries an ORDER BY (unused here)

        Returns:
            LIMIT clause, with OFFSET when an offset is set

        Examples:
            >>> GenericDialect().build_pagination(10, None, False)
            'LIMIT 10'
            >>> GenericDialect().build_pagination(10, 20, False)
            'LIMIT 10 OFFSET 20'
        """
        if offset:
            return f"LIMIT {limit} OFFSET {offset}"
        return f"LIMIT {limit}"
