"""SQL statement builders."""

from .select import VALID_DIRECTIONS, VALID_JOINS, StatementBuilder
from .write import build_delete, build_insert, build_placeholders, build_update

__all__ = [
    "StatementBuilder",
    "VALID_DIRECTIONS",
    "VALID_JOINS",
    "build_delete",
    "build_insert",
    "build_placeholders",
    "build_update",
]
