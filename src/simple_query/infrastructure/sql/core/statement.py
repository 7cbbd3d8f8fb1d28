"""Immutable SQL statement value passed from builders to drivers."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .parameters import placeholder


@dataclass(frozen=True)
class Statement:
    """
    SQL text plus its colon-prefixed parameter mapping.

    The parameter mapping is copied and frozen on construction, so later
    changes to the builder that produced it are not visible here.

    Example:
        >>> stmt = Statement("DELETE FROM users WHERE id=:id", {"id": 5})
        >>> dict(stmt.parameters)
        {':id': 5}
    """

    sql: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {placeholder(key): value for key, value in self.parameters.items()}
        object.__setattr__(self, "parameters", MappingProxyType(normalized))

    def __str__(self) -> str:
        return self.sql
