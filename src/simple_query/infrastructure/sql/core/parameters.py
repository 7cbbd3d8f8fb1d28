"""
SQL parameter binding utilities.

Provides the named-parameter registry used by the statement builder and the
bind-type inference applied when parameters are handed to a driver.
"""

from enum import Enum
from typing import Any, Dict, Mapping


class BindType(str, Enum):
    """Driver bind categories for parameter values."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    STRING = "string"


def placeholder(name: str) -> str:
    """
    Normalize a parameter name to its colon-prefixed placeholder.

    Examples:
        >>> placeholder("id")
        ':id'
        >>> placeholder(":id")
        ':id'
    """
    return f":{name.lstrip(':')}"


def bind_type(value: Any) -> BindType:
    """
    Infer the driver bind category for a parameter value.

    bool is checked before int since it is an int subclass.

    Examples:
        >>> bind_type(5)
        <BindType.INTEGER: 'integer'>
        >>> bind_type(None)
        <BindType.NULL: 'null'>
        >>> bind_type(3.5)
        <BindType.STRING: 'string'>
    """
    if isinstance(value, bool):
        return BindType.BOOLEAN
    if isinstance(value, int):
        return BindType.INTEGER
    if value is None:
        return BindType.NULL
    return BindType.STRING


class ParameterRegistry:
    """
    Accumulates named bind parameters.

    Keys are stored with exactly one leading colon; setting an existing key
    overwrites its value.

    Example:
        >>> registry = ParameterRegistry()
        >>> registry.set_parameters({"id": 1})
        >>> registry.set_parameters({":id": 2, "name": "Ada"})
        >>> registry.get_parameters()
        {':id': 2, ':name': 'Ada'}
    """

    def __init__(self) -> None:
        self._parameters: Dict[str, Any] = {}

    def set_parameters(self, parameters: Mapping[str, Any]) -> None:
        for key, value in parameters.items():
            self._parameters[placeholder(key)] = value

    def get_parameters(self) -> Dict[str, Any]:
        return dict(self._parameters)

    def clear(self) -> None:
        self._parameters.clear()

    def __len__(self) -> int:
        return len(self._parameters)
