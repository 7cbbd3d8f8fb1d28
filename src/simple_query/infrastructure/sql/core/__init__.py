"""Core SQL utilities package."""

from .naming import NamingResolver, pluralize
from .parameters import BindType, ParameterRegistry, bind_type, placeholder
from .statement import Statement

__all__ = [
    "BindType",
    "NamingResolver",
    "ParameterRegistry",
    "Statement",
    "bind_type",
    "placeholder",
    "pluralize",
]
