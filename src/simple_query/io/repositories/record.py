"""
Mapped record entities.

A Record subclass declares its table mapping through class attributes and
holds its column values in an explicit attribute mapping. Declared
``Attribute`` descriptors give typed accessors for known columns; ``get``,
``set``, ``has`` and ``remove`` cover dynamic access.

Example:
    >>> class User(Record):
    ...     __required__ = ("name",)
    ...     __safe__ = ("created_at",)
    ...     name = Attribute(str)
    >>> user = User(name="Ada")
    >>> user.name
    'Ada'
    >>> user.to_dict()
    {'name': 'Ada'}
"""

import re
from numbers import Number
from types import SimpleNamespace
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from simple_query.config import get_settings

AttributeValue = Union[str, int, float, bool, None, List[Any]]

R = TypeVar("R", bound="Record")

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_empty(value: Any) -> bool:
    """
    Emptiness as applied to attribute values.

    None, False, zero, the empty string, the string "0" and empty
    collections are empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def is_numeric(value: Any) -> bool:
    """Numbers (but not bools) and numeric strings such as "0", "1.5" or "2e3"."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Number):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.match(value))
    return False


def is_missing(value: Any) -> bool:
    """
    True when a required attribute value fails validation.

    Zero-like numbers and the explicit empty string pass even though they
    are empty.

    Examples:
        >>> is_missing(None), is_missing(0), is_missing(""), is_missing(False)
        (True, False, False, True)
    """
    return is_empty(value) and not is_numeric(value) and value != ""


class Attribute:
    """Typed accessor for one record attribute."""

    def __init__(self, type_: Union[type, Tuple[type, ...], None] = None):
        self.type_ = type_
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Optional["Record"], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance: "Record", value: AttributeValue) -> None:
        if value is not None and self.type_ is not None and not isinstance(value, self.type_):
            raise TypeError(
                f"Attribute '{self.name}' expects {self._type_name()}, "
                f"got {type(value).__name__}"
            )
        instance.set(self.name, value)

    def __delete__(self, instance: "Record") -> None:
        instance.remove(self.name)

    def _type_name(self) -> str:
        if isinstance(self.type_, tuple):
            return " | ".join(t.__name__ for t in self.type_)
        return getattr(self.type_, "__name__", str(self.type_))


class Record:
    """
    Base class for mapped entities.

    Class attributes:
        __table__: Explicit table name; derived from the class name when None
        __primary_key__: Primary key attribute; defaults to the
            default_primary_key setting
        __required__: Attributes validated before every write
        __safe__: Attributes never written on INSERT or UPDATE
        __timestamps__: Stamp updated_at on every update
    """

    __table__: ClassVar[Optional[str]] = None
    __primary_key__: ClassVar[Optional[str]] = None
    __required__: ClassVar[Sequence[str]] = ()
    __safe__: ClassVar[Sequence[str]] = ()
    __timestamps__: ClassVar[bool] = False

    def __init__(self, **attributes: AttributeValue):
        self._attributes: Dict[str, Any] = {}
        for name, value in attributes.items():
            self.set(name, value)

    @classmethod
    def primary_key(cls) -> str:
        return cls.__primary_key__ or get_settings().default_primary_key

    @classmethod
    def from_mapping(cls: Type[R], data: Mapping[str, Any]) -> R:
        return cls().fill(data)

    @classmethod
    def from_object(cls: Type[R], obj: object) -> R:
        return cls().fill(vars(obj))

    def fill(self: R, data: Mapping[str, Any]) -> R:
        """Replace all attributes with the given mapping."""
        self._attributes = dict(data)
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def set(self, name: str, value: AttributeValue) -> None:
        self._attributes[name] = value

    def has(self, name: str) -> bool:
        """True when the attribute is present and not None."""
        return self._attributes.get(name) is not None

    def remove(self, name: str) -> None:
        self._attributes.pop(name, None)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._attributes)

    def to_object(self) -> SimpleNamespace:
        return SimpleNamespace(**self._attributes)

    @property
    def primary_key_value(self) -> Any:
        return self.get(self.primary_key())

    def is_new(self) -> bool:
        """True when the primary key is empty, i.e. save() would insert."""
        return is_empty(self.primary_key_value)

    def missing_required(self) -> List[str]:
        return [column for column in self.__required__ if is_missing(self.get(column))]

    def writable_attributes(self) -> Dict[str, Any]:
        """Attributes written on INSERT/UPDATE: all minus the safe-list and primary key."""
        excluded = set(self.__safe__) | {self.primary_key()}
        return {
            name: value
            for name, value in self._attributes.items()
            if name not in excluded
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return type(self) is type(other) and self._attributes == other._attributes

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self._attributes.items())
        return f"{type(self).__name__}({attrs})"
