"""Column data types and their canonical names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple, Union


class TypeCode(IntEnum):
    """Identifies the kind of a column type."""

    VOID = 0
    INT8 = 1
    INT16 = 2
    INT32 = 3
    INT64 = 4
    UINT8 = 5
    UINT16 = 6
    UINT32 = 7
    UINT64 = 8
    FLOAT32 = 9
    FLOAT64 = 10
    STRING = 11
    FIXED_STRING = 12
    DATE_TIME = 13
    DATE_TIME64 = 14
    DATE = 15
    ARRAY = 16
    NULLABLE = 17
    TUPLE = 18
    ENUM8 = 19
    ENUM16 = 20
    UUID = 21
    IPV4 = 22
    IPV6 = 23
    INT128 = 24
    DECIMAL = 25
    DECIMAL32 = 26
    DECIMAL64 = 27
    DECIMAL128 = 28


@dataclass(frozen=True)
class EnumItem:
    """One named value of an enumeration type."""

    name: str
    value: int


_PLAIN_NAMES = {
    TypeCode.VOID: "Void",
    TypeCode.INT8: "Int8",
    TypeCode.INT16: "Int16",
    TypeCode.INT32: "Int32",
    TypeCode.INT64: "Int64",
    TypeCode.INT128: "Int128",
    TypeCode.UINT8: "UInt8",
    TypeCode.UINT16: "UInt16",
    TypeCode.UINT32: "UInt32",
    TypeCode.UINT64: "UInt64",
    TypeCode.UUID: "UUID",
    TypeCode.FLOAT32: "Float32",
    TypeCode.FLOAT64: "Float64",
    TypeCode.STRING: "String",
    TypeCode.IPV4: "IPv4",
    TypeCode.IPV6: "IPv6",
    TypeCode.DATE: "Date",
}

_SIMPLE_CODES = frozenset(
    {
        TypeCode.INT8,
        TypeCode.INT16,
        TypeCode.INT32,
        TypeCode.INT64,
        TypeCode.INT128,
        TypeCode.UINT8,
        TypeCode.UINT16,
        TypeCode.UINT32,
        TypeCode.UINT64,
        TypeCode.FLOAT32,
        TypeCode.FLOAT64,
    }
)

_ENUM_CODES = frozenset({TypeCode.ENUM8, TypeCode.ENUM16})
_DATETIME_CODES = frozenset({TypeCode.DATE_TIME, TypeCode.DATE_TIME64})


class Type:
    """A column type, possibly composed of other types."""

    def __init__(self, code: Union[TypeCode, int]) -> None:
        self._code = TypeCode(code)
        self._item_type: Optional[Type] = None
        self._nested_type: Optional[Type] = None
        self._tuple_types: List[Type] = []
        self._timezone = ""
        self._precision = 0
        self._scale = 0
        self._string_size = 0
        self._value_to_name: dict[int, str] = {}
        self._name_to_value: dict[str, int] = {}

    @property
    def code(self) -> TypeCode:
        """The type's code."""
        return self._code

    @property
    def item_type(self) -> Optional[Type]:
        """Element type of an array, or None for other types."""
        return self._item_type if self._code is TypeCode.ARRAY else None

    @property
    def nested_type(self) -> Optional[Type]:
        """Wrapped type of a nullable, or None for other types."""
        return self._nested_type if self._code is TypeCode.NULLABLE else None

    @property
    def tuple_types(self) -> List[Type]:
        """Element types of a tuple, or an empty list for other types."""
        return list(self._tuple_types) if self._code is TypeCode.TUPLE else []

    @property
    def name(self) -> str:
        """Canonical textual representation of the type."""
        code = self._code
        if code in _PLAIN_NAMES:
            return _PLAIN_NAMES[code]
        if code is TypeCode.FIXED_STRING:
            return f"FixedString({self._string_size})"
        if code is TypeCode.DATE_TIME:
            return f"DateTime('{self._timezone}')" if self._timezone else "DateTime"
        if code is TypeCode.DATE_TIME64:
            if self._timezone:
                return f"DateTime64({self._precision}, '{self._timezone}')"
            return f"DateTime64({self._precision})"
        if code is TypeCode.ARRAY:
            return f"Array({self._item_type.name})"
        if code is TypeCode.NULLABLE:
            return f"Nullable({self._nested_type.name})"
        if code is TypeCode.TUPLE:
            return "Tuple(" + ", ".join(t.name for t in self._tuple_types) + ")"
        if code in _ENUM_CODES:
            prefix = "Enum8" if code is TypeCode.ENUM8 else "Enum16"
            body = ", ".join(
                f"'{name}' = {value}" for value, name in sorted(self._value_to_name.items())
            )
            return f"{prefix}({body})"
        if code is TypeCode.DECIMAL:
            return f"Decimal({self._precision},{self._scale})"
        if code is TypeCode.DECIMAL32:
            return f"Decimal32({self._scale})"
        if code is TypeCode.DECIMAL64:
            return f"Decimal64({self._scale})"
        if code is TypeCode.DECIMAL128:
            return f"Decimal128({self._scale})"
        return ""

    def is_equal(self, other: Type) -> bool:
        """Whether both types have the same canonical name."""
        return self.name == other.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Type({self.name!r})"


def array_type(item_type: Type) -> Type:
    """Array of the given element type."""
    result = Type(TypeCode.ARRAY)
    result._item_type = item_type
    return result


def date_type() -> Type:
    return Type(TypeCode.DATE)


def datetime_type(timezone: str = "") -> Type:
    """DateTime, optionally bound to a timezone."""
    result = Type(TypeCode.DATE_TIME)
    result._timezone = timezone
    return result


def datetime64_type(precision: int, timezone: str = "") -> Type:
    """DateTime64 with the given sub-second precision."""
    result = Type(TypeCode.DATE_TIME64)
    result._precision = precision
    result._timezone = timezone
    return result


def decimal_type(precision: int, scale: int) -> Type:
    result = Type(TypeCode.DECIMAL)
    result._precision = precision
    result._scale = scale
    return result


def ipv4_type() -> Type:
    return Type(TypeCode.IPV4)


def ipv6_type() -> Type:
    return Type(TypeCode.IPV6)


def nothing_type() -> Type:
    return Type(TypeCode.VOID)


def nullable_type(nested_type: Type) -> Type:
    """Nullable wrapper around the given type."""
    result = Type(TypeCode.NULLABLE)
    result._nested_type = nested_type
    return result


def simple_type(code: Union[TypeCode, int]) -> Type:
    """A numeric type; raises ValueError for any other code."""
    code = TypeCode(code)
    if code not in _SIMPLE_CODES:
        raise ValueError(f"{code.name} is not a simple numeric type")
    return Type(code)


def string_type() -> Type:
    return Type(TypeCode.STRING)


def fixed_string_type(size: int) -> Type:
    """String of exactly ``size`` bytes."""
    result = Type(TypeCode.FIXED_STRING)
    result._string_size = size
    return result


def tuple_type(item_types: Iterable[Type]) -> Type:
    result = Type(TypeCode.TUPLE)
    result._tuple_types = list(item_types)
    return result


EnumSpec = Union[EnumItem, Tuple[str, int]]


def _enum_type(code: TypeCode, items: Iterable[EnumSpec]) -> Type:
    result = Type(code)
    for item in items:
        name, value = (item.name, item.value) if isinstance(item, EnumItem) else item
        result._value_to_name[value] = name
        result._name_to_value[name] = value
    return result


def enum8_type(items: Iterable[EnumSpec]) -> Type:
    """Enum8 from EnumItem objects or (name, value) pairs."""
    return _enum_type(TypeCode.ENUM8, items)


def enum16_type(items: Iterable[EnumSpec]) -> Type:
    """Enum16 from EnumItem objects or (name, value) pairs."""
    return _enum_type(TypeCode.ENUM16, items)


def uuid_type() -> Type:
    return Type(TypeCode.UUID)


class EnumType:
    """View on an enumeration type's names and values."""

    def __init__(self, type_: Type) -> None:
        if type_.code not in _ENUM_CODES:
            raise ValueError(f"{type_.name} is not an enum type")
        self._type = type_

    @property
    def name(self) -> str:
        return self._type.name

    def enum_name(self, value: int) -> str:
        """Name for ``value``; raises KeyError if there is none."""
        return self._type._value_to_name[value]

    def enum_value(self, name: str) -> int:
        """Value for ``name``; raises KeyError if there is none."""
        return self._type._name_to_value[name]

    def has_enum_name(self, name: str) -> bool:
        return name in self._type._name_to_value

    def has_enum_value(self, value: int) -> bool:
        return value in self._type._value_to_name

    def items(self) -> List[Tuple[int, str]]:
        """(value, name) pairs ordered by value."""
        return sorted(self._type._value_to_name.items())


class DateTimeType:
    """View on a DateTime or DateTime64 type."""

    def __init__(self, type_: Type) -> None:
        if type_.code not in _DATETIME_CODES:
            raise ValueError(f"{type_.name} is not a date-time type")
        self._type = type_

    @property
    def timezone(self) -> str:
        """Timezone bound to the column, or an empty string."""
        return self._type._timezone