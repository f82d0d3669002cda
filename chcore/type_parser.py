"""Parser for textual column type names."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from functools import lru_cache
from typing import Iterator, List, Tuple

from chcore.types import TypeCode


class AstMeta(Enum):
    """Category of a node in a parsed type name."""

    ARRAY = auto()
    ASSIGN = auto()
    NULL = auto()
    NULLABLE = auto()
    NUMBER = auto()
    STRING = auto()
    TERMINAL = auto()
    TUPLE = auto()
    ENUM = auto()


@dataclass
class TypeAst:
    """A node of a parsed type name."""

    meta: AstMeta = AstMeta.TERMINAL
    code: TypeCode = TypeCode.VOID
    name: str = ""
    value: int = 0
    value_string: str = ""
    elements: List["TypeAst"] = field(default_factory=list)


class TypeParseError(ValueError):
    """Raised when a type name cannot be parsed."""


_TYPE_CODES = {
    "Int8": TypeCode.INT8,
    "Int16": TypeCode.INT16,
    "Int32": TypeCode.INT32,
    "Int64": TypeCode.INT64,
    "UInt8": TypeCode.UINT8,
    "UInt16": TypeCode.UINT16,
    "UInt32": TypeCode.UINT32,
    "UInt64": TypeCode.UINT64,
    "Float32": TypeCode.FLOAT32,
    "Float64": TypeCode.FLOAT64,
    "String": TypeCode.STRING,
    "FixedString": TypeCode.FIXED_STRING,
    "DateTime": TypeCode.DATE_TIME,
    "DateTime64": TypeCode.DATE_TIME64,
    "Date": TypeCode.DATE,
    "Array": TypeCode.ARRAY,
    "Nullable": TypeCode.NULLABLE,
    "Tuple": TypeCode.TUPLE,
    "Enum8": TypeCode.ENUM8,
    "Enum16": TypeCode.ENUM16,
    "UUID": TypeCode.UUID,
    "IPv4": TypeCode.IPV4,
    "IPv6": TypeCode.IPV6,
    "Decimal": TypeCode.DECIMAL,
    "Decimal32": TypeCode.DECIMAL32,
    "Decimal64": TypeCode.DECIMAL64,
    "Decimal128": TypeCode.DECIMAL128,
}

_TYPE_META = {
    "Array": AstMeta.ARRAY,
    "Null": AstMeta.NULL,
    "Nullable": AstMeta.NULLABLE,
    "Tuple": AstMeta.TUPLE,
    "Enum8": AstMeta.ENUM,
    "Enum16": AstMeta.ENUM,
}


class _Kind(Enum):
    ASSIGN = auto()
    NAME = auto()
    NUMBER = auto()
    STRING = auto()
    LPAR = auto()
    RPAR = auto()
    COMMA = auto()


_PUNCTUATION = {
    "=": _Kind.ASSIGN,
    "(": _Kind.LPAR,
    ")": _Kind.RPAR,
    ",": _Kind.COMMA,
}

_SKIP = re.compile(r"[ \n\t\0]*")
_LEXEME_RE = re.compile(
    r"(?P<punct>[=(),])"
    r"|'(?P<string>[^']*)'"
    r"|(?P<name>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<number>[-0-9][0-9]*)"
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _lex(text: str) -> Iterator[Tuple[_Kind, str]]:
    pos = _SKIP.match(text).end()
    while pos < len(text):
        match = _LEXEME_RE.match(text, pos)
        if match is None:
            raise TypeParseError(f"unexpected input at offset {pos} in {text!r}")
        kind = match.lastgroup
        value = match.group(kind)
        if kind == "punct":
            yield _PUNCTUATION[value], value
        elif kind == "string":
            yield _Kind.STRING, value
        elif kind == "name":
            yield _Kind.NAME, value
        else:
            yield _Kind.NUMBER, value
        pos = _SKIP.match(text, match.end()).end()


def _to_int64(literal: str) -> int:
    try:
        number = int(literal)
    except ValueError:
        raise TypeParseError(f"invalid number {literal!r}") from None
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise TypeParseError(f"number {literal!r} out of range")
    return number


class TypeParser:
    """Turns a type name such as ``Array(Nullable(Int32))`` into a TypeAst."""

    def __init__(self, text: str) -> None:
        self._text = text

    def parse(self) -> TypeAst:
        """Parse the whole text; raises TypeParseError on malformed input."""
        root = TypeAst()
        current = root
        open_elements = [root]

        for kind, value in _lex(self._text):
            if kind is _Kind.NAME:
                current.meta = _TYPE_META.get(value, AstMeta.TERMINAL)
                current.name = value
                current.code = _TYPE_CODES.get(value, TypeCode.VOID)
            elif kind is _Kind.NUMBER:
                current.meta = AstMeta.NUMBER
                current.value = _to_int64(value)
            elif kind is _Kind.STRING:
                current.meta = AstMeta.STRING
                current.value_string = value
            elif kind is _Kind.LPAR:
                child = TypeAst()
                current.elements.append(child)
                open_elements.append(current)
                current = child
            elif kind is _Kind.RPAR:
                if not open_elements:
                    raise TypeParseError(f"unbalanced brackets in {self._text!r}")
                current = open_elements.pop()
            else:
                if not open_elements:
                    raise TypeParseError(f"unexpected {value!r} in {self._text!r}")
                child = TypeAst()
                open_elements[-1].elements.append(child)
                current = child

        if len(open_elements) != 1:
            raise TypeParseError(f"unbalanced brackets in {self._text!r}")
        return root


@lru_cache(maxsize=None)
def parse_type_name(type_name: str) -> TypeAst:
    """Parse a type name, caching successful results.

    The returned tree is shared between callers and must not be modified.
    """
    return TypeParser(type_name).parse()