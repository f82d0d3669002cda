# chcore

Building blocks for a ClickHouse client, with no dependencies beyond the
standard library:

- `chcore.types`: column type descriptions (`Type`, `TypeCode`, `EnumItem`),
  the `EnumType` and `DateTimeType` views, and factory functions such as
  `array_type`, `nullable_type`, `tuple_type`, `enum8_type`, `enum16_type`,
  `fixed_string_type`, `datetime_type`, `datetime64_type`, `decimal_type`
  and `simple_type`.
- `chcore.type_parser`: parses type names such as
  `Nullable(FixedString(10))` or `Enum8('One' = 1, 'Two' = 2)` into a
  `TypeAst` tree.
- `chcore.query`: the `Query` object with chainable event callbacks, the
  abstract `QueryEvents` interface, and the `QuerySettings`, `Profile`,
  `Progress` and `ExceptionInfo` records.
- `chcore.errors`: `ServerException`, which wraps an `ExceptionInfo`.
- `chcore.protocol`: packet codes (`ServerCode`, `ClientCode`),
  `CompressionState`, `Stage` and server error codes (`ErrorCode`).

## Installation

```
pip install .
```

## Building type descriptions

```python
from chcore.types import (
    TypeCode, EnumItem, EnumType, DateTimeType,
    array_type, simple_type, enum8_type, datetime64_type,
)

arr = array_type(simple_type(TypeCode.INT32))
print(arr.name)                 # Array(Int32)
print(arr.item_type.code)       # TypeCode.INT32

colours = enum8_type([EnumItem("One", 1), ("Two", 2)])
view = EnumType(colours)
print(view.name)                # Enum8('One' = 1, 'Two' = 2)
print(view.enum_value("Two"))   # 2
print(view.items())             # [(1, 'One'), (2, 'Two')]

print(DateTimeType(datetime64_type(3, "UTC")).timezone)  # UTC
```

`simple_type` accepts only numeric codes and raises `ValueError` otherwise.
`EnumType` and `DateTimeType` raise `ValueError` when given a type of the
wrong kind; `enum_name` and `enum_value` raise `KeyError` for unknown
entries. Two types are equal by `is_equal` when their names match.

## Parsing type names

```python
from chcore.type_parser import parse_type_name, TypeParser, TypeParseError, AstMeta

ast = parse_type_name("Array(Int32)")
assert ast.meta is AstMeta.ARRAY
print(ast.elements[0].name)     # Int32

try:
    TypeParser("FixedString(10").parse()
except TypeParseError as exc:
    print(exc)                  # unbalanced brackets in 'FixedString(10'
```

Both `TypeParser(text).parse()` and `parse_type_name` raise
`TypeParseError` (a `ValueError`) on malformed input. `parse_type_name`
caches results, so the trees it returns are shared and must not be modified.

## Query callbacks

```python
from chcore.query import Query, Progress

rows = []
query = (
    Query("SELECT count(*) FROM system.tables GROUP BY database WITH TOTALS")
    .on_data(rows.append)
    .on_totals(rows.append)
    .on_progress(lambda p: print(p.rows))
)

query.data_received("block")
query.progress_received(Progress(rows=10))
query.finished()
print(rows, query.is_finished)  # ['block'] True
```

`data_received_cancelable` returns what the cancelable handler returns, or
`True` when none is set. `profile_received` stores the profile in
`query.profile`. Blocks are passed to the handlers unchanged.

## Server errors

```python
from chcore.errors import ServerException
from chcore.protocol import ErrorCode
from chcore.query import ExceptionInfo

err = ServerException(ExceptionInfo(code=57, display_text="Table already exists"))
assert err.code == ErrorCode.TABLE_ALREADY_EXISTS
print(err)                      # Table already exists
```

## What this package does not do

It opens no connections and speaks no wire protocol: there is no client,
no reading or writing of data blocks, no column storage and no compression.
It supplies the type descriptions, parser, query event handling, codes and
error type that such a client is built on.

## Running the tests

```
pip install .[test]
pytest
```