import pytest

from chcore.types import (
    DateTimeType,
    EnumItem,
    EnumType,
    Type,
    TypeCode,
    array_type,
    date_type,
    datetime64_type,
    datetime_type,
    decimal_type,
    enum16_type,
    enum8_type,
    fixed_string_type,
    nullable_type,
    simple_type,
    string_type,
    tuple_type,
    uuid_type,
)


def test_type_names():
    assert date_type().name == "Date"
    assert array_type(simple_type(TypeCode.INT32)).name == "Array(Int32)"
    assert nullable_type(simple_type(TypeCode.INT32)).name == "Nullable(Int32)"
    assert array_type(simple_type(TypeCode.INT32)).item_type.code is TypeCode.INT32
    assert (
        tuple_type([simple_type(TypeCode.INT32), string_type()]).name
        == "Tuple(Int32, String)"
    )
    assert enum8_type([EnumItem("One", 1)]).name == "Enum8('One' = 1)"
    assert enum8_type([]).name == "Enum8()"


def test_nullable_nested_is_same_object():
    nested = simple_type(TypeCode.INT32)
    assert nullable_type(nested).nested_type is nested


def test_enum_types():
    enum8 = EnumType(enum8_type([EnumItem("One", 1), EnumItem("Two", 2)]))
    assert enum8.name == "Enum8('One' = 1, 'Two' = 2)"
    assert enum8.has_enum_value(1)
    assert enum8.has_enum_name("Two")
    assert not enum8.has_enum_value(10)
    assert not enum8.has_enum_name("Ten")
    assert enum8.enum_name(2) == "Two"
    assert enum8.enum_value("Two") == 2

    enum16 = EnumType(
        enum16_type([EnumItem("Green", 1), EnumItem("Red", 2), EnumItem("Yellow", 3)])
    )
    assert enum16.name == "Enum16('Green' = 1, 'Red' = 2, 'Yellow' = 3)"
    assert enum16.has_enum_value(3)
    assert enum16.has_enum_name("Green")
    assert not enum16.has_enum_value(10)
    assert not enum16.has_enum_name("Black")
    assert enum16.enum_name(2) == "Red"
    assert enum16.enum_value("Green") == 1

    items = enum16.items()
    assert len(items) == 3
    assert items[0] == (1, "Green")
    assert items[1] == (2, "Red")


def test_enum_accepts_pairs_and_orders_by_value():
    from_pairs = enum8_type([("Two", 2), ("One", 1)])
    from_items = enum8_type([EnumItem("One", 1), EnumItem("Two", 2)])
    assert from_pairs.name == "Enum8('One' = 1, 'Two' = 2)"
    assert from_pairs.is_equal(from_items)


def test_enum_missing_lookups_raise():
    enum8 = EnumType(enum8_type([("One", 1)]))
    with pytest.raises(KeyError):
        enum8.enum_name(10)
    with pytest.raises(KeyError):
        enum8.enum_value("Ten")


def test_enum_view_rejects_other_types():
    with pytest.raises(ValueError):
        EnumType(string_type())


def test_datetime_names_and_timezone():
    assert datetime_type().name == "DateTime"
    utc = datetime_type("UTC")
    assert utc.name == "DateTime('UTC')"
    assert DateTimeType(utc).timezone == "UTC"
    assert datetime64_type(3, "UTC").name == "DateTime64(3, 'UTC')"
    assert DateTimeType(datetime64_type(3, "UTC")).timezone == "UTC"
    assert DateTimeType(datetime_type()).timezone == ""


def test_datetime_view_rejects_other_types():
    with pytest.raises(ValueError):
        DateTimeType(date_type())


def test_fixed_string_name():
    assert fixed_string_type(10).name == "FixedString(10)"


def test_decimal_names():
    assert decimal_type(12, 5).name == "Decimal(12,5)"
    assert decimal_type(12, 5).code is TypeCode.DECIMAL


def test_accessors_for_unrelated_types():
    plain = uuid_type()
    assert plain.item_type is None
    assert plain.nested_type is None
    assert plain.tuple_types == []


def test_tuple_types_is_a_copy():
    tup = tuple_type([string_type(), date_type()])
    got = tup.tuple_types
    got.clear()
    assert [t.name for t in tup.tuple_types] == ["String", "Date"]


@pytest.mark.parametrize(
    "code, name",
    [
        (TypeCode.INT8, "Int8"),
        (TypeCode.UINT64, "UInt64"),
        (TypeCode.FLOAT64, "Float64"),
        (TypeCode.INT128, "Int128"),
    ],
)
def test_simple_type_names(code, name):
    created = simple_type(code)
    assert created.code is code
    assert created.name == name
    assert str(created) == name


def test_simple_type_rejects_composite_codes():
    with pytest.raises(ValueError):
        simple_type(TypeCode.STRING)


def test_is_equal_compares_names():
    first = array_type(simple_type(TypeCode.UINT64))
    second = array_type(Type(TypeCode.UINT64))
    assert first.is_equal(second)
    assert not first.is_equal(array_type(simple_type(TypeCode.UINT32)))