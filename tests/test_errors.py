import pytest

from chcore.errors import ServerException
from chcore.protocol import ErrorCode
from chcore.query import ExceptionInfo


def _info():
    return ExceptionInfo(
        code=ErrorCode.TABLE_ALREADY_EXISTS,
        name="DB::Exception",
        display_text="Table test.exceptions already exists.",
        stack_trace="trace",
    )


def test_code_matches_exception_info():
    info = _info()
    error = ServerException(info)
    assert error.code == ErrorCode.TABLE_ALREADY_EXISTS
    assert error.exception is info


def test_str_is_display_text():
    info = _info()
    assert str(ServerException(info)) == info.display_text


def test_raise_and_catch_by_code():
    error = ServerException(_info())
    with pytest.raises(ServerException) as caught:
        raise error
    assert caught.value is error
    assert error.code == ErrorCode.TABLE_ALREADY_EXISTS
    assert error.exception.name == "DB::Exception"


def test_is_runtime_error():
    info = _info()
    error = ServerException(info)
    with pytest.raises(RuntimeError) as caught:
        raise error
    assert str(caught.value) == info.display_text
    assert caught.value.code == ErrorCode.TABLE_ALREADY_EXISTS


def test_nested_exception_preserved():
    inner = ExceptionInfo(code=ErrorCode.UNKNOWN_TABLE, display_text="inner")
    outer = ExceptionInfo(code=ErrorCode.UNKNOWN_EXCEPTION, display_text="outer", nested=inner)
    error = ServerException(outer)
    assert error.exception.nested is inner
    assert error.exception.nested.code == ErrorCode.UNKNOWN_TABLE
    assert str(error) == "outer"


def test_default_info_gives_empty_message():
    error = ServerException(ExceptionInfo())
    assert str(error) == ""
    assert error.code == ExceptionInfo().code