import pytest

from fallible import option
from fallible.errors import RecoverableError
from fallible.option import Nothing, Some
from fallible.result import Err, Ok


def test_none_deconstruct():
    _, present = option.none().deconstruct()
    assert present is False


def test_none_match():
    opt = option.none()
    assert opt == Nothing()
    assert isinstance(opt, Some) is False


def test_none_is_none():
    opt = option.none()
    assert opt.is_some() is False
    assert opt.is_none() is True


def test_none_unwrap_or():
    assert option.none().unwrap_or(10) == 10


def test_none_unwrap_raises_recoverable():
    with pytest.raises(RecoverableError, match="Nothing unwrapped"):
        option.none().unwrap()


def test_some_deconstruct():
    value, present = option.some(1).deconstruct()
    assert present is True
    assert value == 1


def test_some_match():
    opt = option.some(123)
    assert isinstance(opt, Some)
    assert opt.value == 123


def test_some_is_some():
    opt = option.some(123)
    assert opt.is_some() is True
    assert opt.is_none() is False


def test_some_unwrap_or():
    assert option.some(20).unwrap_or(10) == 20


def test_some_unwrap():
    assert option.some("x").unwrap() == "x"


@pytest.mark.parametrize("present, expected", [(True, Some(5)), (False, Nothing())])
def test_new(present, expected):
    assert option.new(5, present) == expected


def test_cast_some():
    res = option.cast(option.some(123), int)
    opt, err = res.deconstruct()
    assert err is None
    value, present = opt.deconstruct()
    assert present is True
    assert value == 123


def test_cast_nothing_is_ok_nothing():
    res = option.cast(option.none(), int)
    assert res == Ok(Nothing())


def test_cast_target_mismatch():
    res = option.cast(option.some("text"), int)
    assert isinstance(res, Err)
    assert str(res.value) == "options.cast : unable to match type target type str"


def test_cast_source_mismatch():
    res = option.cast(42, int)
    assert res.is_error()
    assert str(res.value) == "options.cast : unable to match type source type int"


def test_get_some():
    mapping = {"hello": 1}
    opt = option.get(mapping, "hello")
    assert opt.is_none() is False
    assert opt.unwrap() == 1


def test_get_none():
    mapping = {"hello": 1}
    assert option.get(mapping, "world").is_some() is False


def test_map_some():
    mapped = option.map_value(option.some(10), str)
    assert isinstance(mapped, Some)
    assert mapped.value == "10"


def test_map_none():
    mapped = option.map_value(option.none(), lambda i: "")
    assert mapped == Nothing()
    assert mapped.is_none() is True


def test_map_or_some():
    assert option.map_or(option.some(10), str, "11") == "10"


def test_map_or_none():
    assert option.map_or(option.none(), lambda i: "", "11") == "11"


def test_map_or_else_some():
    assert option.map_or_else(option.some(10), str, lambda: "11") == "10"


def test_map_or_else_none():
    assert option.map_or_else(option.none(), lambda i: "", lambda: "11") == "11"