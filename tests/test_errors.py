import pytest

from fallible.errors import RecoverableError, is_recoverable, throw


def test_throw_wraps_plain_error():
    original = ValueError("boom")
    with pytest.raises(RecoverableError) as info:
        throw(original)
    assert info.value.error is original
    assert info.value.__cause__ is original
    assert str(info.value) == "boom"


def test_thrown_error_is_recoverable():
    with pytest.raises(RecoverableError) as info:
        throw(KeyError("missing"))
    assert is_recoverable(info.value) is True


def test_throw_reraises_recoverable_unchanged():
    marked = RecoverableError(ValueError("already"))
    with pytest.raises(RecoverableError) as info:
        throw(marked)
    assert info.value is marked


def test_throw_reraises_error_caused_by_recoverable():
    inner = RecoverableError(ValueError("inner"))
    outer = RuntimeError("outer")
    outer.__cause__ = inner
    with pytest.raises(RuntimeError) as info:
        throw(outer)
    assert info.value is outer


def test_plain_error_is_not_recoverable():
    assert is_recoverable(ValueError("plain")) is False


def test_none_is_not_recoverable():
    assert is_recoverable(None) is False


def test_error_raised_from_recoverable_is_recoverable():
    try:
        try:
            throw(ValueError("first"))
        except RecoverableError as exc:
            raise RuntimeError("second") from exc
    except RuntimeError as outer:
        assert is_recoverable(outer) is True


def test_error_raised_from_plain_error_is_not_recoverable():
    try:
        try:
            raise ValueError("first")
        except ValueError as exc:
            raise RuntimeError("second") from exc
    except RuntimeError as outer:
        assert is_recoverable(outer) is False


def test_cause_cycle_terminates():
    first = ValueError("a")
    second = ValueError("b")
    first.__cause__ = second
    second.__cause__ = first
    assert is_recoverable(first) is False


def test_throw_rejects_non_exception():
    with pytest.raises(TypeError):
        throw("not an exception")