"""Assertions that raise recoverable errors for a result handler to catch."""

from __future__ import annotations

from typing import Any, NoReturn

from .errors import throw
from .option import Nothing, Option, Some
from .result import Err, Ok, Result
from .result import errorf as _errorf

__all__ = [
    "true",
    "truef",
    "false",
    "falsef",
    "nil",
    "nilf",
    "not_nil",
    "not_nilf",
    "some",
    "somef",
    "none",
    "nonef",
    "ok",
    "okf",
    "error",
    "errorf",
]


def _formatted(format: str, args: tuple[Any, ...]) -> BaseException:
    return _errorf(format, *args).value


def _fail(format: str, args: tuple[Any, ...]) -> NoReturn:
    throw(_formatted(format, args))


def true(condition: bool) -> None:
    """Raise a recoverable error unless ``condition`` is true."""
    truef(condition, "expected condition to be true")


def truef(condition: bool, format: str, *args: Any) -> None:
    """Raise a recoverable error with the given message unless ``condition`` is true."""
    if not condition:
        _fail(format, args)


def false(condition: bool) -> None:
    """Raise a recoverable error unless ``condition`` is false."""
    falsef(condition, "expected condition to be false")


def falsef(condition: bool, format: str, *args: Any) -> None:
    """Raise a recoverable error with the given message unless ``condition`` is false."""
    if condition:
        _fail(format, args)


def nil(value: Any) -> None:
    """Raise a recoverable error unless ``value`` is None."""
    nilf(value, "value is not nil")


def nilf(value: Any, format: str, *args: Any) -> None:
    """Raise a recoverable error with the given message unless ``value`` is None."""
    if value is not None:
        _fail(format, args)


def not_nil(value: Any) -> None:
    """Raise a recoverable error if ``value`` is None."""
    not_nilf(value, "value is nil")


def not_nilf(value: Any, format: str, *args: Any) -> None:
    """Raise a recoverable error with the given message if ``value`` is None."""
    if value is None:
        _fail(format, args)


def some(opt: Option[Any]) -> None:
    """Raise an error unless ``opt`` is Some."""
    somef(opt, "expected some")


def somef(opt: Option[Any], format: str, *args: Any) -> None:
    """Raise the formatted error unless ``opt`` is Some.

    The error is not marked recoverable.
    """
    if not isinstance(opt, Some):
        raise _formatted(format, args)


def none(opt: Option[Any]) -> None:
    """Raise an error unless ``opt`` is Nothing."""
    nonef(opt, "expected none")


def nonef(opt: Option[Any], format: str, *args: Any) -> None:
    """Raise the formatted error unless ``opt`` is Nothing.

    The error is not marked recoverable.
    """
    if not isinstance(opt, Nothing):
        raise _formatted(format, args)


def ok(res: Result[Any]) -> None:
    """Raise a recoverable error unless ``res`` is Ok."""
    okf(res, "unable to match Ok")


def okf(res: Result[Any], format: str, *args: Any) -> None:
    """Raise a recoverable error with the given message unless ``res`` is Ok."""
    if not isinstance(res, Ok):
        _fail(format, args)


def error(res: Result[Any]) -> None:
    """Raise a recoverable error unless ``res`` is Err."""
    errorf(res, "unable to match Err")


def errorf(res: Result[Any], format: str, *args: Any) -> None:
    """Raise a recoverable error with the given message unless ``res`` is Err."""
    if not isinstance(res, Err):
        _fail(format, args)