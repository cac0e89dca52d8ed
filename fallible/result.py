"""Results: a value on success, or the error that prevented it."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

from .errors import RecoverableError, throw
from .tuples import new_tuple

__all__ = [
    "Result",
    "Ok",
    "Err",
    "ok",
    "error",
    "errorf",
    "new",
    "new_many",
    "cast",
    "cast_value",
    "castf_value",
]

T = TypeVar("T")

_VERB = re.compile(r"%(?:%|(?P<opts>[-#0 +]*\d*(?:\.\d+)?)(?P<verb>[a-zA-Z]))")


class _FormattedError(Exception):
    """An error built from a format string; it may wrap other errors."""

    def __init__(self, message: str, wrapped: tuple[BaseException, ...] = ()) -> None:
        super().__init__(message)
        self.wrapped = wrapped
        if wrapped:
            self.__cause__ = wrapped[0]


def _type_name(value: Any) -> str:
    return "None" if value is None else type(value).__name__


def _target_name(target: type | tuple[type, ...]) -> str:
    if isinstance(target, tuple):
        return " | ".join(t.__name__ for t in target)
    return target.__name__


def _format(fmt: str, args: tuple[Any, ...]) -> tuple[str, list[BaseException]]:
    """Format ``fmt`` with printf-style verbs, collecting errors given with %w."""
    parts: list[str] = []
    wrapped: list[BaseException] = []
    remaining = iter(args)
    pos = 0
    for match in _VERB.finditer(fmt):
        parts.append(fmt[pos : match.start()])
        pos = match.end()
        if match.group(0) == "%%":
            parts.append("%")
            continue
        verb = match.group("verb")
        opts = match.group("opts")
        try:
            arg = next(remaining)
        except StopIteration:
            parts.append(f"%!{verb}(MISSING)")
            continue
        if verb == "w":
            if isinstance(arg, BaseException):
                wrapped.append(arg)
            verb = "s"
        elif verb == "v":
            verb = "s"
        elif verb == "T":
            arg, verb = _type_name(arg), "s"
        elif verb == "q":
            verb = "r"
        try:
            parts.append(f"%{opts}{verb}" % (arg,))
        except (TypeError, ValueError):
            parts.append(f"%!{verb}({arg!r})")
    parts.append(fmt[pos:])
    extra = list(remaining)
    if extra:
        listed = ", ".join(f"{_type_name(a)}={a}" for a in extra)
        parts.append(f"%!(EXTRA {listed})")
    return "".join(parts), wrapped


def _make_error(fmt: str, args: tuple[Any, ...]) -> _FormattedError:
    message, wrapped = _format(fmt, args)
    return _FormattedError(message, tuple(wrapped))


def _error_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield ``err`` and every error it wraps, each once."""
    seen: set[int] = set()
    pending: deque[BaseException] = deque([err])
    while pending:
        current = pending.popleft()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        if isinstance(current, _FormattedError):
            pending.extend(current.wrapped)
        if isinstance(current, RecoverableError):
            pending.append(current.error)
        if current.__cause__ is not None:
            pending.append(current.__cause__)


def _matches(err: BaseException, target: Any) -> bool:
    if isinstance(target, type) and issubclass(target, BaseException):
        return any(isinstance(e, target) for e in _error_chain(err))
    return any(e is target for e in _error_chain(err))


class Result(ABC, Generic[T]):
    """Either Ok holding a value, or Err holding an exception."""

    __slots__ = ()

    @abstractmethod
    def deconstruct(self) -> tuple[T | None, BaseException | None]:
        """Return ``(value, None)`` for Ok and ``(None, error)`` for Err."""

    @abstractmethod
    def is_ok(self) -> bool:
        """Return True for Ok, False for Err."""

    @abstractmethod
    def is_error(self, *args: Any) -> bool:
        """Return True for an Err matching any filter, or any Err if none given.

        A filter is an exception instance, matched by identity, or an exception
        class, matched by isinstance, anywhere along the wrapped chain.
        """

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value of Ok; raise the error of Err as recoverable."""

    @abstractmethod
    def map_error(self, err_map: Callable[[BaseException], BaseException]) -> Result[T]:
        """Return Err with the mapped error, or Ok unchanged."""


@dataclass(frozen=True)
class Ok(Result[T]):
    """A successful result."""

    value: T

    def deconstruct(self) -> tuple[T, None]:
        return self.value, None

    def is_ok(self) -> bool:
        return True

    def is_error(self, *args: Any) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def map_error(self, err_map: Callable[[BaseException], BaseException]) -> Result[T]:
        return self


@dataclass(frozen=True)
class Err(Result[T]):
    """A failed result holding the exception that caused it."""

    value: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.value, BaseException):
            raise TypeError(f"Err holds an exception, got {_type_name(self.value)}")

    def deconstruct(self) -> tuple[None, BaseException]:
        return None, self.value

    def is_ok(self) -> bool:
        return False

    def is_error(self, *args: Any) -> bool:
        if not args:
            return True
        return any(_matches(self.value, target) for target in args)

    def unwrap(self) -> T:
        throw(self.value)

    def map_error(self, err_map: Callable[[BaseException], BaseException]) -> Result[T]:
        return Err(err_map(self.value))


def ok(value: T) -> Result[T]:
    """Wrap ``value`` as Ok."""
    return Ok(value)


def error(err: BaseException) -> Result[Any]:
    """Wrap ``err`` as Err."""
    return Err(err)


def errorf(format: str, *args: Any) -> Result[Any]:
    """Return Err with an error formatted from ``format`` and ``args``.

    Verbs follow printf style; ``%v`` prints a value, ``%T`` its type name and
    ``%w`` an error that the new error wraps.
    """
    return Err(_make_error(format, args))


def new(value: T, err: BaseException | None) -> Result[T]:
    """Return Err if ``err`` is given, otherwise Ok holding ``value``."""
    if err is not None:
        return Err(err)
    return Ok(value)


def new_many(*args: Any) -> Result[Any]:
    """Build a result from values followed by an error or None.

    The values (two to sixteen) are gathered into a Tuple.
    """
    if not args:
        raise ValueError("new_many expects values followed by an error or None")
    *values, err = args
    return new(new_tuple(*values), err)


def cast(source: Result[Any], target: type | tuple[type, ...]) -> Result[Any]:
    """Check that an Ok result's value is of ``target``; pass an Err through."""
    if isinstance(source, Ok):
        if isinstance(source.value, target):
            return Ok(source.value)
        return errorf("results.cast : unable to match target type %s", _target_name(target))
    if isinstance(source, Err):
        return Err(source.value)
    return errorf("results.cast : unable to match source type %T", source)


def cast_value(source: Any, target: type | tuple[type, ...]) -> Result[Any]:
    """Return Ok(source) if it is of ``target``, otherwise Err."""
    return castf_value(
        source, target, "unable to cast %s to %s", _type_name(source), _target_name(target)
    )


def castf_value(
    source: Any, target: type | tuple[type, ...], format: str, *args: Any
) -> Result[Any]:
    """Return Ok(source) if it is of ``target``, otherwise Err with the given message."""
    if isinstance(source, target):
        return Ok(source)
    return Err(_make_error(format, args))