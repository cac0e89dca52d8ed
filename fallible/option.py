"""Options: a value that may or may not be present."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, TypeVar

from .errors import throw
from .result import Ok, Result, errorf

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "some",
    "none",
    "new",
    "get",
    "map_value",
    "map_or",
    "map_or_else",
    "cast",
]

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")


class Option(ABC, Generic[T]):
    """Either Some holding a value, or Nothing."""

    __slots__ = ()

    @abstractmethod
    def deconstruct(self) -> tuple[T | None, bool]:
        """Return ``(value, True)`` for Some and ``(None, False)`` for Nothing."""

    @abstractmethod
    def is_some(self) -> bool:
        """Return True for Some."""

    @abstractmethod
    def is_none(self) -> bool:
        """Return True for Nothing."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value of Some; raise a recoverable error for Nothing."""

    @abstractmethod
    def unwrap_or(self, other: T) -> T:
        """Return the value of Some, or ``other`` for Nothing."""


@dataclass(frozen=True)
class Some(Option[T]):
    """An option holding a value."""

    value: T

    def deconstruct(self) -> tuple[T, bool]:
        return self.value, True

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, other: T) -> T:
        return self.value


@dataclass(frozen=True)
class Nothing(Option[T]):
    """An option without a value."""

    def deconstruct(self) -> tuple[None, bool]:
        return None, False

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> T:
        throw(ValueError(f"{type(self).__name__} unwrapped"))

    def unwrap_or(self, other: T) -> T:
        return other


def some(value: T) -> Option[T]:
    """Wrap ``value`` as Some."""
    return Some(value)


def none() -> Option[Any]:
    """Return Nothing."""
    return Nothing()


def new(value: T, ok: bool) -> Option[T]:
    """Return Some(value) if ``ok`` is true, otherwise Nothing."""
    if ok:
        return Some(value)
    return Nothing()


def get(mapping: Mapping[K, T], key: K) -> Option[T]:
    """Return Some of the value stored under ``key``, or Nothing if it is absent."""
    if key in mapping:
        return Some(mapping[key])
    return Nothing()


def map_value(op: Option[T], transform: Callable[[T], U]) -> Option[U]:
    """Apply ``transform`` to the value of Some; Nothing stays Nothing."""
    if isinstance(op, Some):
        return Some(transform(op.value))
    return Nothing()


def map_or(op: Option[T], transform: Callable[[T], U], default: U) -> U:
    """Apply ``transform`` to the value of Some, or return ``default``."""
    mapped = map_value(op, transform)
    if isinstance(mapped, Some):
        return mapped.value
    return default


def map_or_else(op: Option[T], transform: Callable[[T], U], default: Callable[[], U]) -> U:
    """Apply ``transform`` to the value of Some, or return what ``default()`` gives."""
    mapped = map_value(op, transform)
    if isinstance(mapped, Some):
        return mapped.value
    return default()


def cast(source: Option[Any], target: type | tuple[type, ...]) -> Result[Option[Any]]:
    """Check that the value of Some is of ``target``.

    Nothing gives Ok(Nothing); a matching Some gives Ok(Some); anything else Err.
    """
    if isinstance(source, Nothing):
        return Ok(Nothing())
    if isinstance(source, Some):
        if isinstance(source.value, target):
            return Ok(Some(source.value))
        return errorf("options.cast : unable to match type target type %T", source.value)
    return errorf("options.cast : unable to match type source type %T", source)