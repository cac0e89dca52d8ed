"""Recoverable errors: raising an error so that a result handler can catch it."""

from __future__ import annotations

from typing import NoReturn

__all__ = ["RecoverableError", "is_recoverable", "throw"]


class RecoverableError(Exception):
    """An error marked as safe for a result handler to turn into an error result.

    The wrapped error is kept in ``error``; the message is the wrapped error's.
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


def is_recoverable(err: BaseException | None) -> bool:
    """Return True if ``err`` is, or was raised from, a RecoverableError."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, RecoverableError):
            return True
        seen.add(id(current))
        current = current.__cause__
    return False


def throw(err: BaseException) -> NoReturn:
    """Raise ``err`` marked as recoverable.

    An error that is already recoverable is raised as it is; any other error
    is wrapped in a RecoverableError whose cause is the original.
    """
    if not isinstance(err, BaseException):
        raise TypeError(f"throw expects an exception, got {type(err).__name__}")
    if is_recoverable(err):
        raise err
    raise RecoverableError(err) from err