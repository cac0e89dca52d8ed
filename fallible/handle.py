"""Turning recoverable errors raised inside a function into error results."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from .errors import is_recoverable
from .result import Err

__all__ = ["handle_error"]

F = TypeVar("F", bound=Callable[..., Any])


def handle_error(func: F) -> F:
    """Decorate ``func`` so that a recoverable error it raises becomes an Err.

    Errors that are not recoverable propagate unchanged; a normal return is
    passed through as it is.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            if not is_recoverable(exc):
                raise
            return Err(exc)

    return wrapper  # type: ignore[return-value]