"""Fixed-size tuples of two to sixteen values."""

from __future__ import annotations

import re
from typing import Any

__all__ = ["MIN_ARITY", "MAX_ARITY", "Tuple", "new_tuple"]

MIN_ARITY = 2
MAX_ARITY = 16

_VALUE_NAME = re.compile(r"value([1-9][0-9]*)")


class Tuple(tuple):
    """An immutable group of two to sixteen values.

    Items are reachable by index and as ``value1`` .. ``valueN``.
    """

    __slots__ = ()

    def __new__(cls, *values: Any) -> Tuple:
        if not MIN_ARITY <= len(values) <= MAX_ARITY:
            raise ValueError(
                f"a tuple holds {MIN_ARITY} to {MAX_ARITY} values, got {len(values)}"
            )
        return super().__new__(cls, values)

    def __getnewargs__(self) -> tuple[Any, ...]:
        return tuple(self)

    def __getattr__(self, name: str) -> Any:
        match = _VALUE_NAME.fullmatch(name)
        if match is not None:
            position = int(match.group(1))
            if position <= len(self):
                return self[position - 1]
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self))})"

    def deconstruct(self) -> tuple[Any, ...]:
        """Return the values as a plain tuple, ready for unpacking."""
        return tuple(self)


def new_tuple(*args: Any) -> Tuple:
    """Build a Tuple from the given values."""
    return Tuple(*args)