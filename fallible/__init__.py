"""Result, Option and tuple types with recoverable error handling."""

__version__ = "0.1.0"
__all__ = ["assertions", "errors", "handle", "option", "result", "tuples"]