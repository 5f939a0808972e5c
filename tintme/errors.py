# errors.py

from typing import Any, Optional


class StyleError(ValueError):
    """Base class for every error raised while building a style."""

    def __init__(self, message: str, attribute: Optional[str] = None, value: Any = None):
        self.attribute = attribute
        self.value = value
        if attribute:
            message = f"{attribute}: {message}"
        super().__init__(message)


class ParseError(StyleError):
    """A color specification could not be parsed."""


class InvalidHex(ParseError):
    def __init__(self, value: Any, attribute: Optional[str] = None):
        super().__init__(
            f"invalid hex color {value!r} (expected 3 or 6 hex digits, optional '#')",
            attribute=attribute,
            value=value,
        )


class UnknownColor(ParseError):
    def __init__(self, value: Any, attribute: Optional[str] = None):
        super().__init__(f"unknown color {value!r}", attribute=attribute, value=value)


class MutuallyExclusiveAttributes(StyleError):
    """Raised when bold and faint are both switched on directly."""

    def __init__(self, first: str = "bold", second: str = "faint"):
        self.attributes = (first, second)
        super().__init__(f"Cannot specify both {first} and {second} simultaneously")


class InvalidAttribute(StyleError):
    """An attribute holds a value outside its domain."""

    def __init__(self, attribute: str, value: Any, expected: str = ""):
        message = f"invalid value {value!r}"
        if expected:
            message += f" (expected {expected})"
        super().__init__(message, attribute=attribute, value=value)
