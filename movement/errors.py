"""
Parse errors raised while reading clock and duration strings.

Every error derives from ParseError, itself a ValueError, and keeps the
offending input on ``text`` so callers can echo it back:

    ParseError
    ├── MalformedInput            shape is not HH[:MM[:SS]]
    │   ├── SeparatorCountError   too many ':' separated fields
    │   └── NonNumericComponent   a field is empty or not all digits
    ├── OutOfRange                a field is outside its bounds
    └── UnrecognizedMeridiem      trailing token is not an AM/PM spelling
"""

from typing import Optional, Union


class ParseError(ValueError):
    """Base class for every time or duration string failure."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class MalformedInput(ParseError):
    """The string does not look like HH, HH:MM or HH:MM:SS."""


class SeparatorCountError(MalformedInput):
    def __init__(self, text: str, count: int):
        super().__init__(
            f"expected at most 3 ':' separated fields, got {count} in {text!r}", text)
        self.count = count


class NonNumericComponent(MalformedInput):
    def __init__(self, text: str, component: str):
        super().__init__(f"field {component!r} in {text!r} is not a number", text)
        self.component = component


class OutOfRange(ParseError):
    def __init__(self, text: str, field: str, value: Union[int, str], low: int, high: Optional[int]):
        if high is None:
            bounds = f"at least {low}"
        else:
            bounds = f"between {low} and {high}"
        super().__init__(f"{field} {value} in {text!r} must be {bounds}", text)
        self.field = field
        self.value = value
        self.low = low
        self.high = high


class UnrecognizedMeridiem(ParseError):
    def __init__(self, text: str, token: str):
        super().__init__(f"{token!r} in {text!r} is not AM or PM", text)
        self.token = token
