"""
Exceptions raised while parsing and loading gesture bindings.
"""
from typing import Optional


class GestureError(Exception):
    """Base class for every error raised by gesture_bindings."""


class ParseError(GestureError, ValueError):
    """A string could not be parsed into a direction or gesture."""


class InvalidDirection(ParseError):
    """Token did not match any canonical direction name."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid direction {token!r}")


class InvalidFingerCount(ParseError):
    """Leading segment was not a non-negative integer in range."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"could not parse number of fingers from {token!r}")


class MissingFingerCount(ParseError):
    """Encoding had no finger count segment."""

    def __init__(self):
        super().__init__("no value for the number of fingers")


class MissingDirection(ParseError):
    """Encoding had no direction segment."""

    def __init__(self):
        super().__init__("no value for the direction")


class TrailingData(ParseError):
    """Encoding had more than two '+' separated segments."""

    def __init__(self, remainder: str):
        self.remainder = remainder
        super().__init__(f"extra data {remainder!r} not expected")


class GestureConfigError(GestureError, ValueError):
    """A structured gesture record or binding file is malformed."""


class UnknownField(GestureConfigError):
    """Structured record contained a key outside the schema."""

    def __init__(self, name: str, location: Optional[str] = None):
        self.name = name
        self.location = location
        where = f" in {location}" if location else ""
        super().__init__(f"unknown field {name!r}{where}")
