"""
Gesture binding value object.

A gesture is a finger count plus a direction, with an optional free-text
description. It has two string forms that are deliberately not inverses:

* the display form, ``"3 Finger RelativeLeft"``, produced for UI only
* the canonical form, ``"3+RelativeLeft"``, used in configuration and
  accepted by :meth:`Gesture.parse`
"""
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from .direction import AbsoluteDirection, Direction, RelativeDirection
from .errors import InvalidFingerCount, MissingDirection, MissingFingerCount, TrailingData


# Finger counts are stored as unsigned 32-bit integers
FINGERS_MAX = 2 ** 32 - 1

SEPARATOR = "+"

_FINGERS_PATTERN = re.compile(r"[0-9]+")

DirectionLike = Union[Direction, AbsoluteDirection, RelativeDirection]


@dataclass(frozen=True)
class Gesture:
    """
    A multi-finger swipe that can be bound to a compositor action.

    Equality and hashing cover all three fields, description included. Use
    ``key`` (or ``matches``) to look up a live gesture against configured
    bindings without regard to their descriptions.
    """
    fingers: int
    direction: Direction
    description: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.fingers, bool) or not isinstance(self.fingers, int):
            raise TypeError(f"fingers must be an int, got {type(self.fingers).__name__}")
        if not 0 <= self.fingers <= FINGERS_MAX:
            raise ValueError(f"fingers must be between 0 and {FINGERS_MAX}, got {self.fingers}")

        if isinstance(self.direction, (AbsoluteDirection, RelativeDirection)):
            object.__setattr__(self, "direction", Direction(self.direction))
        elif not isinstance(self.direction, Direction):
            raise TypeError(f"direction must be a Direction, got {type(self.direction).__name__}")

        if self.description is not None and not isinstance(self.description, str):
            raise TypeError(f"description must be a str, got {type(self.description).__name__}")

    @property
    def key(self) -> Tuple[int, Direction]:
        """Description-insensitive identity used for binding lookup."""
        return (self.fingers, self.direction)

    def matches(self, other: "Gesture") -> bool:
        """True if both gestures have the same fingers and direction."""
        return self.key == other.key

    def with_description(self, description: Optional[str]) -> "Gesture":
        """Return a copy carrying ``description`` (``None`` clears it)."""
        return replace(self, description=description)

    def is_absolute(self) -> bool:
        return self.direction.is_absolute()

    def format(self) -> str:
        """Human readable form, e.g. ``"3 Finger RelativeLeft"``."""
        return f"{self.fingers} Finger {self.direction.name}"

    def __str__(self) -> str:
        return self.format()

    def to_canonical(self) -> str:
        """Configuration form, e.g. ``"3+RelativeLeft"``. Never includes the description."""
        return f"{self.fingers}{SEPARATOR}{self.direction.name}"

    @classmethod
    def parse(cls, value: str) -> "Gesture":
        """
        Parse the canonical ``"<fingers>+<direction>"`` form.

        The whole input must be consumed. The parsed gesture never has a
        description.

        Args:
            value: Encoded gesture, e.g. ``"4+AbsoluteUp"``

        Returns:
            Gesture with the decoded fingers and direction

        Raises:
            TrailingData: more than two segments
            MissingFingerCount: empty input
            InvalidFingerCount: first segment is not an unsigned integer
            MissingDirection: no separator
            InvalidDirection: second segment is not a direction name
        """
        segments = value.split(SEPARATOR, 2)
        if len(segments) == 3:
            raise TrailingData(segments[2])

        if not value:
            raise MissingFingerCount()
        fingers = _parse_fingers(segments[0])

        if len(segments) < 2:
            raise MissingDirection()
        direction = Direction.parse(segments[1])

        return cls(fingers, direction)


def _parse_fingers(token: str) -> int:
    # int() would also accept signs, whitespace, underscores and non-ASCII digits
    if not _FINGERS_PATTERN.fullmatch(token):
        raise InvalidFingerCount(token)
    # Bounded before int() so oversized tokens never hit the digit limit
    if len(token.lstrip("0")) > len(str(FINGERS_MAX)):
        raise InvalidFingerCount(token)
    fingers = int(token)
    if fingers > FINGERS_MAX:
        raise InvalidFingerCount(token)
    return fingers


def parse_gesture(value: str) -> Gesture:
    """Shortcut for :meth:`Gesture.parse`."""
    return Gesture.parse(value)
