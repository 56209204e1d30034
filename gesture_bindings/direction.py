"""
Direction vocabulary for gesture bindings.

A direction is either absolute (fixed to the screen) or relative (follows the
workspace orientation). Every direction has a single canonical name, e.g.
``AbsoluteUp`` or ``RelativeLeft``, used both for display and for parsing.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Literal, Union

from .errors import InvalidDirection


DirectionKind = Literal["Absolute", "Relative"]


class AbsoluteDirection(Enum):
    """Screen-fixed direction."""
    UP = "AbsoluteUp"
    DOWN = "AbsoluteDown"
    LEFT = "AbsoluteLeft"
    RIGHT = "AbsoluteRight"


class RelativeDirection(Enum):
    """Direction relative to the workspace orientation."""
    FORWARD = "RelativeForward"
    BACKWARD = "RelativeBackward"
    LEFT = "RelativeLeft"
    RIGHT = "RelativeRight"


Heading = Union[AbsoluteDirection, RelativeDirection]


@dataclass(frozen=True)
class Direction:
    """
    Direction a gesture points in.

    The branch (absolute or relative) follows from the type of ``heading``,
    so a direction is always exactly one of the two.
    """
    heading: Heading

    def __post_init__(self):
        if not isinstance(self.heading, (AbsoluteDirection, RelativeDirection)):
            raise TypeError(
                f"heading must be an AbsoluteDirection or RelativeDirection, "
                f"got {type(self.heading).__name__}"
            )

    @classmethod
    def absolute(cls, heading: AbsoluteDirection) -> "Direction":
        """Wrap a screen-fixed direction."""
        if not isinstance(heading, AbsoluteDirection):
            raise TypeError(f"expected AbsoluteDirection, got {type(heading).__name__}")
        return cls(heading)

    @classmethod
    def relative(cls, heading: RelativeDirection) -> "Direction":
        """Wrap a workspace-relative direction."""
        if not isinstance(heading, RelativeDirection):
            raise TypeError(f"expected RelativeDirection, got {type(heading).__name__}")
        return cls(heading)

    @property
    def kind(self) -> DirectionKind:
        if isinstance(self.heading, AbsoluteDirection):
            return "Absolute"
        return "Relative"

    @property
    def name(self) -> str:
        """Canonical name, e.g. ``RelativeLeft``."""
        return self.heading.value

    def is_absolute(self) -> bool:
        return isinstance(self.heading, AbsoluteDirection)

    def is_relative(self) -> bool:
        return isinstance(self.heading, RelativeDirection)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: str) -> "Direction":
        """
        Parse a canonical direction name.

        Matching is exact and case-sensitive; surrounding whitespace is not
        stripped.

        Raises:
            InvalidDirection: if ``value`` is not a canonical name
        """
        try:
            return _DIRECTIONS_BY_NAME[value]
        except (KeyError, TypeError):
            raise InvalidDirection(value) from None

    @classmethod
    def all(cls) -> List["Direction"]:
        """Every direction, absolute ones first, in declaration order."""
        return list(_DIRECTIONS_BY_NAME.values())


_DIRECTIONS_BY_NAME: Dict[str, Direction] = {
    heading.value: Direction(heading)
    for headings in (AbsoluteDirection, RelativeDirection)
    for heading in headings
}


def parse_direction(value: str) -> Direction:
    """Shortcut for :meth:`Direction.parse`."""
    return Direction.parse(value)
