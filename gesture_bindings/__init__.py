"""
Gesture Bindings

Typed multi-finger touchpad gesture bindings with a canonical
"<fingers>+<direction>" string encoding, a display form, and strict
YAML configuration loading.
"""

__version__ = "0.1.0"

from .direction import AbsoluteDirection, RelativeDirection, Direction, parse_direction
from .gesture import Gesture, parse_gesture
from .errors import (
    GestureError,
    ParseError,
    InvalidDirection,
    InvalidFingerCount,
    MissingFingerCount,
    MissingDirection,
    TrailingData,
    GestureConfigError,
    UnknownField,
)
from .config import load_gestures, dump_gestures, save_gestures, gesture_from_dict, gesture_to_dict

__all__ = [
    "AbsoluteDirection",
    "RelativeDirection",
    "Direction",
    "parse_direction",
    "Gesture",
    "parse_gesture",
    "GestureError",
    "ParseError",
    "InvalidDirection",
    "InvalidFingerCount",
    "MissingFingerCount",
    "MissingDirection",
    "TrailingData",
    "GestureConfigError",
    "UnknownField",
    "load_gestures",
    "dump_gestures",
    "save_gestures",
    "gesture_from_dict",
    "gesture_to_dict",
]
