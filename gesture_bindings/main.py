"""
Command line listing of gesture bindings.

Usage:
    gesture-bindings [PATH]

Prints the display form of every binding in PATH, or in the packaged
defaults when no path is given.
"""
import logging
import sys
from typing import List, Optional

from .config import load_gestures
from .errors import GestureError
from .gesture import Gesture


logger = logging.getLogger(__name__)


def describe(gesture: Gesture) -> str:
    """Display line for a binding, with its description when present."""
    if gesture.description is None:
        return gesture.format()
    return f"{gesture.format()} - {gesture.description}"


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else None

    try:
        gestures = load_gestures(path)
    except (GestureError, OSError) as e:
        logger.error(f"Failed to load gesture bindings: {e}")
        print(f"Error: {e}")
        return 1

    for gesture in gestures:
        print(describe(gesture))
    return 0


def run() -> None:
    """Console script wrapper."""
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())


if __name__ == "__main__":
    run()
