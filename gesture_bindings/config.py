"""
Structured configuration for gesture bindings.

A binding file is YAML with a top-level ``gestures`` list. Each entry is
either a canonical string (``"3+RelativeLeft"``) or a record:

    fingers: 4
    direction:
      Relative: RelativeLeft
    description: Previous workspace

Unknown keys are rejected at every level.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, NoReturn, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .direction import AbsoluteDirection, Direction, RelativeDirection
from .errors import GestureConfigError, GestureError, InvalidDirection, UnknownField
from .gesture import FINGERS_MAX, Gesture


logger = logging.getLogger(__name__)

DEFAULT_BINDINGS_FILE = "gestures.default.yaml"

_HEADINGS_BY_KIND = {
    "Absolute": AbsoluteDirection,
    "Relative": RelativeDirection,
}


class GestureRecord(BaseModel):
    """Schema of a structured gesture entry."""
    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    fingers: int = Field(ge=0, le=FINGERS_MAX)
    direction: Dict[str, str]
    description: Optional[str] = None


def gesture_from_dict(data: Any) -> Gesture:
    """
    Build a gesture from a structured record.

    Args:
        data: Mapping with ``fingers``, ``direction`` and optional ``description``

    Returns:
        Gesture described by the record

    Raises:
        UnknownField: record or direction has a key outside the schema
        InvalidDirection: direction name is not valid for its branch
        GestureConfigError: any other schema violation
    """
    try:
        record = GestureRecord.model_validate(data)
    except ValidationError as e:
        _raise_config_error(e)

    return Gesture(
        fingers=record.fingers,
        direction=_direction_from_record(record.direction),
        description=record.description,
    )


def gesture_to_dict(gesture: Gesture) -> Dict[str, Any]:
    """Convert a gesture to a structured record, omitting an absent description."""
    record = GestureRecord(
        fingers=gesture.fingers,
        direction={gesture.direction.kind: gesture.direction.name},
        description=gesture.description,
    )
    return record.model_dump(exclude_none=True)


def gesture_from_entry(entry: Any) -> Gesture:
    """Build a gesture from a binding file entry, either a canonical string or a record."""
    if isinstance(entry, str):
        return Gesture.parse(entry)
    return gesture_from_dict(entry)


def load_gestures(path: Optional[Union[str, Path]] = None) -> List[Gesture]:
    """
    Load gesture bindings from a YAML file.

    Args:
        path: Path to the bindings file. If None, uses the packaged gestures.default.yaml

    Returns:
        Gestures in file order
    """
    if path is None:
        path = Path(__file__).parent / DEFAULT_BINDINGS_FILE

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Gesture bindings file not found: {config_path}")
    if not config_path.is_file():
        raise GestureConfigError(f"Gesture bindings path is not a file: {config_path}")

    with open(config_path, 'r', encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, ValueError) as e:
            raise GestureConfigError(f"Invalid YAML in {config_path}: {e}") from e

    gestures = _dict_to_gestures(data)
    logger.info(f"Loaded {len(gestures)} gesture bindings from {config_path}")
    return gestures


def dump_gestures(gestures: Iterable[Gesture]) -> str:
    """Render gestures as a binding file document."""
    data = {"gestures": [gesture_to_dict(gesture) for gesture in gestures]}
    return yaml.safe_dump(data, sort_keys=False)


def save_gestures(gestures: Iterable[Gesture], path: Union[str, Path]) -> None:
    """Write gestures to a binding file, creating parent directories as needed."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    document = dump_gestures(gestures)
    with open(config_path, 'w', encoding="utf-8") as f:
        f.write(document)
    logger.debug(f"Saved gesture bindings to {config_path}")


def _dict_to_gestures(data: Any) -> List[Gesture]:
    """Convert a parsed binding file document to gestures."""
    if not isinstance(data, dict) or not isinstance(data.get("gestures"), list):
        raise GestureConfigError("Binding file must be a mapping with a 'gestures' list")

    for key in data:
        if key != "gestures":
            raise UnknownField(str(key))

    gestures = []
    for index, entry in enumerate(data["gestures"]):
        try:
            gestures.append(gesture_from_entry(entry))
        except GestureError:
            logger.error(f"Invalid gesture binding at entry {index}: {entry!r}")
            raise
    return gestures


def _direction_from_record(data: Dict[str, str]) -> Direction:
    """Decode the externally tagged ``{Absolute: AbsoluteUp}`` form."""
    for kind in data:
        if kind not in _HEADINGS_BY_KIND:
            raise UnknownField(kind, "direction")

    if len(data) != 1:
        raise GestureConfigError(
            f"direction must have exactly one of 'Absolute' or 'Relative', got {sorted(data)}"
        )

    kind, name = next(iter(data.items()))
    try:
        return Direction(_HEADINGS_BY_KIND[kind](name))
    except ValueError:
        raise InvalidDirection(name) from None


def _raise_config_error(error: ValidationError) -> NoReturn:
    for detail in error.errors():
        if detail["type"] == "extra_forbidden":
            raise UnknownField(str(detail["loc"][-1])) from error
    raise GestureConfigError(f"Invalid gesture record: {error}") from error
