"""Alias-tolerant field extraction from parsed JSON objects."""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum

_logger = logging.getLogger(__name__)


class FieldKind(Enum):
    """JSON-native value types a field may be read as."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"


def _matches(value: object, kind: FieldKind) -> bool:
    if kind is FieldKind.NUMBER:
        # bool is an int subclass but never a JSON number
        return isinstance(value, int | float) and not isinstance(value, bool)
    if kind is FieldKind.STRING:
        return isinstance(value, str)
    if kind is FieldKind.BOOLEAN:
        return isinstance(value, bool)
    return isinstance(value, list)


def extract_field(
    obj: Mapping[str, object], aliases: Iterable[str], kind: FieldKind
) -> object | None:
    """Return the first alias value of the expected type, else ``None``.

    A key holding the wrong type counts as absent, so lower-priority aliases
    still get a chance. Numeric strings are not coerced.
    """
    for alias in aliases:
        if alias not in obj:
            continue
        value = obj[alias]
        if _matches(value, kind):
            return value
        _logger.debug(
            "Ignoring %r: expected %s, got %s",
            alias,
            kind.value,
            type(value).__name__,
        )
    return None


def extract_number(obj: Mapping[str, object], aliases: Iterable[str]) -> float | None:
    """Return a JSON number as float, or ``None``."""
    value = extract_field(obj, aliases, FieldKind.NUMBER)
    if value is None:
        return None
    return float(value)  # type: ignore[arg-type]


def extract_string(obj: Mapping[str, object], aliases: Iterable[str]) -> str | None:
    """Return a JSON string, or ``None``."""
    value = extract_field(obj, aliases, FieldKind.STRING)
    return value if isinstance(value, str) else None


def extract_bool(obj: Mapping[str, object], aliases: Iterable[str]) -> bool | None:
    """Return a JSON boolean, or ``None``."""
    value = extract_field(obj, aliases, FieldKind.BOOLEAN)
    return value if isinstance(value, bool) else None


def extract_components(
    obj: Mapping[str, object], aliases: Iterable[str]
) -> list[Mapping[str, object]]:
    """Return the first array-valued alias as a list of objects.

    Missing breakdowns yield an empty list. Elements that are not JSON
    objects are skipped.
    """
    value = extract_field(obj, aliases, FieldKind.ARRAY)
    if not isinstance(value, list):
        return []
    items: list[Mapping[str, object]] = []
    for index, element in enumerate(value):
        if isinstance(element, dict):
            items.append(element)
        else:
            _logger.debug("Skipping non-object component at index %s", index)
    return items
