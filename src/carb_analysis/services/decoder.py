"""Entry points that classify raw model text into analysis outcomes."""

import json
import logging
import math

from carb_analysis.domain.analysis import (
    AnalysisOutcome,
    NoContentSignal,
)
from carb_analysis.domain.profiles import MEAL_PROFILE, RECIPE_PROFILE, SchemaProfile
from carb_analysis.services.normalizer import detect_no_content, normalize
from carb_analysis.services.sanitizer import sanitize_response_text

DEFAULT_MAX_RESPONSE_CHARS = 200_000

_logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> object:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


def _parse_finite_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"Number {raw} is out of range")
    return value


def _parse_bounded_int(raw: str) -> int:
    value = int(raw)
    try:
        float(value)
    except OverflowError as exc:
        raise ValueError(f"Number {raw[:20]}... is out of range") from exc
    return value


def _ensure_encodable(parsed: object) -> None:
    """Reject strings holding unpaired surrogate escapes such as ``\\ud800``."""
    pending = [parsed]
    while pending:
        node = pending.pop()
        if isinstance(node, str):
            try:
                node.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ValueError("string contains an unpaired surrogate") from exc
        elif isinstance(node, dict):
            pending.extend(node.keys())
            pending.extend(node.values())
        elif isinstance(node, list):
            pending.extend(node)


def parse_json_object(text: str | None, *, max_chars: int) -> dict[str, object]:
    """Sanitize and parse model text into a JSON object.

    Raises ValueError for anything that is not a single JSON object.
    """
    if not text:
        raise ValueError("empty response")
    if len(text) > max_chars:
        raise ValueError(f"response too large ({len(text)} > {max_chars} chars)")
    sanitized = sanitize_response_text(text)
    try:
        parsed = json.loads(
            sanitized,
            parse_float=_parse_finite_float,
            parse_int=_parse_bounded_int,
            parse_constant=_reject_constant,
        )
    except RecursionError as exc:
        raise ValueError("response nesting too deep") from exc
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    _ensure_encodable(parsed)
    return parsed


def decode_response(
    text: str | None,
    profile: SchemaProfile,
    *,
    max_chars: int = DEFAULT_MAX_RESPONSE_CHARS,
) -> AnalysisOutcome:
    """Classify model text as a result, a no-content signal or a decode failure.

    Never raises for any input text.
    """
    try:
        obj = parse_json_object(text, max_chars=max_chars)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass
        _logger.warning("Could not decode %s response: %s", profile.name, exc)
        return AnalysisOutcome.decode_failure(str(exc))

    try:
        normalized = normalize(obj, profile)
    except OverflowError as exc:
        _logger.warning("Numeric overflow in %s response: %s", profile.name, exc)
        return AnalysisOutcome.decode_failure("numeric overflow")
    if isinstance(normalized, NoContentSignal):
        return AnalysisOutcome.from_signal(normalized)
    return AnalysisOutcome.from_result(normalized)


def decode_meal_response(
    text: str | None, *, max_chars: int = DEFAULT_MAX_RESPONSE_CHARS
) -> AnalysisOutcome:
    """Decode a meal photo response."""
    return decode_response(text, MEAL_PROFILE, max_chars=max_chars)


def decode_recipe_response(
    text: str | None, *, max_chars: int = DEFAULT_MAX_RESPONSE_CHARS
) -> AnalysisOutcome:
    """Decode a recipe photo or recipe link response."""
    return decode_response(text, RECIPE_PROFILE, max_chars=max_chars)


def find_no_content(
    text: str | None,
    profile: SchemaProfile,
    *,
    max_chars: int = DEFAULT_MAX_RESPONSE_CHARS,
) -> NoContentSignal | None:
    """Return the no-content signal without normalizing the rest."""
    try:
        obj = parse_json_object(text, max_chars=max_chars)
    except ValueError:
        return None
    return detect_no_content(obj, profile)
