"""Normalization of parsed model JSON into analysis results."""

import logging
import math
from collections.abc import Mapping

from carb_analysis.domain.analysis import (
    AnalysisResult,
    Component,
    NoContentSignal,
    ReasonCode,
)
from carb_analysis.domain.profiles import (
    CARB_CONTENT_GRAMS,
    CARB_PERCENTAGE,
    CONFIDENCE,
    DESCRIPTION,
    ESTIMATED_WEIGHT_GRAMS,
    PORTIONS_COUNT,
    SUMMARY_TEXT,
    TOTAL_CARB_GRAMS,
    SchemaProfile,
)
from carb_analysis.services.fields import (
    extract_bool,
    extract_components,
    extract_number,
    extract_string,
)

_logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return int(math.copysign(rounded, value))


def normalize(
    obj: Mapping[str, object], profile: SchemaProfile
) -> AnalysisResult | NoContentSignal:
    """Build a result, or a no-content signal when the response flags one."""
    signal = detect_no_content(obj, profile)
    if signal is not None:
        return signal

    components = tuple(
        build_component(raw, profile)
        for raw in extract_components(obj, profile.component_list_aliases)
    )

    total = extract_number(obj, profile.aliases(TOTAL_CARB_GRAMS))
    if total is None:
        total_carb_grams = sum(c.carb_content_grams for c in components)
        _logger.debug("Total carbs missing, summed components: %s", total_carb_grams)
    else:
        total_carb_grams = round_half_away(total)

    confidence = extract_number(obj, profile.aliases(CONFIDENCE))
    summary = extract_string(obj, profile.aliases(SUMMARY_TEXT))

    portions_count: int | None = None
    if profile.has_portions:
        portions = extract_number(obj, profile.aliases(PORTIONS_COUNT))
        portions_count = round_half_away(portions) if portions is not None else 1
        if portions_count <= 0:
            portions_count = 1

    return AnalysisResult(
        components=components,
        total_carb_grams=total_carb_grams,
        confidence=round_half_away(confidence) if confidence is not None else 0,
        summary_text=summary or "",
        portions_count=portions_count,
    )


def build_component(raw: Mapping[str, object], profile: SchemaProfile) -> Component:
    """Map one raw line item, deriving carb grams when they are missing."""
    weight = extract_number(raw, profile.component_aliases(ESTIMATED_WEIGHT_GRAMS))
    percentage = extract_number(raw, profile.component_aliases(CARB_PERCENTAGE))
    carbs = extract_number(raw, profile.component_aliases(CARB_CONTENT_GRAMS))
    weight = weight if weight is not None else 0.0
    percentage = percentage if percentage is not None else 0.0
    if carbs is None:
        carbs = weight * percentage / 100.0
    return Component(
        description=extract_string(raw, profile.component_aliases(DESCRIPTION)) or "",
        estimated_weight_grams=round_half_away(weight),
        carb_percentage=round_half_away(percentage),
        carb_content_grams=round_half_away(carbs),
    )


def detect_no_content(
    obj: Mapping[str, object], profile: SchemaProfile
) -> NoContentSignal | None:
    """Return a signal when the no-content flag is JSON ``true``."""
    if extract_bool(obj, (profile.no_content_field,)) is not True:
        return None
    raw_reason = extract_string(obj, profile.reason_field_aliases)
    if raw_reason is None:
        reason = profile.default_reason
    else:
        reason = ReasonCode.from_raw(raw_reason)
    _logger.info(
        "Response flagged no content: profile=%s reason=%s",
        profile.name,
        reason.value,
    )
    return NoContentSignal(reason=reason)
