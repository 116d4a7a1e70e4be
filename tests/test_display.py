"""Tests for display helpers."""

import pytest

from carb_analysis.domain.analysis import (
    AnalysisOutcome,
    AnalysisResult,
    NoContentSignal,
    ReasonCode,
)
from carb_analysis.services.display import (
    AnalysisSource,
    confidence_label,
    estimate_summary,
    is_low_confidence,
    no_content_message,
)


@pytest.mark.parametrize(
    ("confidence", "label"),
    [
        (5, "Low confidence"),
        (6, "Standard confidence"),
        (0, "Low confidence"),
        (9, "Standard confidence"),
        (None, "—"),
    ],
)
def test_confidence_label_boundary(confidence: int | None, label: str) -> None:
    assert confidence_label(confidence) == label


def test_is_low_confidence() -> None:
    assert is_low_confidence(5)
    assert not is_low_confidence(6)


def test_estimate_summary_with_and_without_summary() -> None:
    with_summary = AnalysisOutcome.from_result(
        AnalysisResult(total_carb_grams=41, summary_text="Rice bowl")
    )
    without_summary = AnalysisOutcome.from_result(AnalysisResult(total_carb_grams=12))

    assert estimate_summary(with_summary) == "~41g carbs · Rice bowl"
    assert estimate_summary(without_summary) == "~12g carbs"


def test_estimate_summary_unavailable_for_non_results() -> None:
    no_content = AnalysisOutcome.from_signal(NoContentSignal(ReasonCode.NOT_A_RECIPE))

    assert estimate_summary(no_content) == "Unavailable"
    assert estimate_summary(AnalysisOutcome.decode_failure("bad")) == "Unavailable"


@pytest.mark.parametrize(
    ("reason", "source", "title"),
    [
        (ReasonCode.NO_FOOD_DETECTED, AnalysisSource.MEAL_PHOTOS, "No Food Detected"),
        (ReasonCode.NOT_A_RECIPE, AnalysisSource.RECIPE_PHOTO, "No Recipe Detected"),
        (ReasonCode.NOT_A_RECIPE, AnalysisSource.RECIPE_LINK, "Not a Recipe"),
        (ReasonCode.INACCESSIBLE, AnalysisSource.RECIPE_LINK, "Can't Access Page"),
        (ReasonCode.UNSPECIFIED, AnalysisSource.RECIPE_LINK, "Not a Recipe"),
    ],
)
def test_no_content_message(
    reason: ReasonCode, source: AnalysisSource, title: str
) -> None:
    message = no_content_message(NoContentSignal(reason), source)

    assert message.title == title
    assert message.message
