"""User-facing labels derived from analysis outcomes."""

from dataclasses import dataclass
from enum import Enum

from carb_analysis.domain.analysis import AnalysisOutcome, NoContentSignal, ReasonCode

STANDARD_CONFIDENCE_THRESHOLD = 5
UNAVAILABLE_ESTIMATE = "Unavailable"


class AnalysisSource(Enum):
    """Where the analyzed content came from."""

    MEAL_PHOTOS = "meal_photos"
    RECIPE_PHOTO = "recipe_photo"
    RECIPE_LINK = "recipe_link"


@dataclass(frozen=True)
class NoContentMessage:
    """Title and body shown instead of a result."""

    title: str
    message: str


_NO_FOOD = NoContentMessage(
    "No Food Detected",
    "We couldn't find any food in the photos you captured. "
    "Please try again with images that clearly show your meal.",
)
_NO_RECIPE = NoContentMessage(
    "No Recipe Detected",
    "We couldn't find a recipe in the photo you captured. "
    "Please try again with a clear image of a recipe.",
)
_NOT_A_RECIPE_LINK = NoContentMessage(
    "Not a Recipe",
    "The URL you provided doesn't appear to contain a recipe. "
    "Please try again with a link to a recipe page.",
)
_INACCESSIBLE_LINK = NoContentMessage(
    "Can't Access Page",
    "We couldn't access the webpage at the URL you provided. "
    "Please check the link and try again.",
)


def confidence_label(confidence: int | None) -> str:
    """Return the confidence label; values above 5 count as standard."""
    if confidence is None:
        return "—"
    if confidence > STANDARD_CONFIDENCE_THRESHOLD:
        return "Standard confidence"
    return "Low confidence"


def is_low_confidence(confidence: int) -> bool:
    return confidence <= STANDARD_CONFIDENCE_THRESHOLD


def estimate_summary(outcome: AnalysisOutcome) -> str:
    """Return the one-line history estimate, e.g. ``~41g carbs · Rice bowl``."""
    result = outcome.result
    if not outcome.is_result or result is None:
        return UNAVAILABLE_ESTIMATE
    estimate = f"~{result.total_carb_grams}g carbs"
    if result.summary_text:
        return f"{estimate} · {result.summary_text}"
    return estimate


def no_content_message(
    signal: NoContentSignal, source: AnalysisSource
) -> NoContentMessage:
    """Pick the error copy for a no-content signal."""
    if source is AnalysisSource.MEAL_PHOTOS:
        return _NO_FOOD
    if source is AnalysisSource.RECIPE_PHOTO:
        return _NO_RECIPE
    if signal.reason is ReasonCode.INACCESSIBLE:
        return _INACCESSIBLE_LINK
    return _NOT_A_RECIPE_LINK

