"""Domain models for normalized carb analysis results."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CanonicalModel(BaseModel):
    """Frozen model serialized with canonical camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Component(_CanonicalModel):
    """Single food or ingredient carb estimate."""

    description: str = ""
    estimated_weight_grams: int = 0
    carb_percentage: int = 0
    carb_content_grams: int = 0


class AnalysisResult(_CanonicalModel):
    """Normalized analysis of a meal or recipe."""

    components: tuple[Component, ...] = Field(default_factory=tuple)
    total_carb_grams: int = 0
    confidence: int = 0
    summary_text: str = ""
    portions_count: int | None = None

    @property
    def carbs_per_portion(self) -> float:
        """Return carbs per portion, or 0 when portions are not meaningful."""
        portions = 1 if self.portions_count is None else self.portions_count
        if portions <= 0:
            return 0.0
        return self.total_carb_grams / portions

    def to_json_dict(self) -> dict[str, object]:
        """Return the canonical JSON representation.

        ``portionsCount`` only appears for recipe results.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialize to canonical JSON text."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ReasonCode(Enum):
    """Why a response carried no analyzable content."""

    NOT_A_RECIPE = "not_a_recipe"
    INACCESSIBLE = "inaccessible"
    NO_FOOD_DETECTED = "no_food_detected"
    UNSPECIFIED = "unspecified"

    @classmethod
    def from_raw(cls, raw: str) -> "ReasonCode":
        """Map a model-provided code, falling back to ``UNSPECIFIED``."""
        try:
            return cls(raw)
        except ValueError:
            return cls.UNSPECIFIED


@dataclass(frozen=True)
class NoContentSignal:
    """Valid response explicitly flagged as having no content."""

    reason: ReasonCode


class OutcomeKind(Enum):
    """Classification of a decoded response."""

    RESULT = "result"
    NO_CONTENT = "noContent"
    DECODE_FAILURE = "decodeFailure"


@dataclass(frozen=True)
class AnalysisOutcome:
    """Tagged outcome of decoding one model response."""

    kind: OutcomeKind
    result: AnalysisResult | None = None
    signal: NoContentSignal | None = None
    detail: str | None = None

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisOutcome":
        return cls(kind=OutcomeKind.RESULT, result=result)

    @classmethod
    def from_signal(cls, signal: NoContentSignal) -> "AnalysisOutcome":
        return cls(kind=OutcomeKind.NO_CONTENT, signal=signal)

    @classmethod
    def decode_failure(cls, detail: str) -> "AnalysisOutcome":
        return cls(kind=OutcomeKind.DECODE_FAILURE, detail=detail)

    @property
    def is_result(self) -> bool:
        return self.kind is OutcomeKind.RESULT

    def to_dict(self) -> dict[str, object]:
        """Return the tagged-union view used by callers and debug tooling."""
        if self.kind is OutcomeKind.RESULT and self.result is not None:
            return {"kind": self.kind.value, "value": self.result.to_json_dict()}
        if self.kind is OutcomeKind.NO_CONTENT and self.signal is not None:
            return {"kind": self.kind.value, "reason": self.signal.reason.value}
        return {"kind": OutcomeKind.DECODE_FAILURE.value}
