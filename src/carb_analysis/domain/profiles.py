"""Schema profiles describing how to read meal and recipe responses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from carb_analysis.domain.analysis import ReasonCode

DESCRIPTION = "description"
ESTIMATED_WEIGHT_GRAMS = "estimatedWeightGrams"
CARB_PERCENTAGE = "carbPercentage"
CARB_CONTENT_GRAMS = "carbContentGrams"

TOTAL_CARB_GRAMS = "totalCarbGrams"
CONFIDENCE = "confidence"
SUMMARY_TEXT = "summaryText"
PORTIONS_COUNT = "portionsCount"

NO_CONTENT_FIELD = "noContent"
CONTENT_ERROR_ALIASES: tuple[str, ...] = ("contentError",)

_COMPONENT_LIST_ALIASES: tuple[str, ...] = ("components", "items", "ingredients")

_COMPONENT_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    DESCRIPTION: ("description",),
    ESTIMATED_WEIGHT_GRAMS: (
        "estimatedWeightGrams",
        "estimatedWeight",
        "weightGrams",
        "weight",
        "grams",
    ),
    CARB_PERCENTAGE: ("carbPercentage", "carbPercent", "carbsPercent", "carb_pct"),
    CARB_CONTENT_GRAMS: (
        "carbContentGrams",
        "carbGrams",
        "netCarbs",
        "netCarbGrams",
        "carbs",
        "carbohydrates",
    ),
}

_TOTAL_ALIASES: tuple[str, ...] = (
    "totalCarbGrams",
    "totalCarbs",
    "totalNetCarbs",
    "netCarbs",
)
_CONFIDENCE_ALIASES: tuple[str, ...] = (
    "confidence",
    "confidenceScore",
    "confidenceLevel",
)


@dataclass(frozen=True, eq=False)
class SchemaProfile:
    """Declarative alias tables for one response shape.

    Alias tuples are ordered by priority; the first key present with the
    expected type wins.
    """

    name: str
    component_list_aliases: tuple[str, ...]
    component_field_aliases: Mapping[str, tuple[str, ...]]
    top_level_field_aliases: Mapping[str, tuple[str, ...]]
    default_reason: ReasonCode
    no_content_field: str = NO_CONTENT_FIELD
    reason_field_aliases: tuple[str, ...] = CONTENT_ERROR_ALIASES
    has_portions: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "component_field_aliases",
            MappingProxyType(dict(self.component_field_aliases)),
        )
        object.__setattr__(
            self,
            "top_level_field_aliases",
            MappingProxyType(dict(self.top_level_field_aliases)),
        )
        object.__setattr__(
            self, "has_portions", PORTIONS_COUNT in self.top_level_field_aliases
        )
        _validate_level(self.name, "component", dict(self.component_field_aliases))
        top_level = dict(self.top_level_field_aliases)
        top_level["components"] = self.component_list_aliases
        top_level[NO_CONTENT_FIELD] = (self.no_content_field,)
        top_level["contentError"] = self.reason_field_aliases
        _validate_level(self.name, "top-level", top_level)

    def aliases(self, canonical: str) -> tuple[str, ...]:
        """Return top-level aliases for a canonical field."""
        return self.top_level_field_aliases.get(canonical, ())

    def component_aliases(self, canonical: str) -> tuple[str, ...]:
        """Return component aliases for a canonical field."""
        return self.component_field_aliases.get(canonical, ())


def _validate_level(
    profile_name: str, level: str, fields: dict[str, tuple[str, ...]]
) -> None:
    """Reject empty alias lists and aliases shared across canonical fields."""
    owners: dict[str, str] = {}
    for canonical, aliases in fields.items():
        if not aliases:
            raise ValueError(
                f"Profile {profile_name}: {level} field {canonical!r} has no aliases"
            )
        for alias in aliases:
            owner = owners.setdefault(alias, canonical)
            if owner != canonical:
                raise ValueError(
                    f"Profile {profile_name}: {level} alias {alias!r} is shared by "
                    f"{owner!r} and {canonical!r}"
                )


MEAL_PROFILE = SchemaProfile(
    name="meal",
    component_list_aliases=_COMPONENT_LIST_ALIASES,
    component_field_aliases=_COMPONENT_FIELD_ALIASES,
    top_level_field_aliases={
        TOTAL_CARB_GRAMS: _TOTAL_ALIASES,
        CONFIDENCE: _CONFIDENCE_ALIASES,
        SUMMARY_TEXT: ("mealSummary", "summary", "mealDescription", "description"),
    },
    default_reason=ReasonCode.NO_FOOD_DETECTED,
)

RECIPE_PROFILE = SchemaProfile(
    name="recipe",
    component_list_aliases=_COMPONENT_LIST_ALIASES,
    component_field_aliases=_COMPONENT_FIELD_ALIASES,
    top_level_field_aliases={
        TOTAL_CARB_GRAMS: _TOTAL_ALIASES,
        CONFIDENCE: _CONFIDENCE_ALIASES,
        SUMMARY_TEXT: ("recipeDescription", "description", "recipeName", "summary"),
        PORTIONS_COUNT: ("portionsCount", "portions", "servings", "servingCount"),
    },
    default_reason=ReasonCode.NOT_A_RECIPE,
)


class ProfileKind(Enum):
    """Registry of the supported response profiles."""

    MEAL = MEAL_PROFILE
    RECIPE = RECIPE_PROFILE


def get_profile(kind: ProfileKind | str) -> SchemaProfile:
    """Return a profile by enum member or case-insensitive name."""
    if isinstance(kind, ProfileKind):
        return kind.value
    try:
        return ProfileKind[kind.strip().upper()].value
    except KeyError:
        raise ValueError(f"Unknown schema profile: {kind!r}") from None
