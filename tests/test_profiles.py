"""Tests for schema profiles."""

import pytest

from carb_analysis.domain.analysis import ReasonCode
from carb_analysis.domain.profiles import (
    CARB_CONTENT_GRAMS,
    ESTIMATED_WEIGHT_GRAMS,
    MEAL_PROFILE,
    PORTIONS_COUNT,
    RECIPE_PROFILE,
    SUMMARY_TEXT,
    TOTAL_CARB_GRAMS,
    ProfileKind,
    SchemaProfile,
    get_profile,
)


def test_summary_aliases_differ_per_profile() -> None:
    assert MEAL_PROFILE.aliases(SUMMARY_TEXT) == (
        "mealSummary",
        "summary",
        "mealDescription",
        "description",
    )
    assert RECIPE_PROFILE.aliases(SUMMARY_TEXT) == (
        "recipeDescription",
        "description",
        "recipeName",
        "summary",
    )


def test_shared_alias_tables_keep_priority_order() -> None:
    for profile in (MEAL_PROFILE, RECIPE_PROFILE):
        assert profile.component_list_aliases == ("components", "items", "ingredients")
        assert profile.aliases(TOTAL_CARB_GRAMS)[-1] == "netCarbs"
        assert profile.component_aliases(ESTIMATED_WEIGHT_GRAMS)[0] == (
            "estimatedWeightGrams"
        )
        assert profile.component_aliases(CARB_CONTENT_GRAMS)[-1] == "carbohydrates"


def test_only_recipe_has_portions() -> None:
    assert not MEAL_PROFILE.has_portions
    assert RECIPE_PROFILE.has_portions
    assert MEAL_PROFILE.aliases(PORTIONS_COUNT) == ()


def test_default_reasons() -> None:
    assert MEAL_PROFILE.default_reason is ReasonCode.NO_FOOD_DETECTED
    assert RECIPE_PROFILE.default_reason is ReasonCode.NOT_A_RECIPE
    assert MEAL_PROFILE.no_content_field == "noContent"


def test_get_profile_by_enum_and_name() -> None:
    assert get_profile(ProfileKind.MEAL) is MEAL_PROFILE
    assert get_profile(" Recipe ") is RECIPE_PROFILE


def test_get_profile_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown schema profile"):
        get_profile("snack")


def test_profile_rejects_empty_alias_list() -> None:
    with pytest.raises(ValueError, match="has no aliases"):
        SchemaProfile(
            name="broken",
            component_list_aliases=("components",),
            component_field_aliases={"description": ()},
            top_level_field_aliases={"confidence": ("confidence",)},
            default_reason=ReasonCode.UNSPECIFIED,
        )


def test_profile_rejects_alias_shared_between_fields() -> None:
    with pytest.raises(ValueError, match="shared by"):
        SchemaProfile(
            name="broken",
            component_list_aliases=("components",),
            component_field_aliases={"description": ("description",)},
            top_level_field_aliases={
                "totalCarbGrams": ("totalCarbs", "carbs"),
                "confidence": ("confidence", "carbs"),
            },
            default_reason=ReasonCode.UNSPECIFIED,
        )


def test_profile_alias_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        MEAL_PROFILE.top_level_field_aliases["confidence"] = ("x",)  # type: ignore[index]
