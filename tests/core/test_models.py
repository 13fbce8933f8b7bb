"""Unit tests for data models - validation and defaults."""

import pytest
from pydantic import ValidationError

from bodyfuel.core.models import (
    ActivityLevel,
    CalculationInput,
    Goal,
    MacroResult,
    Sex,
)


class TestEnums:
    """Tests for enums with attached data."""

    def test_activity_factors(self):
        """Each activity level carries its multiplier."""
        assert ActivityLevel.LOW.factor == 1.2
        assert ActivityLevel.MEDIUM.factor == 1.55
        assert ActivityLevel.HIGH.factor == 1.75

    def test_goal_adjustments(self):
        """Each goal carries its calorie adjustment."""
        assert Goal.CUT.kcal_adjust == -400
        assert Goal.MAINTAIN.kcal_adjust == 0
        assert Goal.BULK.kcal_adjust == 300

    def test_sex_constants(self):
        """Sex selects the BMR constant."""
        assert Sex.MALE.bmr_constant == 5.0
        assert Sex.FEMALE.bmr_constant == -161.0

    def test_values_are_lowercase_strings(self):
        """Enum values serialize as lowercase strings."""
        assert Sex("female") is Sex.FEMALE
        assert ActivityLevel("high") is ActivityLevel.HIGH
        assert Goal("bulk") is Goal.BULK


class TestCalculationInput:
    """Tests for CalculationInput model."""

    def test_defaults(self):
        """Sex, activity and goal default to male, medium, maintain."""
        calc_input = CalculationInput(age_years=25, height_cm=180, weight_kg=80)
        assert calc_input.sex is Sex.MALE
        assert calc_input.activity is ActivityLevel.MEDIUM
        assert calc_input.goal is Goal.MAINTAIN

    def test_inclusive_lower_bounds(self):
        """Lowest allowed values are accepted."""
        calc_input = CalculationInput(age_years=10, height_cm=120.0, weight_kg=30.0)
        assert calc_input.age_years == 10

    def test_inclusive_upper_bounds(self):
        """Highest allowed values are accepted."""
        calc_input = CalculationInput(age_years=80, height_cm=230.0, weight_kg=200.0)
        assert calc_input.weight_kg == 200.0

    @pytest.mark.parametrize("fields", [
        {"age_years": 9, "height_cm": 180.0, "weight_kg": 80.0},
        {"age_years": 81, "height_cm": 180.0, "weight_kg": 80.0},
        {"age_years": 25, "height_cm": 119.9, "weight_kg": 80.0},
        {"age_years": 25, "height_cm": 230.1, "weight_kg": 80.0},
        {"age_years": 25, "height_cm": 180.0, "weight_kg": 29.9},
        {"age_years": 25, "height_cm": 180.0, "weight_kg": 200.1},
    ])
    def test_out_of_range_rejected(self, fields):
        """Values outside the ranges are rejected."""
        with pytest.raises(ValidationError):
            CalculationInput(**fields)

    def test_immutable(self):
        """Inputs can't be modified after creation."""
        calc_input = CalculationInput(age_years=25, height_cm=180, weight_kg=80)
        with pytest.raises(ValidationError):
            calc_input.age_years = 30


class TestMacroResult:
    """Tests for MacroResult model."""

    def test_valid_result(self):
        """Valid result is created."""
        result = MacroResult(calories=2798, protein_grams=160, fat_grams=80, carb_grams=360)
        assert result.model_dump() == {
            "calories": 2798,
            "protein_grams": 160,
            "fat_grams": 80,
            "carb_grams": 360,
        }

    def test_calories_below_floor_rejected(self):
        """Calories under 1200 are rejected."""
        with pytest.raises(ValidationError):
            MacroResult(calories=1199, protein_grams=100, fat_grams=50, carb_grams=0)

    def test_negative_grams_rejected(self):
        """Negative grams are rejected."""
        with pytest.raises(ValidationError):
            MacroResult(calories=1500, protein_grams=100, fat_grams=50, carb_grams=-1)
