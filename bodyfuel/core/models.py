"""Core Data Models - Enums and Pydantic value objects for macro calculation.

All models are immutable value objects with no behavior beyond validation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


AGE_MIN, AGE_MAX = 10, 80
HEIGHT_MIN_CM, HEIGHT_MAX_CM = 120.0, 230.0
WEIGHT_MIN_KG, WEIGHT_MAX_KG = 30.0, 200.0


class Sex(str, Enum):
    """Biological sex used by the Mifflin-St Jeor constant."""

    MALE = "male"
    FEMALE = "female"

    @property
    def bmr_constant(self) -> float:
        return 5.0 if self is Sex.MALE else -161.0


class ActivityLevel(str, Enum):
    """Daily activity level with its TDEE multiplier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def factor(self) -> float:
        return _ACTIVITY_FACTORS[self]


class Goal(str, Enum):
    """Body composition goal with its calorie adjustment."""

    CUT = "cut"
    MAINTAIN = "maintain"
    BULK = "bulk"

    @property
    def kcal_adjust(self) -> int:
        return _GOAL_ADJUSTMENTS[self]


_ACTIVITY_FACTORS = {
    ActivityLevel.LOW: 1.2,
    ActivityLevel.MEDIUM: 1.55,
    ActivityLevel.HIGH: 1.75,
}

_GOAL_ADJUSTMENTS = {
    Goal.CUT: -400,
    Goal.MAINTAIN: 0,
    Goal.BULK: 300,
}

DEFAULT_SEX = Sex.MALE
DEFAULT_ACTIVITY = ActivityLevel.MEDIUM
DEFAULT_GOAL = Goal.MAINTAIN


class CalculationInput(BaseModel):
    """Validated inputs for a single macro calculation."""

    model_config = ConfigDict(frozen=True)

    sex: Sex = Field(default=DEFAULT_SEX)
    age_years: int = Field(ge=AGE_MIN, le=AGE_MAX, description="Age in whole years")
    height_cm: float = Field(ge=HEIGHT_MIN_CM, le=HEIGHT_MAX_CM, description="Height in centimeters")
    weight_kg: float = Field(ge=WEIGHT_MIN_KG, le=WEIGHT_MAX_KG, description="Body weight in kilograms")
    activity: ActivityLevel = Field(default=DEFAULT_ACTIVITY)
    goal: Goal = Field(default=DEFAULT_GOAL)


class MacroResult(BaseModel):
    """Daily calorie and macronutrient targets."""

    model_config = ConfigDict(frozen=True)

    calories: int = Field(ge=1200, description="Daily calorie target")
    protein_grams: int = Field(ge=0, description="Daily protein target in grams")
    fat_grams: int = Field(ge=0, description="Daily fat target in grams")
    carb_grams: int = Field(ge=0, description="Daily carbohydrate target in grams")
