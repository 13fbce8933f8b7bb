"""Macro Calculations - Pure functions for daily calorie and macro targets.

All functions are pure: same input always produces same output, no side effects.
"""

from decimal import Decimal, ROUND_HALF_UP

from .models import ActivityLevel, CalculationInput, MacroResult, Sex


CALORIE_FLOOR = 1200
PROTEIN_G_PER_KG = 2.0
FAT_G_PER_KG = 1.0

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with .5 going away from zero.

    Operates on the exact binary value of the float, so 359.5 becomes 360
    and 66.25 becomes 66 (unlike built-in round, which rounds .5 to even).

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def calculate_bmr(sex: Sex, age_years: int, height_cm: float, weight_kg: float) -> float:
    """Calculate basal metabolic rate with the Mifflin-St Jeor equation.

    Args:
        sex: Male or female
        age_years: Age in years
        height_cm: Height in centimeters
        weight_kg: Weight in kilograms

    Returns:
        BMR in kcal/day
    """
    return 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age_years + sex.bmr_constant


def calculate_tdee(bmr: float, activity: ActivityLevel) -> float:
    """Scale BMR by the activity multiplier."""
    return bmr * activity.factor


def compute(calc_input: CalculationInput) -> MacroResult:
    """Compute daily calorie and macro targets.

    Protein and fat are fixed per kilogram of body weight; carbs fill whatever
    calories remain after the rounded protein and fat grams are accounted for.

    Args:
        calc_input: Validated calculation input

    Returns:
        MacroResult with calories and gram targets
    """
    bmr = calculate_bmr(
        calc_input.sex,
        calc_input.age_years,
        calc_input.height_cm,
        calc_input.weight_kg,
    )
    tdee = calculate_tdee(bmr, calc_input.activity)
    calories = round_half_away_from_zero(
        max(float(CALORIE_FLOOR), tdee + calc_input.goal.kcal_adjust)
    )

    protein_grams = round_half_away_from_zero(max(0.0, PROTEIN_G_PER_KG * calc_input.weight_kg))
    fat_grams = round_half_away_from_zero(max(0.0, FAT_G_PER_KG * calc_input.weight_kg))

    protein_kcal = protein_grams * KCAL_PER_G_PROTEIN
    fat_kcal = fat_grams * KCAL_PER_G_FAT
    # Clamped so a low calorie target with high protein/fat yields zero carbs
    carbs_kcal = max(0, calories - (protein_kcal + fat_kcal))
    carb_grams = round_half_away_from_zero(carbs_kcal / float(KCAL_PER_G_CARBS))

    return MacroResult(
        calories=calories,
        protein_grams=protein_grams,
        fat_grams=fat_grams,
        carb_grams=carb_grams,
    )
