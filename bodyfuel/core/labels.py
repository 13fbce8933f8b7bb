"""Labels - Static display strings and plain-text result rendering.

All functions are pure: same input always produces same output, no side effects.
"""

from enum import Enum

from .models import (
    AGE_MAX,
    AGE_MIN,
    ActivityLevel,
    DEFAULT_ACTIVITY,
    DEFAULT_GOAL,
    DEFAULT_SEX,
    Goal,
    HEIGHT_MAX_CM,
    HEIGHT_MIN_CM,
    MacroResult,
    Sex,
    WEIGHT_MAX_KG,
    WEIGHT_MIN_KG,
)


LABELS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Bodybuilding calorie & macro calculator",
        "sex": "Sex",
        "age": "Age (years)",
        "height": "Height (cm)",
        "weight": "Weight (kg)",
        "activity": "Activity level",
        "goal": "Goal",
        "submit": "Calculate",
        "result_title": "Daily targets",
        "calories": "Calories",
        "protein": "Protein",
        "fat": "Fat",
        "carbs": "Carbs",
        "note": "Protein = 2 g/kg, fat = 1 g/kg, carbs fill the remaining calories.",
        "invalid_number": "Please enter valid numbers for age, height and weight.",
        "out_of_range": "Check the values: age 10-80, height 120-230 cm, weight 30-200 kg.",
        "sex.male": "Male",
        "sex.female": "Female",
        "activity.low": "Low",
        "activity.medium": "Medium",
        "activity.high": "High",
        "goal.cut": "Cut",
        "goal.maintain": "Maintain",
        "goal.bulk": "Bulk",
    },
    "ar": {
        "title": "حاسبة السعرات والماكروز لكمال الأجسام",
        "sex": "الجنس",
        "age": "العمر (سنة)",
        "height": "الطول (سم)",
        "weight": "الوزن (كغ)",
        "activity": "مستوى النشاط",
        "goal": "الهدف",
        "submit": "احسب الآن",
        "result_title": "النتيجة اليومية",
        "calories": "السعرات",
        "protein": "البروتين",
        "fat": "الدهون",
        "carbs": "الكارب",
        "note": "ملاحظة: البروتين = 2غ/كغ، الدهون = 1غ/كغ، والكارب يُحسب من السعرات المتبقية.",
        "invalid_number": "رجاءً أدخل أرقام صحيحة في العمر/الطول/الوزن.",
        "out_of_range": "تأكد من القيم: عمر 10-80، طول 120-230 سم، وزن 30-200 كغ.",
        "sex.male": "ذكر",
        "sex.female": "أنثى",
        "activity.low": "قليل",
        "activity.medium": "متوسط",
        "activity.high": "عالي",
        "goal.cut": "تنشيف",
        "goal.maintain": "ثبات",
        "goal.bulk": "تضخيم",
    },
}

_OPTION_PREFIXES = {
    Sex: "sex",
    ActivityLevel: "activity",
    Goal: "goal",
}


def option_label(member: Enum, lang: str = "en") -> str:
    """Get the display label for an enum option.

    Raises:
        KeyError: If the language is unknown
    """
    prefix = _OPTION_PREFIXES[type(member)]
    return LABELS[lang][f"{prefix}.{member.value}"]


def describe_options(lang: str = "en") -> dict:
    """Describe every form field: choices, labels, defaults and numeric ranges.

    Args:
        lang: Label language ("en" or "ar")

    Returns:
        Dictionary a form can be built from

    Raises:
        KeyError: If the language is unknown
    """
    labels = LABELS[lang]

    return {
        "lang": lang,
        "title": labels["title"],
        "sex": {
            "label": labels["sex"],
            "default": DEFAULT_SEX.value,
            "choices": [
                {"value": s.value, "label": option_label(s, lang)}
                for s in Sex
            ],
        },
        "activity": {
            "label": labels["activity"],
            "default": DEFAULT_ACTIVITY.value,
            "choices": [
                {"value": a.value, "label": option_label(a, lang), "factor": a.factor}
                for a in ActivityLevel
            ],
        },
        "goal": {
            "label": labels["goal"],
            "default": DEFAULT_GOAL.value,
            "choices": [
                {"value": g.value, "label": option_label(g, lang), "kcal_adjust": g.kcal_adjust}
                for g in Goal
            ],
        },
        "age": {"label": labels["age"], "min": AGE_MIN, "max": AGE_MAX},
        "height_cm": {"label": labels["height"], "min": HEIGHT_MIN_CM, "max": HEIGHT_MAX_CM},
        "weight_kg": {"label": labels["weight"], "min": WEIGHT_MIN_KG, "max": WEIGHT_MAX_KG},
    }


def format_result(result: MacroResult, lang: str = "en") -> str:
    """Render a result as a short text card.

    Args:
        result: Calculated targets
        lang: Label language ("en" or "ar")

    Returns:
        Multi-line string with one row per target plus the method note
    """
    labels = LABELS[lang]

    return f"""{labels["result_title"]}
{labels["calories"]}: {result.calories} kcal
{labels["protein"]}: {result.protein_grams} g
{labels["fat"]}: {result.fat_grams} g
{labels["carbs"]}: {result.carb_grams} g
{labels["note"]}"""


def error_message(code: str, default: str, lang: str = "en") -> str:
    """Get the user-facing text for a validation error code.

    Codes without a label (unknown choices) fall back to default.

    Raises:
        KeyError: If the language is unknown
    """
    return LABELS[lang].get(code, default)


def is_supported_language(lang: object) -> bool:
    """Check that lang is a string naming a label table."""
    return isinstance(lang, str) and lang in LABELS
