"""Input Validation - Turn raw form values into a CalculationInput.

Pure functions only. Invalid input raises InputValidationError with a message
that can be shown to the user as-is; the calculator never sees it.
"""

import math
from enum import Enum
from typing import Any

from pydantic import ValidationError

from .models import (
    ActivityLevel,
    CalculationInput,
    DEFAULT_ACTIVITY,
    DEFAULT_GOAL,
    DEFAULT_SEX,
    Goal,
    Sex,
)


INVALID_NUMBER_MESSAGE = "Please enter valid numbers for age, height and weight."
OUT_OF_RANGE_MESSAGE = "Check the values: age 10-80, height 120-230 cm, weight 30-200 kg."

INVALID_NUMBER = "invalid_number"
OUT_OF_RANGE = "out_of_range"
UNKNOWN_CHOICE = "unknown_choice"


class InputValidationError(ValueError):
    """Raised when raw calculator input can't be parsed or is out of range.

    Attributes:
        message: English message safe to show the user
        field: Offending field name, if known
        code: One of INVALID_NUMBER, OUT_OF_RANGE or UNKNOWN_CHOICE
    """

    def __init__(self, message: str, field: str | None = None, code: str = INVALID_NUMBER) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.code = code


def _clean_number_text(raw: str) -> str | None:
    """Strip whitespace and reject digit-group underscores ("1_80")."""
    text = raw.strip()
    if "_" in text:
        return None
    return text


def parse_int(raw: Any) -> int | None:
    """Parse a whole number from a string or int.

    Returns:
        The integer, or None if raw isn't a whole number
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = _clean_number_text(raw)
        if text is None:
            return None
        try:
            return int(text)
        except ValueError:
            return None
    return None


def parse_float(raw: Any) -> float | None:
    """Parse a finite real number from a string, int or float.

    Returns:
        The float, or None if raw isn't a finite number
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        text = _clean_number_text(raw)
        if text is None:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def parse_choice(enum_cls: type[Enum], raw: Any, default: Enum, field: str) -> Enum:
    """Parse an enum member from its value or name, case-insensitively.

    None or an empty string selects the default.

    Raises:
        InputValidationError: If raw matches no member
    """
    if raw is None:
        return default
    if isinstance(raw, enum_cls):
        return raw

    text = str(raw).strip().lower()
    if not text:
        return default

    for member in enum_cls:
        if text in (member.value, member.name.lower()):
            return member

    allowed = ", ".join(member.value for member in enum_cls)
    raise InputValidationError(
        f"Unknown {field} '{raw}'. Choose one of: {allowed}.", field=field, code=UNKNOWN_CHOICE
    )


def parse_calculation_input(
    *,
    age: Any,
    height_cm: Any,
    weight_kg: Any,
    sex: Any = None,
    activity: Any = None,
    goal: Any = None,
) -> CalculationInput:
    """Parse and validate raw calculator input.

    Args:
        age: Age in whole years (string or int)
        height_cm: Height in centimeters (string or number)
        weight_kg: Weight in kilograms (string or number)
        sex: "male" or "female" (defaults to male)
        activity: "low", "medium" or "high" (defaults to medium)
        goal: "cut", "maintain" or "bulk" (defaults to maintain)

    Returns:
        A validated CalculationInput

    Raises:
        InputValidationError: If a number can't be parsed, is out of range,
            or a choice is unknown
    """
    parsed_age = parse_int(age)
    parsed_height = parse_float(height_cm)
    parsed_weight = parse_float(weight_kg)

    if parsed_age is None or parsed_height is None or parsed_weight is None:
        raise InputValidationError(INVALID_NUMBER_MESSAGE, field=_first_missing(
            age_years=parsed_age,
            height_cm=parsed_height,
            weight_kg=parsed_weight,
        ))

    try:
        return CalculationInput(
            sex=parse_choice(Sex, sex, DEFAULT_SEX, "sex"),
            age_years=parsed_age,
            height_cm=parsed_height,
            weight_kg=parsed_weight,
            activity=parse_choice(ActivityLevel, activity, DEFAULT_ACTIVITY, "activity"),
            goal=parse_choice(Goal, goal, DEFAULT_GOAL, "goal"),
        )
    except ValidationError as e:
        errors = e.errors()
        field = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
        raise InputValidationError(OUT_OF_RANGE_MESSAGE, field=field, code=OUT_OF_RANGE) from e


def _first_missing(**values: Any) -> str | None:
    """Name of the first value that failed to parse."""
    return next((name for name, value in values.items() if value is None), None)
