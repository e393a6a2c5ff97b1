"""Daily calorie and macronutrient target calculator."""

import logging
import math
import re
from collections.abc import Mapping

from nutrition_diary.domain.errors import ValidationError
from nutrition_diary.domain.nutrition import NutritionTarget, TargetInput

PROTEIN_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
CARBS_KCAL_PER_G = 4

PROTEIN_G_PER_KG = 1.5
FAT_G_PER_KG = 1.0

DEFAULT_GENDER = "male"
DEFAULT_ACTIVITY = 1.2
GENDERS = ("male", "female")

ACTIVITY_LEVELS: dict[float, str] = {
    1.2: "Sedentary (little or no exercise)",
    1.375: "Light activity (light exercise 1-3 times a week)",
    1.55: "Moderate activity (moderate exercise 3-5 times a week)",
    1.725: "High activity (intense exercise 6-7 times a week)",
    1.9: "Very high activity (very intense exercise and physical work)",
}

ZERO_TARGET = NutritionTarget(calories=0, proteins=0, fats=0, carbs=0)

_LEADING_FLOAT = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"\s*[+-]?\d+")

_logger = logging.getLogger(__name__)


def calculate_bmr(weight: float, height: float, age: float, gender: str) -> float:
    """Return the basal metabolic rate (revised Harris-Benedict)."""
    if gender == "male":
        return 88.36 + 13.4 * weight + 4.8 * height - 5.7 * age
    return 447.6 + 9.2 * weight + 3.1 * height - 4.3 * age


def compute_target(
    weight: float, height: float, age: float, gender: str, activity: float
) -> NutritionTarget:
    """Compute the daily target from body metrics.

    Non-finite input degrades to an all-zero target instead of raising.
    """
    if not all(_is_finite(value) for value in (weight, height, age, activity)):
        _logger.warning(
            "Invalid metrics for target: weight=%s height=%s age=%s activity=%s",
            weight,
            height,
            age,
            activity,
        )
        return ZERO_TARGET

    bmr = calculate_bmr(weight, height, age, gender)
    calories = round_half_up(bmr * activity)
    proteins = round_half_up(weight * PROTEIN_G_PER_KG)
    fats = round_half_up(weight * FAT_G_PER_KG)
    carbs = round_half_up(
        (calories - (proteins * PROTEIN_KCAL_PER_G + fats * FAT_KCAL_PER_G))
        / CARBS_KCAL_PER_G
    )
    return NutritionTarget(
        calories=calories,
        proteins=proteins,
        fats=fats,
        carbs=max(0, carbs),
    )


def compute_target_for(metrics: TargetInput) -> NutritionTarget:
    """Compute the daily target for parsed metrics."""
    return compute_target(
        metrics.weight_kg,
        metrics.height_cm,
        metrics.age_years,
        metrics.gender,
        metrics.activity_factor,
    )


def parse_target_form(form: Mapping[str, object]) -> TargetInput:
    """Parse raw form values into metrics, raising ValidationError."""
    raw_weight = form.get("weight")
    raw_height = form.get("height")
    raw_age = form.get("age")
    if _is_blank(raw_weight) or _is_blank(raw_height) or _is_blank(raw_age):
        raise ValidationError("Please fill in weight, height and age.")

    gender = str(form.get("gender") or DEFAULT_GENDER).strip().lower()
    if gender not in GENDERS:
        raise ValidationError(f"Unknown gender: {gender}.")

    raw_activity = form.get("activity")
    weight = _parse_float(raw_weight, "weight")
    height = _parse_float(raw_height, "height")
    age = _parse_int(raw_age, "age")
    activity = (
        DEFAULT_ACTIVITY
        if _is_blank(raw_activity)
        else _parse_float(raw_activity, "activity")
    )
    return TargetInput(
        weight_kg=weight,
        height_cm=height,
        age_years=age,
        gender=gender,
        activity_factor=activity,
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def _is_finite(value: object) -> bool:
    return isinstance(value, int | float) and math.isfinite(value)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_float(value: object, field: str) -> float:
    """Read a number the way form inputs are read: leading digits, rest ignored."""
    if isinstance(value, bool):
        raise ValidationError(f"Please enter a valid number for {field}.")
    if isinstance(value, int | float):
        parsed = float(value)
    else:
        match = _LEADING_FLOAT.match(str(value))
        if match is None:
            raise ValidationError(f"Please enter a valid number for {field}.")
        parsed = float(match.group(0))
    if not math.isfinite(parsed):
        raise ValidationError(f"Please enter a valid number for {field}.")
    return parsed


def _parse_int(value: object, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Please enter a valid number for {field}.")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(_parse_float(value, field))
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise ValidationError(f"Please enter a valid number for {field}.")
    return int(match.group(0))
