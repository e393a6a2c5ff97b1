"""Nutrition target domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TargetInput:
    """Body metrics used to compute a daily target."""

    weight_kg: float
    height_cm: float
    age_years: float
    gender: str
    activity_factor: float


@dataclass(frozen=True)
class NutritionTarget:
    """Suggested daily calorie and macronutrient target."""

    calories: int
    proteins: int
    fats: int
    carbs: int
