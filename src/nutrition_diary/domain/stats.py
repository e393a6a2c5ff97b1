"""Domain models for statistics."""

from dataclasses import dataclass

from nutrition_diary.domain.models import DailyEntry


@dataclass(frozen=True)
class MacroCalories:
    """Average calories contributed by each macronutrient."""

    proteins: int
    fats: int
    carbs: int


@dataclass(frozen=True)
class HistorySummary:
    """Aggregated view over a user's daily entries."""

    days: list[DailyEntry]
    day_count: int
    avg_calories: int
    avg_proteins: int
    avg_fats: int
    avg_carbs: int
    avg_water: int
    macro_calories: MacroCalories
    limit_exceeded_days: int
    streak: int
