"""Statistics over logged daily entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrition_diary.domain.models import DailyEntry
from nutrition_diary.domain.stats import HistorySummary, MacroCalories
from nutrition_diary.services.entries import EntryStore
from nutrition_diary.services.nutrition import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    round_half_up,
)


@dataclass
class StatsService:
    """Read-only aggregation of a user's history."""

    store: EntryStore

    def summarize(
        self, user_id: UUID, start: date | None = None, end: date | None = None
    ) -> HistorySummary:
        """Return averages and counts for entries within an inclusive range."""
        entries = [
            entry
            for entry in self.store.list_entries(user_id)
            if (start is None or entry.date >= start)
            and (end is None or entry.date <= end)
        ]
        profile = self.store.get_profile(user_id)
        return _summarize(entries, streak=profile.streak if profile else 0)


def _summarize(entries: list[DailyEntry], streak: int) -> HistorySummary:
    days = sorted(entries, key=lambda entry: entry.date, reverse=True)
    total_days = max(len(days), 1)
    avg_calories = round_half_up(sum(entry.calories for entry in days) / total_days)
    avg_proteins = round_half_up(sum(entry.proteins for entry in days) / total_days)
    avg_fats = round_half_up(sum(entry.fats for entry in days) / total_days)
    avg_carbs = round_half_up(sum(entry.carbs for entry in days) / total_days)
    avg_water = round_half_up(sum(entry.water for entry in days) / total_days)
    return HistorySummary(
        days=days,
        day_count=len(days),
        avg_calories=avg_calories,
        avg_proteins=avg_proteins,
        avg_fats=avg_fats,
        avg_carbs=avg_carbs,
        avg_water=avg_water,
        macro_calories=MacroCalories(
            proteins=avg_proteins * PROTEIN_KCAL_PER_G,
            fats=avg_fats * FAT_KCAL_PER_G,
            carbs=avg_carbs * CARBS_KCAL_PER_G,
        ),
        limit_exceeded_days=sum(1 for entry in days if entry.limit_exceeded),
        streak=streak,
    )
