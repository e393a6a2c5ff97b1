"""Daily entry logging with one-entry-per-day and streak tracking."""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from nutrition_diary.domain.errors import DuplicateEntryError, ValidationError
from nutrition_diary.domain.models import (
    DailyEntry,
    SavedEntry,
    StreakState,
    UserProfile,
)
from nutrition_diary.domain.streaks import advance_streak, rebuild_streak

_QUANTITY_FIELDS = ("calories", "proteins", "fats", "carbs", "water")

_logger = logging.getLogger(__name__)


class EntryStore(Protocol):
    """Per-user document store for the profile and daily entries."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile document, if present."""

    def put_profile(self, user_id: UUID, fields: dict[str, object]) -> None:
        """Write the given profile fields, leaving other fields untouched."""

    def has_entry(self, user_id: UUID, day: date) -> bool:
        """Return True when an entry exists for the date."""

    def put_entry(self, user_id: UUID, entry: DailyEntry) -> None:
        """Create the entry keyed by its date."""

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return all entries ordered by date, newest first."""

    def delete_entry(self, user_id: UUID, day: date) -> None:
        """Delete the entry for the date, if present."""


@dataclass
class DailyEntryService:
    """Service that enforces one entry per day and maintains the streak."""

    store: EntryStore

    def has_entry(self, user_id: UUID, day: date) -> bool:
        """Return True when the user already logged the date."""
        return self.store.has_entry(user_id, day)

    def list_history(self, user_id: UUID) -> list[DailyEntry]:
        """Return the user's entries, newest first."""
        return self.store.list_entries(user_id)

    def save_entry(self, user_id: UUID, entry: DailyEntry) -> SavedEntry:
        """Persist a new entry and advance the streak.

        Raises DuplicateEntryError without writing anything when the date is
        already logged.
        """
        _validate_entry(entry)
        if self.store.has_entry(user_id, entry.date):
            raise DuplicateEntryError(entry.date.isoformat())

        profile = self.store.get_profile(user_id) or UserProfile(user_id=user_id)
        state = advance_streak(
            StreakState(streak=profile.streak, last_date=profile.last_date),
            entry.date,
            limit_exceeded=entry.limit_exceeded,
        )
        self.store.put_entry(user_id, entry)
        self.store.put_profile(
            user_id, {"streak": state.streak, "last_date": state.last_date}
        )
        _logger.info(
            "Saved entry: user_id=%s date=%s streak=%s",
            user_id,
            entry.date,
            state.streak,
        )
        return SavedEntry(
            entry=entry,
            profile=replace(profile, streak=state.streak, last_date=state.last_date),
        )

    def delete_entry(self, user_id: UUID, day: date) -> StreakState:
        """Delete the entry for the date and rebuild the streak."""
        self.store.delete_entry(user_id, day)
        return self.recompute_streak(user_id)

    def recompute_streak(self, user_id: UUID) -> StreakState:
        """Rebuild the streak from the stored history and persist it."""
        state = rebuild_streak(self.store.list_entries(user_id))
        self.store.put_profile(
            user_id, {"streak": state.streak, "last_date": state.last_date}
        )
        _logger.info(
            "Recomputed streak: user_id=%s streak=%s last_date=%s",
            user_id,
            state.streak,
            state.last_date or "-",
        )
        return state


def build_entry(  # noqa: PLR0913
    day: date,
    *,
    calories: int,
    proteins: int,
    fats: int,
    carbs: int,
    water: int,
    limit_exceeded: bool,
    timestamp: datetime,
) -> DailyEntry:
    """Create an entry for the day, validating its quantities."""
    entry = DailyEntry(
        date=day,
        calories=calories,
        proteins=proteins,
        fats=fats,
        carbs=carbs,
        water=water,
        limit_exceeded=limit_exceeded,
        timestamp=timestamp,
    )
    _validate_entry(entry)
    return entry


def _validate_entry(entry: DailyEntry) -> None:
    for field in _QUANTITY_FIELDS:
        value = getattr(entry, field)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{field} must be a whole number.")
        if value < 0:
            raise ValidationError(f"{field} must not be negative.")
