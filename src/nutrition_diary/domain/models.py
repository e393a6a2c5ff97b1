"""Domain models for the nutrition diary."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class UserProfile:
    """Profile document holding the user's streak state."""

    user_id: UUID
    streak: int = 0
    last_date: str = ""
    email: str | None = None
    name: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class DailyEntry:
    """A single day's logged intake, keyed by its calendar date."""

    date: date
    calories: int
    proteins: int
    fats: int
    carbs: int
    water: int
    limit_exceeded: bool
    timestamp: datetime


@dataclass(frozen=True)
class StreakState:
    """Streak fields of the profile document."""

    streak: int
    last_date: str


@dataclass(frozen=True)
class SavedEntry:
    """Result of a successful save."""

    entry: DailyEntry
    profile: UserProfile
