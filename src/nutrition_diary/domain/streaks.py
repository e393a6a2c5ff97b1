"""Streak rules for consecutive days within the calorie limit.

A streak counts consecutive calendar days, ending at the most recent logged
day, on which the calorie limit was not exceeded.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from nutrition_diary.domain.models import DailyEntry, StreakState

EMPTY_STREAK = StreakState(streak=0, last_date="")


def advance_streak(
    current: StreakState, day: date, *, limit_exceeded: bool
) -> StreakState:
    """Return the streak after a new entry for ``day`` has been stored."""
    day_str = day.isoformat()
    if limit_exceeded:
        return StreakState(streak=0, last_date=day_str)

    previous = parse_day(current.last_date)
    is_consecutive = previous is not None and previous == day - timedelta(days=1)
    if is_consecutive or not current.last_date:
        return StreakState(streak=current.streak + 1, last_date=day_str)
    if current.last_date != day_str:
        return StreakState(streak=1, last_date=day_str)
    # Same day again; callers reject duplicates before reaching this.
    return StreakState(streak=current.streak, last_date=day_str)


def rebuild_streak(entries: Iterable[DailyEntry]) -> StreakState:
    """Recompute the streak from the full entry history.

    Walks entries newest to oldest. An entry with the limit exceeded ends the
    walk and is not counted; so does a gap of more than one calendar day.
    ``last_date`` is always the newest entry's date, exceeded or not.
    """
    ordered = sorted(entries, key=lambda entry: entry.date, reverse=True)
    if not ordered:
        return EMPTY_STREAK

    streak = 0
    counted: date | None = None
    for entry in ordered:
        if entry.limit_exceeded:
            break
        if counted is None:
            streak = 1
        elif entry.date == counted - timedelta(days=1):
            streak += 1
        else:
            break
        counted = entry.date

    return StreakState(streak=streak, last_date=ordered[0].date.isoformat())


def parse_day(value: str) -> date | None:
    """Parse an ISO calendar date, returning None when empty or invalid."""
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None
