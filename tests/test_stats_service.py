"""Tests for stats service."""

from datetime import date
from uuid import uuid4

from nutrition_diary.domain.models import UserProfile
from nutrition_diary.services.stats import StatsService
from tests.conftest import InMemoryEntryStore, make_entry


def test_summarize_averages_and_counts() -> None:
    user_id = uuid4()
    store = InMemoryEntryStore()
    store.profiles[user_id] = UserProfile(
        user_id=user_id, streak=1, last_date="2024-05-03"
    )
    for entry in (
        make_entry(date(2024, 5, 1), calories=2000, proteins=100, water=1500),
        make_entry(
            date(2024, 5, 2),
            calories=2501,
            proteins=121,
            water=2000,
            limit_exceeded=True,
        ),
        make_entry(date(2024, 5, 3), calories=1800, proteins=110, water=2500),
    ):
        store.put_entry(user_id, entry)

    summary = StatsService(store).summarize(user_id)

    assert summary.day_count == 3
    assert summary.avg_calories == 2100
    assert summary.avg_proteins == 110
    assert summary.avg_water == 2000
    assert summary.macro_calories.proteins == 440
    assert summary.macro_calories.fats == 70 * 9
    assert summary.limit_exceeded_days == 1
    assert summary.streak == 1
    assert summary.days[0].date == date(2024, 5, 3)


def test_summarize_respects_date_range() -> None:
    user_id = uuid4()
    store = InMemoryEntryStore()
    store.put_entry(user_id, make_entry(date(2024, 5, 1), calories=1000))
    store.put_entry(user_id, make_entry(date(2024, 5, 2), calories=2000))
    store.put_entry(user_id, make_entry(date(2024, 5, 3), calories=3000))

    summary = StatsService(store).summarize(
        user_id, start=date(2024, 5, 2), end=date(2024, 5, 2)
    )

    assert summary.day_count == 1
    assert summary.avg_calories == 2000


def test_summarize_empty_history() -> None:
    summary = StatsService(InMemoryEntryStore()).summarize(uuid4())

    assert summary.day_count == 0
    assert summary.avg_calories == 0
    assert summary.days == []
    assert summary.streak == 0
