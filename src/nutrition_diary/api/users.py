"""User profile, daily entry and statistics endpoints."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutrition_diary.api.auth import require_api_token
from nutrition_diary.api.models import EntryRequest, RegisterRequest  # noqa: TC001
from nutrition_diary.services.entries import build_entry

if TYPE_CHECKING:
    from nutrition_diary.containers import AppContainer
    from nutrition_diary.domain.models import DailyEntry, UserProfile
    from nutrition_diary.domain.stats import HistorySummary

router = APIRouter(
    prefix="/users", tags=["users"], dependencies=[Depends(require_api_token)]
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, request: Request) -> dict[str, object]:
    """Register a user and create an empty profile."""
    container: AppContainer = request.app.state.container
    profile = container.user_service.register(body.email, body.name)
    return _profile_payload(profile)


@router.get("/{user_id}")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's profile with the current streak."""
    container: AppContainer = request.app.state.container
    return _profile_payload(container.user_service.get_profile(user_id))


@router.get("/{user_id}/entries")
async def list_entries(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's entries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list_history(user_id)
    return {"entries": [_entry_payload(entry) for entry in entries]}


@router.get("/{user_id}/entries/{day}")
async def entry_exists(user_id: UUID, day: date, request: Request) -> dict[str, object]:
    """Report whether the date has already been logged."""
    container: AppContainer = request.app.state.container
    return {
        "date": day.isoformat(),
        "exists": container.entry_service.has_entry(user_id, day),
    }


@router.post("/{user_id}/entries", status_code=status.HTTP_201_CREATED)
async def save_entry(
    user_id: UUID, body: EntryRequest, request: Request
) -> dict[str, object]:
    """Log the day's intake and return the updated streak."""
    container: AppContainer = request.app.state.container
    now = datetime.now(tz=UTC)
    entry = build_entry(
        body.date or now.date(),
        calories=body.calories,
        proteins=body.proteins,
        fats=body.fats,
        carbs=body.carbs,
        water=body.water,
        limit_exceeded=body.limit_exceeded,
        timestamp=now,
    )
    saved = container.entry_service.save_entry(user_id, entry)
    return {
        "entry": _entry_payload(saved.entry),
        "profile": _profile_payload(saved.profile),
    }


@router.delete("/{user_id}/entries/{day}")
async def delete_entry(user_id: UUID, day: date, request: Request) -> dict[str, object]:
    """Delete the day's entry and return the rebuilt streak."""
    container: AppContainer = request.app.state.container
    state = container.entry_service.delete_entry(user_id, day)
    return {"streak": state.streak, "last_date": state.last_date}


@router.get("/{user_id}/stats")
async def stats(
    user_id: UUID,
    request: Request,
    start: date | None = None,
    end: date | None = None,
) -> dict[str, object]:
    """Return averages and counts over the user's history."""
    container: AppContainer = request.app.state.container
    summary = container.stats_service.summarize(user_id, start=start, end=end)
    return _summary_payload(summary)


def _profile_payload(profile: UserProfile) -> dict[str, object]:
    return {
        "user_id": str(profile.user_id),
        "email": profile.email,
        "name": profile.name,
        "streak": profile.streak,
        "last_date": profile.last_date,
        "created_at": profile.created_at.isoformat() if profile.created_at else None,
    }


def _entry_payload(entry: DailyEntry) -> dict[str, object]:
    return {
        "date": entry.date.isoformat(),
        "calories": entry.calories,
        "proteins": entry.proteins,
        "fats": entry.fats,
        "carbs": entry.carbs,
        "water": entry.water,
        "limit_exceeded": entry.limit_exceeded,
        "timestamp": entry.timestamp.isoformat(),
    }


def _summary_payload(summary: HistorySummary) -> dict[str, object]:
    return {
        "day_count": summary.day_count,
        "streak": summary.streak,
        "limit_exceeded_days": summary.limit_exceeded_days,
        "averages": {
            "calories": summary.avg_calories,
            "proteins": summary.avg_proteins,
            "fats": summary.avg_fats,
            "carbs": summary.avg_carbs,
            "water": summary.avg_water,
        },
        "macro_calories": {
            "proteins": summary.macro_calories.proteins,
            "fats": summary.macro_calories.fats,
            "carbs": summary.macro_calories.carbs,
        },
        "days": [_entry_payload(entry) for entry in summary.days],
    }
