"""Supabase-backed store for profiles and daily entries."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from nutrition_diary.domain.errors import DuplicateEntryError, StoreUnavailableError
from nutrition_diary.domain.models import DailyEntry, UserProfile
from nutrition_diary.services.entries import EntryStore

PROFILES_TABLE = "profiles"
ENTRIES_TABLE = "daily_entries"

_UNIQUE_VIOLATION = "23505"
_ENTRY_COLUMNS = (
    "date, calories, proteins, fats, carbs, water, limit_exceeded, timestamp"
)

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseEntryStore(EntryStore):
    """Supabase implementation of the entry store."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = _execute(
            self.client.table(PROFILES_TABLE)
            .select("user_id, email, name, streak, last_date, created_at")
            .eq("user_id", str(user_id))
            .limit(1),
            action="get_profile",
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def put_profile(self, user_id: UUID, fields: dict[str, object]) -> None:
        """Upsert the given profile columns."""
        _execute(
            self.client.table(PROFILES_TABLE).upsert(
                {"user_id": str(user_id), **fields}, on_conflict="user_id"
            ),
            action="put_profile",
        )

    def has_entry(self, user_id: UUID, day: date) -> bool:
        """Return True when an entry row exists for the date."""
        response = _execute(
            self.client.table(ENTRIES_TABLE)
            .select("date")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1),
            action="has_entry",
        )
        return bool(response.data)

    def put_entry(self, user_id: UUID, entry: DailyEntry) -> None:
        """Insert an entry row; the (user_id, date) pair is unique."""
        query = self.client.table(ENTRIES_TABLE).insert(
            {
                "user_id": str(user_id),
                "date": entry.date.isoformat(),
                "calories": entry.calories,
                "proteins": entry.proteins,
                "fats": entry.fats,
                "carbs": entry.carbs,
                "water": entry.water,
                "limit_exceeded": entry.limit_exceeded,
                "timestamp": entry.timestamp.isoformat(),
            }
        )
        try:
            query.execute()
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateEntryError(entry.date.isoformat()) from exc
            _logger.exception("Supabase put_entry failed")
            raise StoreUnavailableError("Could not save the daily entry.") from exc
        except httpx.HTTPError as exc:
            _logger.exception("Supabase put_entry failed")
            raise StoreUnavailableError("Could not save the daily entry.") from exc

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return entry rows ordered by date, newest first."""
        response = _execute(
            self.client.table(ENTRIES_TABLE)
            .select(_ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True),
            action="list_entries",
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete_entry(self, user_id: UUID, day: date) -> None:
        """Delete the entry row for the date; missing rows are ignored."""
        _execute(
            self.client.table(ENTRIES_TABLE)
            .delete()
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat()),
            action="delete_entry",
        )


def _execute(query: Any, *, action: str) -> Any:
    """Run a query, translating client failures into StoreUnavailableError."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        _logger.exception("Supabase %s failed", action)
        raise StoreUnavailableError(
            "The data store is unavailable. Please try again."
        ) from exc


def _parse_profile(row: dict[str, Any]) -> UserProfile:
    created_raw = row.get("created_at")
    return UserProfile(
        user_id=UUID(str(row["user_id"])),
        streak=int(row.get("streak") or 0),
        last_date=str(row.get("last_date") or ""),
        email=row.get("email"),
        name=row.get("name"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )


def _parse_entry(row: dict[str, Any]) -> DailyEntry:
    return DailyEntry(
        date=date.fromisoformat(str(row["date"])),
        calories=int(row.get("calories") or 0),
        proteins=int(row.get("proteins") or 0),
        fats=int(row.get("fats") or 0),
        carbs=int(row.get("carbs") or 0),
        water=int(row.get("water") or 0),
        limit_exceeded=bool(row.get("limit_exceeded")),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
    )
