"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_diary.adapters.openai_analysis_client import OpenAIAnalysisClient
from nutrition_diary.adapters.supabase_entry_store import SupabaseEntryStore
from nutrition_diary.config import Settings
from nutrition_diary.services.analysis import FoodAnalysisService
from nutrition_diary.services.entries import DailyEntryService
from nutrition_diary.services.stats import StatsService
from nutrition_diary.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    entry_service: DailyEntryService
    stats_service: StatsService
    analysis_service: FoodAnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    store = SupabaseEntryStore(supabase_client)
    analysis_client = OpenAIAnalysisClient.create(resolved_settings.openai_api_key)
    analysis_service = FoodAnalysisService(
        client=analysis_client,
        model=resolved_settings.openai_model,
        max_output_tokens=resolved_settings.openai_max_output_tokens,
    )

    async def close_resources() -> None:
        await analysis_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(store),
        entry_service=DailyEntryService(store),
        stats_service=StatsService(store),
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
