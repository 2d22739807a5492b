"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import Client, create_client

from nutrilog.adapters.supabase_admin_repository import SupabaseAdminRepository
from nutrilog.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from nutrilog.adapters.supabase_food_repository import SupabaseFoodRepository
from nutrilog.adapters.supabase_user_repository import SupabaseUserRepository
from nutrilog.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from nutrilog.config import Settings
from nutrilog.services.admin import AdminService
from nutrilog.services.food_logs import FoodLogService
from nutrilog.services.foods import FoodCatalogService
from nutrilog.services.stats import StatsService
from nutrilog.services.user_settings import UserSettingsService
from nutrilog.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    user_settings_service: UserSettingsService
    food_log_service: FoodLogService
    food_catalog_service: FoodCatalogService
    stats_service: StatsService
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, client: Client | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = client or create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(supabase_client)
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client),
        default_timezone=resolved_settings.default_timezone,
    )
    food_log_service = FoodLogService(
        repository=SupabaseFoodLogRepository(supabase_client),
        foods=food_repository,
    )
    stats_service = StatsService(
        food_log_service=food_log_service,
        user_settings_service=user_settings_service,
        thresholds=resolved_settings.progress_thresholds(),
        max_days=resolved_settings.summary_max_days,
    )

    async def close_resources() -> None:
        supabase_client.postgrest.session.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(SupabaseUserRepository(supabase_client)),
        user_settings_service=user_settings_service,
        food_log_service=food_log_service,
        food_catalog_service=FoodCatalogService(
            repository=food_repository,
            food_log_service=food_log_service,
        ),
        stats_service=stats_service,
        admin_service=AdminService(SupabaseAdminRepository(supabase_client)),
        close_resources=close_resources,
    )
