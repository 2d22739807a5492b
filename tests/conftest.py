"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from nutrilog.api.app import create_app
from nutrilog.config import Settings
from nutrilog.containers import AppContainer
from nutrilog.domain.goals import GoalSet
from nutrilog.domain.logs import FoodLogEntry
from nutrilog.domain.models import Role, UserRecord
from nutrilog.domain.nutrition import FoodItem
from nutrilog.services.admin import AdminRepository, AdminService
from nutrilog.services.food_logs import FoodLogRepository, FoodLogService
from nutrilog.services.foods import FoodCatalogService, FoodRepository
from nutrilog.services.stats import StatsService
from nutrilog.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)
from nutrilog.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def create_user(self, email: str, name: str | None) -> UserRecord:
        user = UserRecord(id=uuid4(), email=email, name=name)
        self.users[user.id] = user
        return user

    def add(self, email: str, role: Role = Role.USER) -> UserRecord:
        user = UserRecord(id=uuid4(), email=email, name=None, role=role)
        self.users[user.id] = user
        return user


@dataclass
class InMemoryAdminRepository(AdminRepository):
    """In-memory admin repository sharing the user store."""

    user_repository: InMemoryUserRepository

    def list_users(self) -> list[UserRecord]:
        return sorted(self.user_repository.users.values(), key=lambda u: u.email)

    def set_role(self, user_id: UUID, role: Role) -> UserRecord | None:
        user = self.user_repository.users.get(user_id)
        if user is None:
            return None
        updated = replace(user, role=role)
        self.user_repository.users[user_id] = updated
        return updated

    def delete_user(self, user_id: UUID) -> bool:
        return self.user_repository.users.pop(user_id, None) is not None


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    foods: dict[UUID, FoodItem] = field(default_factory=dict)

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        food = FoodItem(
            id=uuid4(),
            name=str(payload["name"]),
            calories=float(payload.get("calories", 0.0)),
            protein_g=float(payload.get("protein_g", 0.0)),
            carbs_g=float(payload.get("carbs_g", 0.0)),
            fat_g=float(payload.get("fat_g", 0.0)),
        )
        self.foods[food.id] = food
        return food

    def get_food(self, food_id: UUID) -> FoodItem | None:
        return self.foods.get(food_id)

    def list_foods(self) -> list[FoodItem]:
        return sorted(self.foods.values(), key=lambda food: food.name)

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        current = self.foods[food_id]
        updated = replace(
            current,
            name=str(payload.get("name", current.name)),
            calories=float(payload.get("calories", current.calories)),
            protein_g=float(payload.get("protein_g", current.protein_g)),
            carbs_g=float(payload.get("carbs_g", current.carbs_g)),
            fat_g=float(payload.get("fat_g", current.fat_g)),
        )
        self.foods[food_id] = updated
        return updated

    def delete_food(self, food_id: UUID) -> None:
        self.foods.pop(food_id, None)


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: dict[UUID, FoodLogEntry] = field(default_factory=dict)

    def create_entry(
        self, user_id: UUID, food: FoodItem, day: date, quantity: float
    ) -> FoodLogEntry:
        entry = FoodLogEntry(
            id=uuid4(), user_id=user_id, food=food, day=day, quantity=quantity
        )
        self.entries[entry.id] = entry
        return entry

    def get_entry(self, entry_id: UUID) -> FoodLogEntry | None:
        return self.entries.get(entry_id)

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[FoodLogEntry]:
        return [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and start <= entry.day <= end
        ]

    def update_quantity(self, entry_id: UUID, quantity: float) -> FoodLogEntry:
        updated = replace(self.entries[entry_id], quantity=quantity)
        self.entries[entry_id] = updated
        return updated

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)

    def count_for_food(self, food_id: UUID) -> int:
        return sum(1 for entry in self.entries.values() if entry.food.id == food_id)


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    goals: dict[UUID, GoalSet] = field(default_factory=dict)
    timezones: dict[UUID, str] = field(default_factory=dict)

    def get_goals(self, user_id: UUID) -> GoalSet:
        return self.goals.get(user_id, GoalSet())

    def set_goals(self, user_id: UUID, goals: GoalSet) -> GoalSet:
        self.goals[user_id] = goals
        return goals

    def get_timezone(self, user_id: UUID) -> str | None:
        return self.timezones.get(user_id)

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        self.timezones[user_id] = timezone


def make_food(
    name: str = "Oatmeal",
    calories: float = 150,
    protein_g: float = 5,
    carbs_g: float = 27,
    fat_g: float = 3,
) -> FoodItem:
    return FoodItem(
        id=uuid4(),
        name=name,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
    )


def make_entry(
    food: FoodItem, day: date, quantity: float = 1.0, user_id: UUID | None = None
) -> FoodLogEntry:
    return FoodLogEntry(
        id=uuid4(),
        user_id=user_id or uuid4(),
        food=food,
        day=day,
        quantity=quantity,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings, user_repository: InMemoryUserRepository
) -> AppContainer:
    food_repository = InMemoryFoodRepository()
    user_settings_service = UserSettingsService(
        InMemoryUserSettingsRepository(),
        default_timezone=settings.default_timezone,
    )
    food_log_service = FoodLogService(
        repository=InMemoryFoodLogRepository(),
        foods=food_repository,
    )
    stats_service = StatsService(
        food_log_service=food_log_service,
        user_settings_service=user_settings_service,
        thresholds=settings.progress_thresholds(),
        max_days=settings.summary_max_days,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        user_settings_service=user_settings_service,
        food_log_service=food_log_service,
        food_catalog_service=FoodCatalogService(
            repository=food_repository,
            food_log_service=food_log_service,
        ),
        stats_service=stats_service,
        admin_service=AdminService(InMemoryAdminRepository(user_repository)),
        close_resources=close_resources,
    )


@pytest.fixture
def user(user_repository: InMemoryUserRepository) -> UserRecord:
    return user_repository.add("user@example.com")


@pytest.fixture
def admin(user_repository: InMemoryUserRepository) -> UserRecord:
    return user_repository.add("admin@example.com", role=Role.ADMIN)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
