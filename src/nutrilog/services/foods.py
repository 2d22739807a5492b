"""Services for the shared food catalog."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrilog.domain.logs import FoodLogEntry
from nutrilog.domain.models import UserRecord
from nutrilog.domain.nutrition import FoodItem
from nutrilog.errors import FoodInUseError, NotFoundError, PermissionDeniedError
from nutrilog.services.food_logs import FoodLogService

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for catalog foods."""

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food and return it."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""

    def list_foods(self) -> list[FoodItem]:
        """Return every food ordered by name."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food."""


@dataclass
class FoodCatalogService:
    """Application service for catalog operations."""

    repository: FoodRepository
    food_log_service: FoodLogService

    def list_foods(self) -> list[FoodItem]:
        """Return the catalog sorted by name."""
        return self.repository.list_foods()

    def create_food(
        self,
        user_id: UUID,
        payload: dict[str, object],
        log_day: date | None = None,
    ) -> tuple[FoodItem, FoodLogEntry | None]:
        """Create a food, logging one serving for the user when a day is given."""
        food = self.repository.create_food(payload)
        _logger.info("Food created: id=%s name=%s", food.id, food.name)
        entry = None
        if log_day is not None:
            entry = self.food_log_service.log_food(user_id, food.id, log_day)
        return food, entry

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Replace the nutrient values of an existing food."""
        if self.repository.get_food(food_id) is None:
            raise NotFoundError("Food item not found")
        return self.repository.update_food(food_id, payload)

    def delete_food(self, actor: UserRecord, food_id: UUID) -> None:
        """Delete a food that no log references. Admins only."""
        if not actor.is_admin:
            raise PermissionDeniedError("Not authorized to delete food items")
        if self.repository.get_food(food_id) is None:
            raise NotFoundError("Food item not found")
        count = self.food_log_service.repository.count_for_food(food_id)
        if count > 0:
            raise FoodInUseError(
                "Cannot delete food item that is being used in logs", count=count
            )
        self.repository.delete_food(food_id)
        _logger.info("Food deleted: id=%s by=%s", food_id, actor.id)
