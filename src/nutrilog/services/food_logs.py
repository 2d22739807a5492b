"""Food logging service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrilog.domain.logs import FoodLogEntry
from nutrilog.domain.models import UserRecord
from nutrilog.domain.nutrition import FoodItem
from nutrilog.errors import InvalidInputError, NotFoundError, PermissionDeniedError

MIN_UPDATED_QUANTITY = 1

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_entry(
        self, user_id: UUID, food: FoodItem, day: date, quantity: float
    ) -> FoodLogEntry:
        """Create a log entry and return it with its food resolved."""

    def get_entry(self, entry_id: UUID) -> FoodLogEntry | None:
        """Return a log entry by id, if present."""

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[FoodLogEntry]:
        """Return a user's entries with start <= day <= end."""

    def update_quantity(self, entry_id: UUID, quantity: float) -> FoodLogEntry:
        """Change the quantity of an entry and return it."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a log entry."""

    def count_for_food(self, food_id: UUID) -> int:
        """Return how many entries reference a food."""


class FoodLookup(Protocol):
    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""


@dataclass
class FoodLogService:
    """Service for creating, reading and editing food logs."""

    repository: FoodLogRepository
    foods: FoodLookup

    def log_food(
        self, user_id: UUID, food_id: UUID, day: date, quantity: float = 1.0
    ) -> FoodLogEntry:
        """Record that the user ate ``quantity`` servings of a food on ``day``."""
        if quantity <= 0:
            raise InvalidInputError({"quantity": "must be greater than 0"})
        food = self.foods.get_food(food_id)
        if food is None:
            raise NotFoundError("Food item not found")
        entry = self.repository.create_entry(user_id, food, day, quantity)
        _logger.info(
            "Food logged: user=%s food=%s day=%s quantity=%s",
            user_id,
            food_id,
            day,
            quantity,
        )
        return entry

    def list_for_day(self, user_id: UUID, day: date) -> list[FoodLogEntry]:
        """Return the user's entries for one calendar day."""
        return self.repository.list_entries(user_id, day, day)

    def list_for_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodLogEntry]:
        """Return the user's entries for an inclusive day range."""
        return self.repository.list_entries(user_id, start, end)

    def update_quantity(
        self, actor: UserRecord, entry_id: UUID, quantity: float
    ) -> FoodLogEntry:
        """Change how many servings an entry records."""
        if quantity < MIN_UPDATED_QUANTITY:
            raise InvalidInputError({"quantity": "must be at least 1"})
        self._owned_entry(actor, entry_id, action="update")
        return self.repository.update_quantity(entry_id, quantity)

    def delete_entry(self, actor: UserRecord, entry_id: UUID) -> None:
        """Remove an entry owned by the actor (or any entry, for admins)."""
        self._owned_entry(actor, entry_id, action="delete")
        self.repository.delete_entry(entry_id)
        _logger.info("Food log deleted: id=%s by=%s", entry_id, actor.id)

    def _owned_entry(
        self, actor: UserRecord, entry_id: UUID, action: str
    ) -> FoodLogEntry:
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise NotFoundError("Food log not found")
        if entry.user_id != actor.id and not actor.is_admin:
            raise PermissionDeniedError(f"Not authorized to {action} this food log")
        return entry
