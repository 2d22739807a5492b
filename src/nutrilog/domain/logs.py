"""Domain models for food logging."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrilog.domain.nutrition import FoodItem


@dataclass(frozen=True)
class FoodLogEntry:
    """A food eaten by a user on a calendar day."""

    id: UUID
    user_id: UUID
    food: FoodItem
    day: date
    quantity: float = 1.0
