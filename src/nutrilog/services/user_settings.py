"""User settings service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from nutrilog.domain.goals import GoalSet
from nutrilog.errors import InvalidInputError


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_goals(self, user_id: UUID) -> GoalSet:
        """Return the user's goals; unset goals are ``None``."""

    def set_goals(self, user_id: UUID, goals: GoalSet) -> GoalSet:
        """Replace the user's goals and return them."""

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        """Update the user's timezone."""


@dataclass
class UserSettingsService:
    """Service for goals and timezone settings."""

    repository: UserSettingsRepository
    default_timezone: str = "UTC"

    def get_goals(self, user_id: UUID) -> GoalSet:
        """Return the user's daily goals."""
        return self.repository.get_goals(user_id)

    def set_goals(self, user_id: UUID, goals: GoalSet) -> GoalSet:
        """Persist the user's daily goals."""
        return self.repository.set_goals(user_id, goals)

    def set_calorie_goal(self, user_id: UUID, calories: float) -> GoalSet:
        """Update only the calorie goal, keeping the macro goals."""
        current = self.repository.get_goals(user_id)
        return self.repository.set_goals(
            user_id,
            GoalSet(
                calories=calories,
                protein_g=current.protein_g,
                carbs_g=current.carbs_g,
                fat_g=current.fat_g,
            ),
        )

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user timezone or the default if unset."""
        return self.repository.get_timezone(user_id) or self.default_timezone

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        """Persist a user's timezone after checking it is a known zone."""
        if not is_valid_timezone(timezone):
            raise InvalidInputError({"timezone": f"unknown timezone {timezone!r}"})
        self.repository.set_timezone(user_id, timezone)

    def today(self, user_id: UUID, now: datetime | None = None) -> date:
        """Return the current calendar day in the user's timezone."""
        tz = ZoneInfo(self.get_timezone(user_id))
        moment = now or datetime.now(tz=UTC)
        return moment.astimezone(tz).date()


def is_valid_timezone(value: str) -> bool:
    """Return True when ``value`` names an IANA timezone."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
