"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrilog.domain.goals import GoalSet
from nutrilog.services.user_settings import UserSettingsRepository

_GOAL_COLUMNS = {
    "calories": "calorie_goal",
    "protein_g": "protein_goal",
    "carbs_g": "carb_goal",
    "fat_g": "fat_goal",
}


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_goals(self, user_id: UUID) -> GoalSet:
        """Return the stored goals for a user."""
        response = (
            self.client.table("user_settings")
            .select(", ".join(_GOAL_COLUMNS.values()))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return GoalSet()
        row = response.data[0]
        return GoalSet(
            **{
                field: _optional_float(row.get(column))
                for field, column in _GOAL_COLUMNS.items()
            }
        )

    def set_goals(self, user_id: UUID, goals: GoalSet) -> GoalSet:
        """Replace the user's goals."""
        payload: dict[str, object] = {
            column: getattr(goals, field) for field, column in _GOAL_COLUMNS.items()
        }
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        self.client.table("user_settings").update(payload).eq(
            "user_id", str(user_id)
        ).execute()
        return goals

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the stored timezone for a user."""
        response = (
            self.client.table("user_settings")
            .select("timezone")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("timezone")

    def set_timezone(self, user_id: UUID, timezone_name: str) -> None:
        """Update the user's timezone."""
        self.client.table("user_settings").update(
            {
                "timezone": timezone_name,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).eq("user_id", str(user_id)).execute()


def _optional_float(value: object) -> float | None:
    return None if value is None else float(value)
