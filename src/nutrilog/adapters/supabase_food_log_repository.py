"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrilog.adapters.supabase_food_repository import FOOD_COLUMNS, parse_food_row
from nutrilog.domain.logs import FoodLogEntry
from nutrilog.domain.nutrition import FoodItem
from nutrilog.services.food_logs import FoodLogRepository

ENTRY_COLUMNS = f"id, user_id, log_date, quantity, foods({FOOD_COLUMNS})"


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food log queries."""

    client: Client

    def create_entry(
        self, user_id: UUID, food: FoodItem, day: date, quantity: float
    ) -> FoodLogEntry:
        """Insert a food log row."""
        response = (
            self.client.table("food_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "food_id": str(food.id),
                    "log_date": day.isoformat(),
                    "quantity": quantity,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        row = response.data[0]
        return FoodLogEntry(
            id=UUID(str(row["id"])),
            user_id=user_id,
            food=food,
            day=day,
            quantity=float(row.get("quantity", quantity)),
        )

    def get_entry(self, entry_id: UUID) -> FoodLogEntry | None:
        """Return a food log with its food."""
        response = (
            self.client.table("food_logs")
            .select(ENTRY_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[FoodLogEntry]:
        """Return a user's food logs within the inclusive day range."""
        response = (
            self.client.table("food_logs")
            .select(ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("log_date", start.isoformat())
            .lte("log_date", end.isoformat())
            .order("log_date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def update_quantity(self, entry_id: UUID, quantity: float) -> FoodLogEntry:
        """Update the quantity of a food log."""
        self.client.table("food_logs").update({"quantity": quantity}).eq(
            "id", str(entry_id)
        ).execute()
        entry = self.get_entry(entry_id)
        if entry is None:
            raise RuntimeError("Failed to update food log")
        return entry

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a food log row."""
        self.client.table("food_logs").delete().eq("id", str(entry_id)).execute()

    def count_for_food(self, food_id: UUID) -> int:
        """Return the number of logs referencing a food."""
        response = (
            self.client.table("food_logs")
            .select("id", count="exact")
            .eq("food_id", str(food_id))
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])


def _parse_row(row: dict[str, object]) -> FoodLogEntry:
    return FoodLogEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food=parse_food_row(row["foods"]),
        day=date.fromisoformat(str(row["log_date"])[:10]),
        quantity=float(row.get("quantity") or 1.0),
    )
