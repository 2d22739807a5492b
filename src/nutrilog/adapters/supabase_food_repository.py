"""Supabase repository for the shared food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrilog.domain.nutrition import FoodItem
from nutrilog.services.foods import FoodRepository

FOOD_COLUMNS = "id, name, calories, protein_g, carbs_g, fat_g"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for catalog foods."""

    client: Client

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Insert a food row."""
        response = self.client.table("foods").insert(_food_payload(payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return parse_food_row(response.data[0])

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id."""
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_row(response.data[0])

    def list_foods(self) -> list[FoodItem]:
        """Return all foods by name."""
        response = (
            self.client.table("foods").select(FOOD_COLUMNS).order("name").execute()
        )
        return [parse_food_row(row) for row in response.data or []]

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food row."""
        response = (
            self.client.table("foods")
            .update(_food_payload(payload))
            .eq("id", str(food_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food item")
        return parse_food_row(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food row."""
        self.client.table("foods").delete().eq("id", str(food_id)).execute()


def parse_food_row(row: dict[str, object]) -> FoodItem:
    """Build a food item from a ``foods`` row."""
    return FoodItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories=float(row.get("calories") or 0.0),
        protein_g=float(row.get("protein_g") or 0.0),
        carbs_g=float(row.get("carbs_g") or 0.0),
        fat_g=float(row.get("fat_g") or 0.0),
    )


def _food_payload(payload: dict[str, object]) -> dict[str, object]:
    return {
        key: payload[key]
        for key in ("name", "calories", "protein_g", "carbs_g", "fat_g")
        if key in payload
    }
