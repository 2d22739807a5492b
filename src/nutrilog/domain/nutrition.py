"""Nutrition domain models."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """Catalog food with per-serving nutrient values."""

    id: UUID
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MacroTotals:
    """Summed calories and macros for a group of servings."""

    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class NutritionTotals:
    """Totals for a single calendar day."""

    day: date
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float

    @classmethod
    def empty(cls, day: date) -> "NutritionTotals":
        """Return an all-zero record stamped with the given day."""
        return cls(day=day, calories=0, protein_g=0.0, carbs_g=0.0, fat_g=0.0)
