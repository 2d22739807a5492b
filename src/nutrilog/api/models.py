"""Pydantic request models for the HTTP API."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, Field

from nutrilog.domain.models import Role

MAX_SERVINGS = 100
MAX_FOOD_CALORIES = 10_000
MAX_FOOD_GRAMS = 1_000
MAX_CALORIE_GOAL = 20_000
MAX_GRAM_GOAL = 2_000


class RegisterRequest(BaseModel):
    """New user registration payload."""

    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str | None = None


class FoodRequest(BaseModel):
    """Catalog food payload; ``date`` also logs one serving when given."""

    name: str = Field(min_length=1)
    calories: float = Field(ge=0, le=MAX_FOOD_CALORIES, allow_inf_nan=False)
    protein_g: float = Field(ge=0, le=MAX_FOOD_GRAMS, allow_inf_nan=False)
    carbs_g: float = Field(ge=0, le=MAX_FOOD_GRAMS, allow_inf_nan=False)
    fat_g: float = Field(ge=0, le=MAX_FOOD_GRAMS, allow_inf_nan=False)
    date: dt.date | None = None

    def nutrient_payload(self) -> dict[str, object]:
        return self.model_dump(exclude={"date"})


class FoodLogCreateRequest(BaseModel):
    """Food log creation payload."""

    food_id: UUID
    date: dt.date
    quantity: float = Field(
        default=1.0, gt=0, le=MAX_SERVINGS, allow_inf_nan=False
    )


class FoodLogUpdateRequest(BaseModel):
    """Food log quantity update payload."""

    quantity: float = Field(le=MAX_SERVINGS, allow_inf_nan=False)


class SettingsUpdateRequest(BaseModel):
    """Goal and timezone update; omitted fields keep their stored value."""

    calorie_goal: float | None = Field(
        default=None, ge=0, le=MAX_CALORIE_GOAL, allow_inf_nan=False
    )
    protein_goal: float | None = Field(
        default=None, ge=0, le=MAX_GRAM_GOAL, allow_inf_nan=False
    )
    carb_goal: float | None = Field(
        default=None, ge=0, le=MAX_GRAM_GOAL, allow_inf_nan=False
    )
    fat_goal: float | None = Field(
        default=None, ge=0, le=MAX_GRAM_GOAL, allow_inf_nan=False
    )
    timezone: str | None = None


class RoleUpdateRequest(BaseModel):
    """Admin role change payload."""

    role: Role
