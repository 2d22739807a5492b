"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutrilog.api.deps import current_user
from nutrilog.api.models import FoodRequest
from nutrilog.api.serializers import serialize_entry, serialize_food
from nutrilog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def list_foods(
    request: Request, user: UserRecord = Depends(current_user)
) -> dict[str, object]:
    """Return the catalog ordered by name."""
    container: AppContainer = request.app.state.container
    foods = container.food_catalog_service.list_foods()
    return {"foods": [serialize_food(food) for food in foods]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(
    body: FoodRequest, request: Request, user: UserRecord = Depends(current_user)
) -> dict[str, object]:
    """Create a food, optionally logging one serving on ``date``."""
    container: AppContainer = request.app.state.container
    food, entry = container.food_catalog_service.create_food(
        user.id, body.nutrient_payload(), log_day=body.date
    )
    return {
        "food": serialize_food(food),
        "food_log": serialize_entry(entry) if entry else None,
        "message": "Food item created successfully",
    }


@router.put("/{food_id}")
async def update_food(
    food_id: UUID,
    body: FoodRequest,
    request: Request,
    user: UserRecord = Depends(current_user),
) -> dict[str, object]:
    """Replace a food's name and nutrient values."""
    container: AppContainer = request.app.state.container
    food = container.food_catalog_service.update_food(
        food_id, body.nutrient_payload()
    )
    return {"food": serialize_food(food), "message": "Food item updated successfully"}


@router.delete("/{food_id}")
async def delete_food(
    food_id: UUID, request: Request, user: UserRecord = Depends(current_user)
) -> dict[str, str]:
    """Delete an unused food. Admins only."""
    container: AppContainer = request.app.state.container
    container.food_catalog_service.delete_food(user, food_id)
    return {"message": "Food item deleted successfully"}
