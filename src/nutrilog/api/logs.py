"""Food log endpoints."""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutrilog.api.deps import current_user
from nutrilog.api.models import FoodLogCreateRequest, FoodLogUpdateRequest
from nutrilog.api.serializers import (
    serialize_entry,
    serialize_progress,
    serialize_totals,
)
from nutrilog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/logs", tags=["logs"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_log(
    body: FoodLogCreateRequest,
    request: Request,
    user: UserRecord = Depends(current_user),
) -> dict[str, object]:
    """Log servings of a catalog food."""
    container: AppContainer = request.app.state.container
    entry = container.food_log_service.log_food(
        user.id, body.food_id, body.date, body.quantity
    )
    return {
        "food_log": serialize_entry(entry),
        "message": "Food log created successfully",
    }


@router.get("")
async def list_logs(
    date: dt.date, request: Request, user: UserRecord = Depends(current_user)
) -> dict[str, object]:
    """Return the caller's entries for a day with that day's totals."""
    container: AppContainer = request.app.state.container
    entries = container.food_log_service.list_for_day(user.id, date)
    totals, progress = container.stats_service.get_day(user.id, date)
    return {
        "food_logs": [serialize_entry(entry) for entry in entries],
        "totals": serialize_totals(totals),
        "progress": serialize_progress(progress),
    }


@router.patch("/{entry_id}")
async def update_log(
    entry_id: UUID,
    body: FoodLogUpdateRequest,
    request: Request,
    user: UserRecord = Depends(current_user),
) -> dict[str, object]:
    """Change the quantity of an entry."""
    container: AppContainer = request.app.state.container
    entry = container.food_log_service.update_quantity(user, entry_id, body.quantity)
    return {
        "food_log": serialize_entry(entry),
        "message": "Food log updated successfully",
    }


@router.delete("/{entry_id}")
async def delete_log(
    entry_id: UUID, request: Request, user: UserRecord = Depends(current_user)
) -> dict[str, str]:
    """Delete an entry."""
    container: AppContainer = request.app.state.container
    container.food_log_service.delete_entry(user, entry_id)
    return {"message": "Food log deleted successfully"}
