"""Goal and timezone settings endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from nutrilog.api.deps import current_user
from nutrilog.api.models import SettingsUpdateRequest
from nutrilog.api.serializers import serialize_goals
from nutrilog.domain.goals import GoalSet
from nutrilog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/settings", tags=["settings"])

_GOAL_FIELDS = {
    "calorie_goal": "calories",
    "protein_goal": "protein_g",
    "carb_goal": "carbs_g",
    "fat_goal": "fat_g",
}


@router.get("")
async def get_settings(
    request: Request, user: UserRecord = Depends(current_user)
) -> dict[str, object]:
    """Return the caller's goals and timezone."""
    container: AppContainer = request.app.state.container
    service = container.user_settings_service
    return {
        "settings": {
            **serialize_goals(service.get_goals(user.id)),
            "timezone": service.get_timezone(user.id),
        }
    }


@router.put("")
async def update_settings(
    body: SettingsUpdateRequest,
    request: Request,
    user: UserRecord = Depends(current_user),
) -> dict[str, object]:
    """Update the goals and timezone present in the body."""
    container: AppContainer = request.app.state.container
    service = container.user_settings_service
    if body.timezone is not None:
        service.set_timezone(user.id, body.timezone)

    goals = service.get_goals(user.id)
    changed = {
        _GOAL_FIELDS[name]: getattr(body, name)
        for name in body.model_fields_set & _GOAL_FIELDS.keys()
    }
    if changed:
        current = {
            field: getattr(goals, field) for field in _GOAL_FIELDS.values()
        }
        goals = service.set_goals(user.id, GoalSet(**{**current, **changed}))
    return {
        "settings": {
            **serialize_goals(goals),
            "timezone": service.get_timezone(user.id),
        },
        "message": "Settings updated successfully",
    }
