"""Energy calculator endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from nutrilog.api.deps import current_user
from nutrilog.api.serializers import serialize_estimate, serialize_goals
from nutrilog.domain.models import UserRecord  # noqa: TC001
from nutrilog.domain.results import Invalid
from nutrilog.services.energy import estimate_energy, parse_body_metrics

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.post("", response_model=None)
async def calculate(
    request: Request,
    body: dict[str, Any] = Body(...),
    apply: bool = Query(default=False),
    user: UserRecord = Depends(current_user),
) -> dict[str, object] | JSONResponse:
    """Estimate BMR, TDEE and target calories from body metrics.

    With ``apply=true`` the target becomes the user's calorie goal.
    """
    container: AppContainer = request.app.state.container
    parsed = parse_body_metrics(body)
    if isinstance(parsed, Invalid):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid body metrics", "errors": parsed.errors},
        )

    settings_service = container.user_settings_service
    goals = settings_service.get_goals(user.id)
    estimate = estimate_energy(parsed.value, calorie_goal=goals.calories)
    response: dict[str, object] = {"estimate": serialize_estimate(estimate)}
    if apply:
        goals = settings_service.set_calorie_goal(user.id, estimate.target_calories)
        response["goals"] = serialize_goals(goals)
    return response
