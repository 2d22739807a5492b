"""Dashboard summary endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from nutrilog.api.deps import current_user
from nutrilog.api.serializers import serialize_period, serialize_summary
from nutrilog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/summary", tags=["summary"])


@router.get("")
async def get_summary(
    request: Request,
    days: int | None = Query(default=None),
    user: UserRecord = Depends(current_user),
) -> dict[str, object]:
    """Return goals, today's progress and the last ``days`` of daily totals."""
    container: AppContainer = request.app.state.container
    today = container.user_settings_service.today(user.id)
    summary = container.stats_service.get_summary(
        user.id,
        days if days is not None else container.settings.summary_default_days,
        today,
    )
    return serialize_summary(summary)


@router.get("/period")
async def get_period(
    request: Request,
    days: int = Query(default=7),
    user: UserRecord = Depends(current_user),
) -> dict[str, object]:
    """Return a gap-filled 7/14/30/90 day series with averages."""
    container: AppContainer = request.app.state.container
    today = container.user_settings_service.today(user.id)
    report = container.stats_service.get_period(user.id, days, today)
    return serialize_period(report)
