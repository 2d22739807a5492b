"""Dashboard statistics built from food logs and goals."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from nutrilog.domain.goals import (
    GoalProgress,
    GoalSet,
    ProgressStatus,
    ProgressThresholds,
)
from nutrilog.domain.nutrition import NutritionTotals
from nutrilog.errors import InvalidInputError
from nutrilog.services.food_logs import FoodLogService
from nutrilog.services.progress import (
    DEFAULT_THRESHOLDS,
    evaluate_nutrient,
    evaluate_progress,
    macro_calorie_split,
)
from nutrilog.services.totals import PeriodSummary, aggregate_daily, summarize_period
from nutrilog.services.user_settings import UserSettingsService

PERIOD_LENGTHS = (7, 14, 30, 90)


@dataclass(frozen=True)
class DashboardSummary:
    """Goals, today's totals with progress, and the recent daily series."""

    goals: GoalSet
    today: NutritionTotals
    progress: GoalProgress
    macro_split: dict[str, int]
    daily: list[NutritionTotals]


@dataclass(frozen=True)
class PeriodReport:
    """A gap-filled period with each day's calorie status."""

    goals: GoalSet
    summary: PeriodSummary
    statuses: dict[date, ProgressStatus]


@dataclass
class StatsService:
    """Service for computing a user's dashboard figures."""

    food_log_service: FoodLogService
    user_settings_service: UserSettingsService
    thresholds: ProgressThresholds = DEFAULT_THRESHOLDS
    max_days: int = 366

    def get_summary(self, user_id: UUID, days: int, today: date) -> DashboardSummary:
        """Return today's progress and totals for the last ``days`` days."""
        if days < 0 or days > self.max_days:
            raise InvalidInputError({"days": f"must be between 0 and {self.max_days}"})
        entries = self.food_log_service.list_for_range(
            user_id, today - timedelta(days=days), today
        )
        aggregation = aggregate_daily(entries, today)
        goals = self.user_settings_service.get_goals(user_id)
        return DashboardSummary(
            goals=goals,
            today=aggregation.today,
            progress=evaluate_progress(aggregation.today, goals, self.thresholds),
            macro_split=macro_calorie_split(aggregation.today),
            daily=sorted(aggregation.days.values(), key=lambda totals: totals.day),
        )

    def get_day(self, user_id: UUID, day: date) -> tuple[NutritionTotals, GoalProgress]:
        """Return totals and progress for a single day."""
        entries = self.food_log_service.list_for_day(user_id, day)
        totals = aggregate_daily(entries, day).today
        goals = self.user_settings_service.get_goals(user_id)
        return totals, evaluate_progress(totals, goals, self.thresholds)

    def get_period(self, user_id: UUID, days: int, today: date) -> PeriodReport:
        """Return a gap-filled series of ``days`` days ending today."""
        if days not in PERIOD_LENGTHS:
            raise InvalidInputError(
                {"days": f"must be one of {', '.join(map(str, PERIOD_LENGTHS))}"}
            )
        entries = self.food_log_service.list_for_range(
            user_id, today - timedelta(days=days - 1), today
        )
        aggregation = aggregate_daily(entries, today)
        summary = summarize_period(aggregation.days, today, days)
        goals = self.user_settings_service.get_goals(user_id)
        statuses = {
            day.day: evaluate_nutrient(
                day.calories, goals.calories, self.thresholds
            ).status
            for day in summary.daily
        }
        return PeriodReport(goals=goals, summary=summary, statuses=statuses)
