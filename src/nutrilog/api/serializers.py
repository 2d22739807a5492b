"""Conversion of domain records into JSON-ready dicts."""

from dataclasses import asdict

from nutrilog.domain.energy import EnergyEstimate
from nutrilog.domain.goals import GoalProgress, GoalSet, NutrientProgress
from nutrilog.domain.logs import FoodLogEntry
from nutrilog.domain.models import UserRecord
from nutrilog.domain.nutrition import FoodItem, NutritionTotals
from nutrilog.services.stats import DashboardSummary, PeriodReport


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {
        "id": str(user.id),
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
    }


def serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "calories": food.calories,
        "protein_g": food.protein_g,
        "carbs_g": food.carbs_g,
        "fat_g": food.fat_g,
    }


def serialize_entry(entry: FoodLogEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "user_id": str(entry.user_id),
        "date": entry.day.isoformat(),
        "quantity": entry.quantity,
        "food": serialize_food(entry.food),
    }


def serialize_goals(goals: GoalSet) -> dict[str, object]:
    return {
        "calorie_goal": goals.calories,
        "protein_goal": goals.protein_g,
        "carb_goal": goals.carbs_g,
        "fat_goal": goals.fat_g,
    }


def serialize_totals(totals: NutritionTotals) -> dict[str, object]:
    """Serialize day totals, rounding macros to one decimal for display."""
    return {
        "date": totals.day.isoformat(),
        "calories": totals.calories,
        "protein_g": round(totals.protein_g, 1),
        "carbs_g": round(totals.carbs_g, 1),
        "fat_g": round(totals.fat_g, 1),
    }


def serialize_progress(progress: GoalProgress) -> dict[str, object]:
    return {
        "calories": _serialize_nutrient(progress.calories),
        "protein_g": _serialize_nutrient(progress.protein_g),
        "carbs_g": _serialize_nutrient(progress.carbs_g),
        "fat_g": _serialize_nutrient(progress.fat_g),
    }


def serialize_summary(summary: DashboardSummary) -> dict[str, object]:
    return {
        "goals": serialize_goals(summary.goals),
        "today_summary": serialize_totals(summary.today),
        "today_progress": serialize_progress(summary.progress),
        "macro_split": summary.macro_split,
        "daily_data": [serialize_totals(day) for day in summary.daily],
    }


def serialize_period(report: PeriodReport) -> dict[str, object]:
    summary = report.summary
    return {
        "goals": serialize_goals(report.goals),
        "start": summary.start.isoformat(),
        "end": summary.end.isoformat(),
        "days_logged": summary.days_logged,
        "averages": {
            "calories": round(summary.avg_calories, 1),
            "protein_g": round(summary.avg_protein_g, 1),
            "carbs_g": round(summary.avg_carbs_g, 1),
            "fat_g": round(summary.avg_fat_g, 1),
        },
        "daily": [
            {**serialize_totals(day), "status": report.statuses[day.day].value}
            for day in summary.daily
        ],
    }


def serialize_estimate(estimate: EnergyEstimate) -> dict[str, object]:
    return asdict(estimate)


def _serialize_nutrient(progress: NutrientProgress) -> dict[str, object]:
    return {
        "value": round(progress.value, 1),
        "goal": progress.goal,
        "percentage": round(progress.percentage, 1),
        "remaining": round(progress.remaining, 1),
        "status": progress.status.value,
    }
