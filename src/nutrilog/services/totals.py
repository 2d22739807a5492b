"""Nutrition totals and daily aggregation.

Everything here is a pure function over in-memory values: no repository access,
no clock reads. Callers pass in the calendar day they consider "today".
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from nutrilog.domain.logs import FoodLogEntry
from nutrilog.domain.nutrition import FoodItem, MacroTotals, NutritionTotals
from nutrilog.numbers import round_kcal


@dataclass(frozen=True)
class DailyAggregation:
    """Per-day totals plus the record for the reference day."""

    days: dict[date, NutritionTotals]
    today: NutritionTotals


@dataclass(frozen=True)
class PeriodSummary:
    """Gap-filled daily totals for a window with per-day averages."""

    start: date
    end: date
    daily: list[NutritionTotals]
    avg_calories: float
    avg_protein_g: float
    avg_carbs_g: float
    avg_fat_g: float
    days_logged: int


def calculate_totals(items: Iterable[tuple[FoodItem, float]]) -> MacroTotals:
    """Sum calories and macros over (food, quantity) pairs.

    Calories are rounded to whole kcal; macros keep their fractional part so
    that percentages computed later stay accurate.
    """
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for food, quantity in items:
        calories += food.calories * quantity
        protein += food.protein_g * quantity
        carbs += food.carbs_g * quantity
        fat += food.fat_g * quantity
    return MacroTotals(
        calories=round_kcal(calories),
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
    )


def calculate_entry_totals(entries: Iterable[FoodLogEntry]) -> MacroTotals:
    """Sum calories and macros over logged entries."""
    return calculate_totals((entry.food, entry.quantity) for entry in entries)


def aggregate_daily(entries: Iterable[FoodLogEntry], today: date) -> DailyAggregation:
    """Group entries by their calendar day and total each group.

    Entries are already bucketed to a day; no timezone conversion happens here.
    Repeated entries for the same food and day each count separately.
    """
    grouped: dict[date, list[FoodLogEntry]] = defaultdict(list)
    for entry in entries:
        grouped[entry.day].append(entry)

    days = {
        day: _stamp(day, calculate_entry_totals(group))
        for day, group in grouped.items()
    }
    return DailyAggregation(
        days=days,
        today=days.get(today, NutritionTotals.empty(today)),
    )


def summarize_period(
    days: dict[date, NutritionTotals], end: date, length: int
) -> PeriodSummary:
    """Build a gap-filled series of ``length`` days ending on ``end``."""
    start = end - timedelta(days=length - 1)
    daily = []
    for offset in range(length):
        day = start + timedelta(days=offset)
        daily.append(days.get(day, NutritionTotals.empty(day)))

    total_days = max(len(daily), 1)
    return PeriodSummary(
        start=start,
        end=end,
        daily=daily,
        avg_calories=sum(day.calories for day in daily) / total_days,
        avg_protein_g=sum(day.protein_g for day in daily) / total_days,
        avg_carbs_g=sum(day.carbs_g for day in daily) / total_days,
        avg_fat_g=sum(day.fat_g for day in daily) / total_days,
        days_logged=sum(1 for day in daily if day.day in days),
    )


def _stamp(day: date, totals: MacroTotals) -> NutritionTotals:
    return NutritionTotals(
        day=day,
        calories=totals.calories,
        protein_g=totals.protein_g,
        carbs_g=totals.carbs_g,
        fat_g=totals.fat_g,
    )
