"""Goal progress evaluation."""

from nutrilog.domain.goals import (
    GoalProgress,
    GoalSet,
    NutrientProgress,
    ProgressStatus,
    ProgressThresholds,
)
from nutrilog.domain.nutrition import NutritionTotals
from nutrilog.numbers import round_half_up

DEFAULT_THRESHOLDS = ProgressThresholds()

_KCAL_PER_GRAM = {"protein_g": 4, "carbs_g": 4, "fat_g": 9}


def evaluate_nutrient(
    value: float,
    goal: float | None,
    thresholds: ProgressThresholds = DEFAULT_THRESHOLDS,
) -> NutrientProgress:
    """Compare one value against its goal.

    A missing, zero, or negative goal yields ``no_goal``. Status is decided on
    the raw percentage; ``percentage`` is the clamped value for progress bars.
    """
    if goal is None or goal <= 0:
        return NutrientProgress(
            value=value,
            goal=goal,
            raw_percentage=0.0,
            percentage=0.0,
            remaining=0.0,
            status=ProgressStatus.NO_GOAL,
        )

    raw = value * 100 / goal
    if raw < thresholds.on_target_min:
        status = ProgressStatus.UNDER
    elif raw <= thresholds.on_target_max:
        status = ProgressStatus.ON_TARGET
    else:
        status = ProgressStatus.OVER

    return NutrientProgress(
        value=value,
        goal=goal,
        raw_percentage=raw,
        percentage=min(max(raw, 0.0), 100.0),
        remaining=goal - value,
        status=status,
    )


def evaluate_progress(
    totals: NutritionTotals,
    goals: GoalSet,
    thresholds: ProgressThresholds = DEFAULT_THRESHOLDS,
) -> GoalProgress:
    """Evaluate calories and every macro against the user's goals."""
    return GoalProgress(
        calories=evaluate_nutrient(totals.calories, goals.calories, thresholds),
        protein_g=evaluate_nutrient(totals.protein_g, goals.protein_g, thresholds),
        carbs_g=evaluate_nutrient(totals.carbs_g, goals.carbs_g, thresholds),
        fat_g=evaluate_nutrient(totals.fat_g, goals.fat_g, thresholds),
    )


def macro_calorie_split(totals: NutritionTotals) -> dict[str, int]:
    """Return the percent of calories contributed by each macro.

    Uses 4 kcal/g for protein and carbs and 9 kcal/g for fat. All zeros when
    nothing was eaten.
    """
    if not totals.calories:
        return {name: 0 for name in _KCAL_PER_GRAM}
    return {
        name: int(round_half_up(getattr(totals, name) * kcal * 100 / totals.calories))
        for name, kcal in _KCAL_PER_GRAM.items()
    }
