"""Goal and progress domain models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class GoalSet:
    """Daily targets; ``None`` means the goal is not set."""

    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None


class ProgressStatus(str, Enum):
    """Where a value sits relative to its goal."""

    UNDER = "under"
    ON_TARGET = "on_target"
    OVER = "over"
    NO_GOAL = "no_goal"


@dataclass(frozen=True)
class ProgressThresholds:
    """Percent-of-goal band that counts as on target (inclusive)."""

    on_target_min: float = 80.0
    on_target_max: float = 100.0


@dataclass(frozen=True)
class NutrientProgress:
    """Progress of one nutrient toward its goal."""

    value: float
    goal: float | None
    raw_percentage: float
    percentage: float
    remaining: float
    status: ProgressStatus


@dataclass(frozen=True)
class GoalProgress:
    """Progress of every tracked nutrient."""

    calories: NutrientProgress
    protein_g: NutrientProgress
    carbs_g: NutrientProgress
    fat_g: NutrientProgress
