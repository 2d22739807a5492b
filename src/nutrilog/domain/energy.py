"""Energy balance domain models."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Sex used to pick the BMR equation variant."""

    MALE = "male"
    FEMALE = "female"


class BmrFormula(str, Enum):
    """Supported basal metabolic rate equations."""

    MIFFLIN = "mifflin"
    HARRIS = "harris"
    KATCH = "katch"


class ActivityLevel(str, Enum):
    """Activity level and its TDEE multiplier."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @property
    def multiplier(self) -> float:
        """TDEE multiplier applied to the BMR."""
        return _ACTIVITY_MULTIPLIERS[self]


class WeightGoal(str, Enum):
    """Weight goal and its daily calorie adjustment."""

    DEFICIT = "deficit"
    MAINTAIN = "maintain"
    SURPLUS = "surplus"

    @property
    def adjustment_kcal(self) -> int:
        """Daily kcal added to TDEE to reach the target."""
        return _GOAL_ADJUSTMENTS[self]


_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

_GOAL_ADJUSTMENTS = {
    WeightGoal.DEFICIT: -500,
    WeightGoal.MAINTAIN: 0,
    WeightGoal.SURPLUS: 500,
}


@dataclass(frozen=True)
class BodyMetrics:
    """User-entered inputs for the energy estimate."""

    sex: Sex
    age_years: float
    weight_kg: float
    height_cm: float
    formula: BmrFormula = BmrFormula.MIFFLIN
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goal: WeightGoal = WeightGoal.MAINTAIN
    body_fat_percent: float | None = None


@dataclass(frozen=True)
class EnergyEstimate:
    """Derived energy balance figures in kcal per day."""

    bmr: int
    tdee: int
    target_calories: int
    calorie_delta: int | None = None
    weekly_weight_change_lbs: float | None = None
    direction: str | None = None
