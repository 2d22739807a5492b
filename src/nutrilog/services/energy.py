"""Energy balance estimation (BMR, TDEE, target calories)."""

from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, model_validator

from nutrilog.domain.energy import (
    ActivityLevel,
    BmrFormula,
    BodyMetrics,
    EnergyEstimate,
    Sex,
    WeightGoal,
)
from nutrilog.domain.results import Invalid, Ok, Result
from nutrilog.errors import InvalidInputError
from nutrilog.numbers import round_half_up, round_kcal

KCAL_PER_POUND = 3500
MAX_AGE_YEARS = 150
MAX_WEIGHT_KG = 700
MAX_HEIGHT_CM = 300


class BodyMetricsInput(BaseModel):
    """Boundary model for raw calculator input."""

    sex: Sex
    age_years: float = Field(gt=0, le=MAX_AGE_YEARS, allow_inf_nan=False)
    weight_kg: float = Field(gt=0, le=MAX_WEIGHT_KG, allow_inf_nan=False)
    height_cm: float = Field(gt=0, le=MAX_HEIGHT_CM, allow_inf_nan=False)
    formula: BmrFormula = BmrFormula.MIFFLIN
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goal: WeightGoal = WeightGoal.MAINTAIN
    body_fat_percent: float | None = Field(
        default=None, ge=0, lt=100, allow_inf_nan=False
    )

    @model_validator(mode="after")
    def _require_body_fat_for_katch(self) -> "BodyMetricsInput":
        if self.formula is BmrFormula.KATCH and self.body_fat_percent is None:
            raise ValueError("body_fat_percent is required for the katch formula")
        return self


def parse_body_metrics(raw: Mapping[str, object]) -> Result[BodyMetrics]:
    """Validate raw calculator input without raising."""
    try:
        parsed = BodyMetricsInput.model_validate(raw)
    except ValidationError as exc:
        return Invalid(errors=_field_errors(exc))
    return Ok(BodyMetrics(**parsed.model_dump()))


def calculate_bmr(metrics: BodyMetrics) -> float:
    """Return the unrounded basal metabolic rate for the chosen formula."""
    weight = metrics.weight_kg
    height = metrics.height_cm
    age = metrics.age_years
    male = metrics.sex is Sex.MALE

    if metrics.formula is BmrFormula.MIFFLIN:
        base = 10 * weight + 6.25 * height - 5 * age
        return base + 5 if male else base - 161
    if metrics.formula is BmrFormula.HARRIS:
        if male:
            return 13.397 * weight + 4.799 * height - 5.677 * age + 88.362
        return 9.247 * weight + 3.098 * height - 4.330 * age + 447.593
    if metrics.body_fat_percent is None:
        raise InvalidInputError(
            {"body_fat_percent": "required for the katch formula"}
        )
    lean_mass = (1 - metrics.body_fat_percent / 100) * weight
    return 370 + 21.6 * lean_mass


def estimate_energy(
    metrics: BodyMetrics, calorie_goal: float | None = None
) -> EnergyEstimate:
    """Compute BMR, TDEE and target calories.

    When a positive ``calorie_goal`` is given, also report how far it is from
    the target and the weekly weight change that gap implies (3500 kcal per
    pound). A zero or negative goal counts as unset.
    """
    bmr = round_kcal(calculate_bmr(metrics))
    tdee = round_kcal(bmr * metrics.activity_level.multiplier)
    target = round_kcal(tdee + metrics.goal.adjustment_kcal)

    if calorie_goal is None or calorie_goal <= 0:
        return EnergyEstimate(bmr=bmr, tdee=tdee, target_calories=target)

    delta = round_kcal(calorie_goal - target)
    return EnergyEstimate(
        bmr=bmr,
        tdee=tdee,
        target_calories=target,
        calorie_delta=delta,
        weekly_weight_change_lbs=weekly_weight_change_lbs(delta),
        direction=_direction(delta),
    )


def weekly_weight_change_lbs(calorie_delta: float) -> float:
    """Pounds gained or lost per week for a daily calorie delta."""
    return round_half_up(abs(calorie_delta * 7 / KCAL_PER_POUND), 1)


def _direction(delta: int) -> str:
    if delta > 0:
        return "surplus"
    if delta < 0:
        return "deficit"
    return "balanced"


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "__root__"
        errors[location] = error["msg"]
    return errors
