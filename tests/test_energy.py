"""Tests for the energy balance estimator."""

import pytest

from nutrilog.domain.energy import (
    ActivityLevel,
    BmrFormula,
    BodyMetrics,
    Sex,
    WeightGoal,
)
from nutrilog.domain.results import Invalid, Ok
from nutrilog.errors import InvalidInputError
from nutrilog.services.energy import (
    calculate_bmr,
    estimate_energy,
    parse_body_metrics,
    weekly_weight_change_lbs,
)


def _metrics(**overrides) -> BodyMetrics:
    values = {
        "sex": Sex.MALE,
        "age_years": 30,
        "weight_kg": 70,
        "height_cm": 175,
    }
    values.update(overrides)
    return BodyMetrics(**values)


def test_mifflin_male_estimate() -> None:
    estimate = estimate_energy(_metrics(activity_level=ActivityLevel.MODERATE))

    assert estimate.bmr == 1649
    assert estimate.tdee == 2556
    assert estimate.target_calories == 2556
    assert estimate.calorie_delta is None


def test_mifflin_deficit_target() -> None:
    estimate = estimate_energy(_metrics(goal=WeightGoal.DEFICIT))

    assert estimate.target_calories == 2056


def test_mifflin_female_bmr() -> None:
    metrics = _metrics(sex=Sex.FEMALE, age_years=25, weight_kg=60, height_cm=165)

    assert estimate_energy(metrics).bmr == 1345


def test_harris_male_bmr() -> None:
    assert estimate_energy(_metrics(formula=BmrFormula.HARRIS)).bmr == 1696


def test_katch_uses_lean_mass() -> None:
    metrics = _metrics(formula=BmrFormula.KATCH, body_fat_percent=20)

    assert estimate_energy(metrics).bmr == 1580


def test_katch_without_body_fat_raises() -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        calculate_bmr(_metrics(formula=BmrFormula.KATCH))

    assert "body_fat_percent" in exc_info.value.fields


def test_estimate_with_calorie_goal_reports_deficit() -> None:
    estimate = estimate_energy(_metrics(), calorie_goal=2000)

    assert estimate.calorie_delta == -556
    assert estimate.weekly_weight_change_lbs == 1.1
    assert estimate.direction == "deficit"


def test_estimate_with_calorie_goal_reports_surplus() -> None:
    estimate = estimate_energy(_metrics(), calorie_goal=3056)

    assert estimate.calorie_delta == 500
    assert estimate.weekly_weight_change_lbs == 1.0
    assert estimate.direction == "surplus"


def test_estimate_with_matching_goal_is_balanced() -> None:
    estimate = estimate_energy(_metrics(), calorie_goal=2556)

    assert estimate.calorie_delta == 0
    assert estimate.weekly_weight_change_lbs == 0
    assert estimate.direction == "balanced"


def test_weekly_weight_change_is_absolute() -> None:
    assert weekly_weight_change_lbs(-500) == 1.0
    assert weekly_weight_change_lbs(250) == 0.5


def test_parse_body_metrics_ok() -> None:
    result = parse_body_metrics(
        {
            "sex": "female",
            "age_years": "40",
            "weight_kg": 65.5,
            "height_cm": 170,
            "activity_level": "light",
        }
    )

    assert isinstance(result, Ok)
    assert result.value.sex is Sex.FEMALE
    assert result.value.age_years == 40
    assert result.value.activity_level is ActivityLevel.LIGHT


def test_parse_body_metrics_rejects_katch_without_body_fat() -> None:
    result = parse_body_metrics(
        {
            "sex": "male",
            "age_years": 30,
            "weight_kg": 70,
            "height_cm": 175,
            "formula": "katch",
        }
    )

    assert isinstance(result, Invalid)
    assert "body_fat_percent is required" in " ".join(result.errors.values())


def test_parse_body_metrics_reports_bad_fields() -> None:
    result = parse_body_metrics(
        {"sex": "male", "age_years": "abc", "weight_kg": -1, "height_cm": 175}
    )

    assert isinstance(result, Invalid)
    assert set(result.errors) == {"age_years", "weight_kg"}


def test_harris_female_bmr() -> None:
    metrics = _metrics(
        sex=Sex.FEMALE,
        age_years=25,
        weight_kg=60,
        height_cm=165,
        formula=BmrFormula.HARRIS,
    )

    assert estimate_energy(metrics).bmr == 1405


@pytest.mark.parametrize(
    ("activity_level", "tdee"),
    [
        (ActivityLevel.SEDENTARY, 1979),
        (ActivityLevel.LIGHT, 2267),
        (ActivityLevel.MODERATE, 2556),
        (ActivityLevel.ACTIVE, 2845),
        (ActivityLevel.VERY_ACTIVE, 3133),
    ],
)
def test_activity_multipliers(activity_level: ActivityLevel, tdee: int) -> None:
    estimate = estimate_energy(_metrics(activity_level=activity_level))

    assert estimate.bmr == 1649
    assert estimate.tdee == tdee


@pytest.mark.parametrize(
    ("goal", "target"),
    [
        (WeightGoal.DEFICIT, 2056),
        (WeightGoal.MAINTAIN, 2556),
        (WeightGoal.SURPLUS, 3056),
    ],
)
def test_goal_adjustments(goal: WeightGoal, target: int) -> None:
    assert estimate_energy(_metrics(goal=goal)).target_calories == target


@pytest.mark.parametrize("calorie_goal", [0, -100])
def test_non_positive_calorie_goal_counts_as_unset(calorie_goal: float) -> None:
    estimate = estimate_energy(_metrics(), calorie_goal=calorie_goal)

    assert estimate.calorie_delta is None
    assert estimate.weekly_weight_change_lbs is None
    assert estimate.direction is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"weight_kg": 1e308},
        {"weight_kg": float("inf")},
        {"height_cm": float("nan")},
        {"age_years": 500},
    ],
)
def test_parse_body_metrics_rejects_unrealistic_values(overrides: dict) -> None:
    raw = {"sex": "male", "age_years": 30, "weight_kg": 70, "height_cm": 175}

    result = parse_body_metrics({**raw, **overrides})

    assert isinstance(result, Invalid)
    assert set(result.errors) == set(overrides)
