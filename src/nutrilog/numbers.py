"""Numeric helpers shared by the calculators."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up, the way dashboard figures are displayed."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_kcal(value: float) -> int:
    """Round a calorie figure to a whole kcal."""
    return int(round_half_up(value))
