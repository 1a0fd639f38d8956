"""
One-rep-max (1RM) estimation formulas.

Pure functions estimating the heaviest single repetition a lifter could
perform from a submaximal set:

- Brzycki:  1RM = weight * 36 / (37 - reps)
- Baechle (Epley-style):  1RM = weight * (1 + reps / 30)
- Average:  arithmetic mean of every registered formula

Formulas are selected through the closed ``OneRepMaxFormula`` enumeration.
Concrete formulas are registered in ``FORMULA_FUNCTIONS``; the ``AVERAGE``
strategy always incorporates every registered formula, so a new formula only
needs an enum member and a registry entry.

Usage:
    >>> estimate_one_rep_max(100, 5, OneRepMaxFormula.BRZYCKI)
    112.5
    >>> estimate_one_rep_max(120, 1)
    120.0
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List

from domain.exceptions import ValidationError

# Brzycki divides by (37 - reps)
BRZYCKI_REP_CEILING = 37

# Percentage of 1RM that can be lifted for a given number of reps
PERCENTAGE_OF_ONE_REP_MAX: Dict[int, float] = {
    1: 100.0,
    2: 95.0,
    3: 93.0,
    4: 90.0,
    5: 87.0,
    6: 85.0,
    7: 83.0,
    8: 80.0,
    9: 77.0,
    10: 75.0,
    11: 73.0,
    12: 70.0,
    15: 65.0,
}


class OneRepMaxFormula(str, Enum):
    """Supported 1RM estimation strategies."""

    BRZYCKI = "brzycki"
    BAECHLE = "baechle"
    AVERAGE = "average"


@dataclass(frozen=True)
class FormulaEstimate:
    """A single formula's estimate with a confidence rating."""

    formula: OneRepMaxFormula
    estimate: float
    confidence: str  # "high", "medium", "low"


# =============================================================================
# Input validation
# =============================================================================


def validate_lift(weight: float, reps: int) -> None:
    """
    Check the preconditions shared by every formula.

    Raises:
        ValidationError: If weight is not a finite positive number or reps
            is not an integer >= 1.
    """
    errors: List[str] = []

    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        errors.append("Weight must be a number")
    elif not math.isfinite(weight) or weight <= 0:
        errors.append("Weight must be greater than zero")

    if isinstance(reps, bool) or not isinstance(reps, int):
        errors.append("Reps must be a whole number")
    elif reps < 1:
        errors.append("Reps must be at least 1")

    if errors:
        raise ValidationError("Invalid lift for 1RM estimation", errors)


# =============================================================================
# Formulas
# =============================================================================


def calculate_1rm_brzycki(weight: float, reps: int) -> float:
    """
    Calculate estimated 1RM using the Brzycki formula.

    Formula: 1RM = weight * 36 / (37 - reps)

    Most accurate for rep ranges 1-10. The formula divides by zero at 37
    reps, so 37 or more reps is rejected rather than extrapolated.

    Raises:
        ValidationError: For invalid input or reps >= 37.
    """
    validate_lift(weight, reps)
    if reps == 1:
        return float(weight)
    if reps >= BRZYCKI_REP_CEILING:
        raise ValidationError(
            "Brzycki formula is undefined for 37 or more reps",
            [f"Reps must be below {BRZYCKI_REP_CEILING} for the Brzycki formula"],
        )
    return weight * 36.0 / (BRZYCKI_REP_CEILING - reps)


def calculate_1rm_baechle(weight: float, reps: int) -> float:
    """
    Calculate estimated 1RM using the Baechle (Epley-style) formula.

    Formula: 1RM = weight * (1 + reps / 30)

    Raises:
        ValidationError: For invalid input.
    """
    validate_lift(weight, reps)
    if reps == 1:
        return float(weight)
    return weight * (1.0 + reps / 30.0)


FORMULA_FUNCTIONS: Dict[OneRepMaxFormula, Callable[[float, int], float]] = {
    OneRepMaxFormula.BRZYCKI: calculate_1rm_brzycki,
    OneRepMaxFormula.BAECHLE: calculate_1rm_baechle,
}


def calculate_1rm_average(weight: float, reps: int) -> float:
    """Arithmetic mean of every registered formula's estimate."""
    validate_lift(weight, reps)
    if reps == 1:
        return float(weight)
    estimates = [fn(weight, reps) for fn in FORMULA_FUNCTIONS.values()]
    return sum(estimates) / len(estimates)


def estimate_one_rep_max(
    weight: float,
    reps: int,
    formula: OneRepMaxFormula = OneRepMaxFormula.AVERAGE,
) -> float:
    """
    Estimate the one-rep max of a set.

    A single rep is a direct attempt and returns the weight unchanged for
    every formula.

    Args:
        weight: Weight lifted (> 0, unit-agnostic)
        reps: Repetitions performed (integer >= 1)
        formula: Estimation strategy (defaults to the average of all formulas)

    Returns:
        Estimated 1RM in the same unit as ``weight``

    Raises:
        ValidationError: If the input violates a precondition or the formula
            is undefined for the rep count.
    """
    try:
        formula = OneRepMaxFormula(formula)
    except ValueError:
        raise ValidationError(f"Unknown 1RM formula: {formula}")
    if formula is OneRepMaxFormula.AVERAGE:
        return calculate_1rm_average(weight, reps)
    return FORMULA_FUNCTIONS[formula](weight, reps)


# =============================================================================
# Calculator helpers
# =============================================================================


def _confidence(reps: int) -> str:
    if reps <= 10:
        return "high"
    if reps <= 15:
        return "medium"
    return "low"


def compare_formulas(weight: float, reps: int) -> List[FormulaEstimate]:
    """
    Estimate a set with every registered formula.

    Returns:
        One FormulaEstimate per registered formula, highest estimate first.
    """
    comparisons = [
        FormulaEstimate(
            formula=formula,
            estimate=fn(weight, reps),
            confidence=_confidence(reps),
        )
        for formula, fn in FORMULA_FUNCTIONS.items()
    ]
    comparisons.sort(key=lambda c: c.estimate, reverse=True)
    return comparisons


def percentage_for_reps(target_reps: int) -> float:
    """
    Percentage of 1RM liftable for ``target_reps`` repetitions.

    Values between table entries are linearly interpolated; anything above
    the table is held at the last entry.
    """
    if target_reps in PERCENTAGE_OF_ONE_REP_MAX:
        return PERCENTAGE_OF_ONE_REP_MAX[target_reps]

    known = sorted(PERCENTAGE_OF_ONE_REP_MAX)
    if target_reps > known[-1]:
        return PERCENTAGE_OF_ONE_REP_MAX[known[-1]]

    for lower, upper in zip(known, known[1:]):
        if lower < target_reps < upper:
            low_pct = PERCENTAGE_OF_ONE_REP_MAX[lower]
            high_pct = PERCENTAGE_OF_ONE_REP_MAX[upper]
            fraction = (target_reps - lower) / (upper - lower)
            return low_pct + (high_pct - low_pct) * fraction

    return PERCENTAGE_OF_ONE_REP_MAX[known[-1]]


def recommended_weight(target_reps: int, one_rep_max: float) -> float:
    """
    Working weight for a target rep count given a known 1RM.

    Raises:
        ValidationError: If target_reps or one_rep_max is not positive.
    """
    validate_lift(one_rep_max, target_reps)
    if target_reps == 1:
        return float(one_rep_max)
    return one_rep_max * percentage_for_reps(target_reps) / 100.0
