"""
Pure domain services.

- one_rep_max: 1RM estimation formulas and calculator helpers
"""

from domain.services.one_rep_max import (
    FORMULA_FUNCTIONS,
    FormulaEstimate,
    OneRepMaxFormula,
    calculate_1rm_average,
    calculate_1rm_baechle,
    calculate_1rm_brzycki,
    compare_formulas,
    estimate_one_rep_max,
    recommended_weight,
)

__all__ = [
    "FORMULA_FUNCTIONS",
    "FormulaEstimate",
    "OneRepMaxFormula",
    "calculate_1rm_average",
    "calculate_1rm_baechle",
    "calculate_1rm_brzycki",
    "compare_formulas",
    "estimate_one_rep_max",
    "recommended_weight",
]
