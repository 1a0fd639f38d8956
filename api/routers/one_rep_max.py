"""
One-rep-max calculator router.

Stateless endpoints over the estimation formulas; no max logs are read or
written, but callers must still be authenticated.
"""
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.deps import get_current_profile
from api.errors import validation_http_error
from domain.exceptions import ValidationError
from domain.services.one_rep_max import (
    OneRepMaxFormula,
    compare_formulas,
    estimate_one_rep_max,
    percentage_for_reps,
    recommended_weight,
)

router = APIRouter(
    prefix="/one-rep-max",
    tags=["One Rep Max"],
)


class EstimateResponse(BaseModel):
    weight: float
    reps: int
    formula: OneRepMaxFormula
    estimated_1rm: float
    is_direct_attempt: bool


class FormulaEstimateItem(BaseModel):
    formula: OneRepMaxFormula
    estimate: float
    confidence: str


class CompareFormulasResponse(BaseModel):
    weight: float
    reps: int
    estimates: List[FormulaEstimateItem]


class RecommendedWeightResponse(BaseModel):
    one_rep_max: float
    target_reps: int
    percentage: float
    weight: float


@router.get("/estimate", response_model=EstimateResponse)
def estimate(
    weight: float = Query(..., description="Weight lifted"),
    reps: int = Query(..., description="Repetitions performed"),
    formula: OneRepMaxFormula = Query(OneRepMaxFormula.AVERAGE, description="Estimation formula"),
    profile_id: str = Depends(get_current_profile),
) -> EstimateResponse:
    """Estimate a one-rep max from a single set."""
    try:
        value = estimate_one_rep_max(weight, reps, formula)
    except ValidationError as e:
        raise validation_http_error(e)
    return EstimateResponse(
        weight=weight,
        reps=reps,
        formula=formula,
        estimated_1rm=value,
        is_direct_attempt=reps == 1,
    )


@router.get("/compare", response_model=CompareFormulasResponse)
def compare(
    weight: float = Query(..., description="Weight lifted"),
    reps: int = Query(..., description="Repetitions performed"),
    profile_id: str = Depends(get_current_profile),
) -> CompareFormulasResponse:
    """Every formula's estimate, highest first, with a confidence rating."""
    try:
        estimates = compare_formulas(weight, reps)
    except ValidationError as e:
        raise validation_http_error(e)
    return CompareFormulasResponse(
        weight=weight,
        reps=reps,
        estimates=[
            FormulaEstimateItem(
                formula=item.formula, estimate=item.estimate, confidence=item.confidence
            )
            for item in estimates
        ],
    )


@router.get("/recommended-weight", response_model=RecommendedWeightResponse)
def get_recommended_weight(
    one_rep_max: float = Query(..., description="Known or estimated 1RM"),
    target_reps: int = Query(..., description="Reps to be performed"),
    profile_id: str = Depends(get_current_profile),
) -> RecommendedWeightResponse:
    """Working weight for a target rep count."""
    try:
        weight = recommended_weight(target_reps, one_rep_max)
    except ValidationError as e:
        raise validation_http_error(e)
    return RecommendedWeightResponse(
        one_rep_max=one_rep_max,
        target_reps=target_reps,
        percentage=percentage_for_reps(target_reps),
        weight=weight,
    )
