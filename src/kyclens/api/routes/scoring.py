"""
Stateless scoring API routes.

Exposes the scoring engine directly, without touching stored records:
- Overall risk score and level
- PEP exposure estimate
- Final PEP resolution
"""

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from kyclens.api.deps import PepEstimator, RiskScorer
from kyclens.fincrime.pep import PepEstimateInput, PepOverride, resolve_final_pep
from kyclens.fincrime.risk_scoring import FatcaStatus, SanctionsStatus, ScoringInput

router = APIRouter()


class RiskScoreRequest(BaseModel):
    """Client signals to score."""

    is_pep: bool = False
    fatca_status: FatcaStatus = FatcaStatus.NON_US_PERSON
    has_us_indicia: bool = False
    red_flag_count: int = Field(default=0, ge=0)
    sanctions_status: SanctionsStatus = SanctionsStatus.NONE
    tin_present: bool = True


class PepEstimateRequest(BaseModel):
    """Jurisdictions to estimate PEP exposure from."""

    place_of_birth: Optional[str] = None
    residency_country: Optional[str] = None


class PepResolveRequest(BaseModel):
    """Estimated PEP flag and operator override."""

    original_pep: bool
    override: PepOverride = PepOverride.NONE


@router.post("/risk")
async def score_risk(request: RiskScoreRequest, scorer: RiskScorer) -> dict[str, Any]:
    """Compute risk score, level and contributing factors."""
    result = scorer.score(ScoringInput(**request.model_dump()))
    return result.to_dict()


@router.post("/pep/estimate")
async def estimate_pep(request: PepEstimateRequest, estimator: PepEstimator) -> dict[str, Any]:
    """Estimate the original PEP flag from jurisdictions."""
    result = estimator.estimate(PepEstimateInput(
        place_of_birth=request.place_of_birth,
        residency_country=request.residency_country,
    ))
    return result.to_dict()


@router.post("/pep/resolve")
async def resolve_pep(request: PepResolveRequest) -> dict[str, bool]:
    """Apply the operator override to the estimated PEP flag."""
    return {"is_pep": resolve_final_pep(request.original_pep, request.override)}


@router.get("/pep/exposure-list")
async def exposure_list(estimator: PepEstimator) -> dict[str, Any]:
    """Jurisdictions currently flagged for PEP exposure."""
    countries = sorted(estimator.exposure_countries)
    return {"countries": countries, "count": len(countries)}
