"""
Risk and PEP scoring engine.

Provides:
- Overall risk scoring from client signals
- PEP exposure estimation from jurisdiction data
- Final PEP resolution with operator override
- Configurable jurisdiction exposure lists
"""

from kyclens.fincrime.risk_scoring import (
    FatcaStatus,
    OverallRiskScorer,
    RiskFactor,
    RiskLevel,
    RiskResult,
    SanctionsStatus,
    ScoringInput,
    level_for_score,
)
from kyclens.fincrime.pep import (
    PepEstimateInput,
    PepEstimateResult,
    PepExposureEstimator,
    PepOverride,
    resolve_final_pep,
)
from kyclens.fincrime.jurisdictions import (
    DEFAULT_PEP_EXPOSURE_COUNTRIES,
    ExposureListError,
    exposure_countries_from_settings,
    load_exposure_countries,
)

__all__ = [
    # Risk scoring
    "FatcaStatus",
    "OverallRiskScorer",
    "RiskFactor",
    "RiskLevel",
    "RiskResult",
    "SanctionsStatus",
    "ScoringInput",
    "level_for_score",
    # PEP
    "PepEstimateInput",
    "PepEstimateResult",
    "PepExposureEstimator",
    "PepOverride",
    "resolve_final_pep",
    # Jurisdictions
    "DEFAULT_PEP_EXPOSURE_COUNTRIES",
    "ExposureListError",
    "exposure_countries_from_settings",
    "load_exposure_countries",
]
