"""
PEP (Politically Exposed Person) determination.

Two steps:
- Exposure estimation from place of birth and residency jurisdictions
- Final resolution applying an operator override to the estimate
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from kyclens.fincrime.jurisdictions import DEFAULT_PEP_EXPOSURE_COUNTRIES

logger = logging.getLogger(__name__)


class PepOverride(str, Enum):
    """Operator override of the estimated PEP flag."""

    NONE = "none"
    FORCE_PEP = "force_pep"
    FORCE_NOT_PEP = "force_not_pep"


@dataclass
class PepEstimateInput:
    """Jurisdiction data for PEP exposure estimation."""

    place_of_birth: Optional[str] = None
    residency_country: Optional[str] = None


@dataclass
class PepEstimateResult:
    """Result of PEP exposure estimation."""

    score: int
    original_pep: bool
    factors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "original_pep": self.original_pep,
            "factors": list(self.factors),
        }


class PepExposureEstimator:
    """
    Estimate PEP exposure from jurisdiction data.

    Checks, each additive:
    - Place of birth in the exposure list
    - Residency in the exposure list
    - Birth and residency in different countries

    Matching is exact and case-sensitive after trimming whitespace.
    """

    BIRTH_POINTS = 15
    RESIDENCY_POINTS = 20
    CROSS_BORDER_POINTS = 5

    PEP_THRESHOLD = 25

    def __init__(self, exposure_countries: Optional[Iterable[str]] = None):
        """
        Initialize the estimator.

        Args:
            exposure_countries: Jurisdictions flagged for PEP exposure
                (default: demo list)
        """
        if exposure_countries is None:
            exposure_countries = DEFAULT_PEP_EXPOSURE_COUNTRIES
        self._exposure_countries = frozenset(
            c.strip() for c in exposure_countries if c and c.strip()
        )

    @property
    def exposure_countries(self) -> frozenset[str]:
        return self._exposure_countries

    def estimate(self, estimate_input: PepEstimateInput) -> PepEstimateResult:
        """
        Estimate the original PEP flag.

        Args:
            estimate_input: Place of birth and residency country

        Returns:
            PepEstimateResult with score, flag and factors in check order
        """
        birth = (estimate_input.place_of_birth or "").strip()
        residency = (estimate_input.residency_country or "").strip()

        score = 0
        factors = []

        if birth and birth in self._exposure_countries:
            score += self.BIRTH_POINTS
            factors.append(f"Place of birth in exposure list (+{self.BIRTH_POINTS})")

        if residency and residency in self._exposure_countries:
            score += self.RESIDENCY_POINTS
            factors.append(f"Residency in exposure list (+{self.RESIDENCY_POINTS})")

        if birth and residency and birth != residency:
            score += self.CROSS_BORDER_POINTS
            factors.append(f"Cross-border birth/residency (+{self.CROSS_BORDER_POINTS})")

        original_pep = score >= self.PEP_THRESHOLD

        logger.debug(f"PEP estimate {score} (original_pep={original_pep})")

        return PepEstimateResult(score=score, original_pep=original_pep, factors=factors)


def resolve_final_pep(original_pep: bool, override: PepOverride) -> bool:
    """
    Apply an operator override to the estimated PEP flag.

    Args:
        original_pep: Flag from exposure estimation
        override: Operator override

    Returns:
        Final PEP decision
    """
    if override == PepOverride.FORCE_PEP:
        return True
    if override == PepOverride.FORCE_NOT_PEP:
        return False
    return original_pep
