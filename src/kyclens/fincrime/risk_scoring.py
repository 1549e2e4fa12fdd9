"""
Overall risk scoring for KYC client records.

Combines six client signals into an additive integer score:
- PEP status (after override resolution)
- FATCA status and US indicia
- Red flag count (tiered)
- Pending sanctions match
- Missing tax identification number

The score maps to a Low/Medium/High risk level.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class RiskLevel(str, Enum):
    """Overall risk level classification."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class FatcaStatus(str, Enum):
    """FATCA classification of a client."""

    US_PERSON = "US Person"
    NON_US_PERSON = "Non-US person"
    EXEMPT = "Exempt"
    RECALCITRANT = "Recalcitrant"


class SanctionsStatus(str, Enum):
    """Outcome of sanctions screening."""

    NONE = "none"  # Not screened
    CLEARED = "cleared"
    MATCH_PENDING = "match_pending"


# Inclusive lower bounds
HIGH_RISK_THRESHOLD = 60
MEDIUM_RISK_THRESHOLD = 25


def level_for_score(score: int) -> RiskLevel:
    """Map a risk score to its risk level."""
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


@dataclass
class ScoringInput:
    """Client signals consumed by the risk scorer."""

    is_pep: bool = False
    fatca_status: FatcaStatus = FatcaStatus.NON_US_PERSON
    has_us_indicia: bool = False
    red_flag_count: int = 0
    sanctions_status: SanctionsStatus = SanctionsStatus.NONE
    tin_present: bool = True


@dataclass
class RiskFactor:
    """A single contribution to the risk score."""

    name: str
    description: str
    points: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "points": self.points,
        }


@dataclass
class RiskResult:
    """Risk score, level and the factors that produced them."""

    score: int
    level: RiskLevel
    factors: list[RiskFactor] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level.value,
            "factors": [f.to_dict() for f in self.factors],
        }


class OverallRiskScorer:
    """
    Additive risk scoring over client signals.

    Every contribution is independent except the red flag bucket,
    where only the highest tier reached applies.
    """

    PEP_POINTS = 40
    RECALCITRANT_POINTS = 25
    US_INDICIA_POINTS = 10
    SANCTIONS_PENDING_POINTS = 50
    MISSING_TIN_POINTS = 10

    # (minimum count, points), highest tier first
    RED_FLAG_TIERS = (
        (3, 30),
        (2, 20),
        (1, 10),
    )

    def score(self, scoring_input: ScoringInput) -> RiskResult:
        """
        Calculate the risk score for a client.

        Args:
            scoring_input: Client signals

        Returns:
            RiskResult with score, level and contributing factors
        """
        factors = []

        if scoring_input.is_pep:
            factors.append(RiskFactor(
                name="pep",
                description="Politically Exposed Person",
                points=self.PEP_POINTS,
            ))

        if scoring_input.fatca_status == FatcaStatus.RECALCITRANT:
            factors.append(RiskFactor(
                name="fatca_recalcitrant",
                description="Recalcitrant FATCA account holder",
                points=self.RECALCITRANT_POINTS,
            ))

        if (
            scoring_input.fatca_status == FatcaStatus.US_PERSON
            and scoring_input.has_us_indicia
        ):
            factors.append(RiskFactor(
                name="us_indicia",
                description="US person with US indicia",
                points=self.US_INDICIA_POINTS,
            ))

        red_flag_factor = self._assess_red_flags(scoring_input.red_flag_count)
        if red_flag_factor:
            factors.append(red_flag_factor)

        if scoring_input.sanctions_status == SanctionsStatus.MATCH_PENDING:
            factors.append(RiskFactor(
                name="sanctions_match_pending",
                description="Potential sanctions match pending review",
                points=self.SANCTIONS_PENDING_POINTS,
            ))

        if not scoring_input.tin_present:
            factors.append(RiskFactor(
                name="missing_tin",
                description="No tax identification number on file",
                points=self.MISSING_TIN_POINTS,
            ))

        total = sum(f.points for f in factors)
        result = RiskResult(score=total, level=level_for_score(total), factors=factors)

        logger.debug(f"Risk score {total} ({result.level.value}) from {len(factors)} factors")

        return result

    def _assess_red_flags(self, red_flag_count: int) -> Optional[RiskFactor]:
        """Pick the single red flag tier that applies."""
        for minimum, points in self.RED_FLAG_TIERS:
            if red_flag_count >= minimum:
                return RiskFactor(
                    name="red_flags",
                    description=f"{red_flag_count} red flag(s) recorded",
                    points=points,
                )
        return None
