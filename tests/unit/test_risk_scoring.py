"""
Tests for overall risk scoring.

Tests:
- Individual signal contributions
- Red flag tiering
- Level thresholds
- Worked examples
"""

import pytest

from kyclens.fincrime.risk_scoring import (
    FatcaStatus,
    RiskLevel,
    SanctionsStatus,
    ScoringInput,
    level_for_score,
)


class TestBaseline:
    """Tests for the neutral client."""

    def test_baseline_scores_zero(self, risk_scorer):
        """A client with no risk signals scores 0 and is Low."""
        result = risk_scorer.score(ScoringInput())

        assert result.score == 0
        assert result.level == RiskLevel.LOW
        assert result.factors == []

    def test_scoring_is_repeatable(self, risk_scorer):
        """Same input gives the same result."""
        scoring_input = ScoringInput(is_pep=True, red_flag_count=2, tin_present=False)

        assert risk_scorer.score(scoring_input) == risk_scorer.score(scoring_input)


class TestContributions:
    """Tests for each signal on its own."""

    @pytest.mark.parametrize(
        "scoring_input,expected",
        [
            (ScoringInput(is_pep=True), 40),
            (ScoringInput(fatca_status=FatcaStatus.RECALCITRANT), 25),
            (ScoringInput(fatca_status=FatcaStatus.US_PERSON, has_us_indicia=True), 10),
            (ScoringInput(sanctions_status=SanctionsStatus.MATCH_PENDING), 50),
            (ScoringInput(tin_present=False), 10),
        ],
    )
    def test_single_signal(self, risk_scorer, scoring_input, expected):
        """Each signal adds its fixed points."""
        assert risk_scorer.score(scoring_input).score == expected

    def test_us_person_without_indicia(self, risk_scorer):
        """US person status alone adds nothing."""
        result = risk_scorer.score(ScoringInput(fatca_status=FatcaStatus.US_PERSON))
        assert result.score == 0

    def test_indicia_without_us_person(self, risk_scorer):
        """US indicia only count for US persons."""
        result = risk_scorer.score(ScoringInput(
            fatca_status=FatcaStatus.EXEMPT,
            has_us_indicia=True,
        ))
        assert result.score == 0

    def test_cleared_sanctions_adds_nothing(self, risk_scorer):
        """Only a pending match raises the score."""
        result = risk_scorer.score(ScoringInput(sanctions_status=SanctionsStatus.CLEARED))
        assert result.score == 0

    def test_enabling_signals_never_lowers_score(self, risk_scorer):
        """Adding signals one by one only increases the score."""
        steps = [
            ScoringInput(),
            ScoringInput(is_pep=True),
            ScoringInput(is_pep=True, fatca_status=FatcaStatus.RECALCITRANT),
            ScoringInput(is_pep=True, fatca_status=FatcaStatus.RECALCITRANT, red_flag_count=1),
            ScoringInput(
                is_pep=True,
                fatca_status=FatcaStatus.RECALCITRANT,
                red_flag_count=1,
                sanctions_status=SanctionsStatus.MATCH_PENDING,
            ),
            ScoringInput(
                is_pep=True,
                fatca_status=FatcaStatus.RECALCITRANT,
                red_flag_count=1,
                sanctions_status=SanctionsStatus.MATCH_PENDING,
                tin_present=False,
            ),
        ]
        scores = [risk_scorer.score(s).score for s in steps]

        assert scores == sorted(scores)
        assert scores[-1] == 40 + 25 + 10 + 50 + 10

    def test_factor_order(self, risk_scorer):
        """Factors are listed in evaluation order."""
        result = risk_scorer.score(ScoringInput(
            is_pep=True,
            fatca_status=FatcaStatus.RECALCITRANT,
            red_flag_count=2,
            sanctions_status=SanctionsStatus.MATCH_PENDING,
            tin_present=False,
        ))

        assert [f.name for f in result.factors] == [
            "pep",
            "fatca_recalcitrant",
            "red_flags",
            "sanctions_match_pending",
            "missing_tin",
        ]
        assert sum(f.points for f in result.factors) == result.score


class TestRedFlagTiers:
    """Tests for tiered red flag scoring."""

    @pytest.mark.parametrize(
        "count,expected",
        [(0, 0), (1, 10), (2, 20), (3, 30), (4, 30), (10, 30)],
    )
    def test_tier_points(self, risk_scorer, count, expected):
        """Only the highest tier reached applies."""
        assert risk_scorer.score(ScoringInput(red_flag_count=count)).score == expected

    def test_three_flags_not_cumulative(self, risk_scorer):
        """Three flags give 30, not 30 + 20 + 10."""
        result = risk_scorer.score(ScoringInput(red_flag_count=3))

        red_flag_factors = [f for f in result.factors if f.name == "red_flags"]
        assert len(red_flag_factors) == 1
        assert red_flag_factors[0].points == 30


class TestRiskLevels:
    """Tests for score to level mapping."""

    @pytest.mark.parametrize(
        "score,level",
        [
            (0, RiskLevel.LOW),
            (24, RiskLevel.LOW),
            (25, RiskLevel.MEDIUM),
            (59, RiskLevel.MEDIUM),
            (60, RiskLevel.HIGH),
            (165, RiskLevel.HIGH),
        ],
    )
    def test_threshold_boundaries(self, score, level):
        """Thresholds are inclusive lower bounds."""
        assert level_for_score(score) == level

    def test_recalcitrant_alone_is_medium(self, risk_scorer):
        """25 points sits exactly on the Medium threshold."""
        result = risk_scorer.score(ScoringInput(fatca_status=FatcaStatus.RECALCITRANT))
        assert result.score == 25
        assert result.level == RiskLevel.MEDIUM

    def test_pep_and_two_flags_is_high(self, risk_scorer):
        """40 + 20 reaches the High threshold exactly."""
        result = risk_scorer.score(ScoringInput(is_pep=True, red_flag_count=2))
        assert result.score == 60
        assert result.level == RiskLevel.HIGH

    def test_all_signals_exceed_one_hundred(self, risk_scorer):
        """The score has no upper bound."""
        result = risk_scorer.score(ScoringInput(
            is_pep=True,
            fatca_status=FatcaStatus.RECALCITRANT,
            red_flag_count=5,
            sanctions_status=SanctionsStatus.MATCH_PENDING,
            tin_present=False,
        ))
        assert result.score == 155
        assert result.level == RiskLevel.HIGH


class TestWorkedExamples:
    """Reference cases."""

    def test_pep_recalcitrant_with_flags(self, risk_scorer):
        """PEP + recalcitrant + three flags = 95, High."""
        result = risk_scorer.score(ScoringInput(
            is_pep=True,
            fatca_status=FatcaStatus.RECALCITRANT,
            has_us_indicia=False,
            red_flag_count=3,
            sanctions_status=SanctionsStatus.NONE,
            tin_present=True,
        ))

        assert result.score == 95
        assert result.level == RiskLevel.HIGH

    def test_missing_tin_only(self, risk_scorer):
        """Cleared non-US person without TIN = 10, Low."""
        result = risk_scorer.score(ScoringInput(
            is_pep=False,
            fatca_status=FatcaStatus.NON_US_PERSON,
            has_us_indicia=False,
            red_flag_count=0,
            sanctions_status=SanctionsStatus.CLEARED,
            tin_present=False,
        ))

        assert result.score == 10
        assert result.level == RiskLevel.LOW

    def test_to_dict(self, risk_scorer):
        """Serialized result uses wire values."""
        data = risk_scorer.score(ScoringInput(tin_present=False)).to_dict()

        assert data == {
            "score": 10,
            "level": "Low",
            "factors": [
                {
                    "name": "missing_tin",
                    "description": "No tax identification number on file",
                    "points": 10,
                }
            ],
        }
