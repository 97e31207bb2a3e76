"""
Tests for slashing and credibility updates
"""

import logging

import pytest
from pydantic import ValidationError

from lexjusticia.core.domain import ProofOutcome, ScoreDistribution, SlashResult
from lexjusticia.mechanism.credibility import update_credibility
from lexjusticia.mechanism.slashing import NO_SLASH_JUSTIFICATION, calculate_slashing_amount


@pytest.fixture
def uptime_distribution():
    return ScoreDistribution.from_scores([85, 90, 88, 92, 78, 95, 87, 91, 89, 93])


# =============================================================================
# SLASHING
# =============================================================================


class TestCalculateSlashingAmount:
    def test_overclaim_hits_cap(self, uptime_distribution):
        result = calculate_slashing_amount(95.0, 80.0, uptime_distribution)
        assert isinstance(result, SlashResult)
        assert result.slash_fraction == 0.5
        assert result.overclaimed_value == pytest.approx(95.0 - 15.104997172369876, rel=1e-9)
        assert result.claimed_virtual_value == pytest.approx(95.0)
        assert result.actual_virtual_value == pytest.approx(15.104997172369876, rel=1e-9)
        assert result.justification == "Overclaimed virtual value: 79.90, slashing 0.50"
        assert result.slashed

    def test_underclaim_not_slashed(self, uptime_distribution):
        result = calculate_slashing_amount(80.0, 95.0, uptime_distribution)
        assert result.slash_fraction == 0.0
        assert result.overclaimed_value == 0.0
        assert result.justification == NO_SLASH_JUSTIFICATION
        assert not result.slashed

    def test_honest_claim_not_slashed(self, uptime_distribution):
        result = calculate_slashing_amount(90.0, 90.0, uptime_distribution)
        assert result.slash_fraction == 0.0
        assert result.justification == NO_SLASH_JUSTIFICATION

    def test_overclaim_below_range_not_slashed(self, uptime_distribution):
        """phi_u is clamped to 0 below the range, so nothing was extracted."""
        result = calculate_slashing_amount(75.0, 60.0, uptime_distribution)
        assert result.slash_fraction == 0.0
        assert result.justification == NO_SLASH_JUSTIFICATION

    @pytest.mark.parametrize("cap", [0.0, 0.1, 0.5, 1.0])
    def test_slash_bounded_by_cap(self, uptime_distribution, cap):
        result = calculate_slashing_amount(
            95.0, 80.0, uptime_distribution, max_slash_fraction=cap
        )
        assert result.slash_fraction == cap

    @pytest.mark.parametrize("cap", [-0.1, 1.5])
    def test_invalid_cap_raises(self, uptime_distribution, cap):
        with pytest.raises(ValueError, match="max_slash_fraction"):
            calculate_slashing_amount(95.0, 80.0, uptime_distribution, max_slash_fraction=cap)

    def test_slash_logged(self, uptime_distribution, caplog):
        with caplog.at_level(logging.INFO, logger="lexjusticia.mechanism.slashing"):
            calculate_slashing_amount(95.0, 80.0, uptime_distribution)
        assert "slash:" in caplog.text

    def test_no_slash_not_logged(self, uptime_distribution, caplog):
        with caplog.at_level(logging.INFO, logger="lexjusticia.mechanism.slashing"):
            calculate_slashing_amount(80.0, 95.0, uptime_distribution)
        assert caplog.text == ""


# =============================================================================
# CREDIBILITY
# =============================================================================


class TestUpdateCredibility:
    def test_successful_proof(self):
        assert update_credibility(0.5, 1.0) == pytest.approx(0.85)

    def test_failed_proof(self):
        assert update_credibility(0.5, 0.0) == pytest.approx(0.15)

    def test_boolean_outcome(self):
        assert update_credibility(0.5, True) == pytest.approx(0.85)
        assert update_credibility(0.5, False) == pytest.approx(0.15)

    def test_proof_outcome_model(self):
        assert update_credibility(0.5, ProofOutcome(verified=True)) == pytest.approx(0.85)
        assert update_credibility(
            0.5, ProofOutcome(verified=True, confidence=0.6)
        ) == pytest.approx(0.7 * 0.6 + 0.3 * 0.5)

    def test_rejected_proof_lowers_credibility(self):
        outcome = ProofOutcome(verified=False, confidence=0.1)
        assert update_credibility(0.5, outcome) == pytest.approx(0.7 * 0.1 + 0.3 * 0.5)
        assert update_credibility(0.5, outcome) <= 0.5

    def test_rejected_proof_with_high_confidence_refused(self):
        with pytest.raises(ValidationError, match="rejected proof"):
            update_credibility(0.5, ProofOutcome(verified=False, confidence=0.95))

    def test_accepted_proof_with_low_confidence_refused(self):
        with pytest.raises(ValidationError, match="accepted proof"):
            ProofOutcome(verified=True, confidence=0.2)

    def test_custom_weight(self):
        assert update_credibility(0.2, 1.0, belief_update_weight=0.5) == pytest.approx(0.6)

    def test_weight_extremes(self):
        assert update_credibility(0.3, 1.0, belief_update_weight=0.0) == pytest.approx(0.3)
        assert update_credibility(0.3, 1.0, belief_update_weight=1.0) == pytest.approx(1.0)

    def test_stays_in_unit_interval(self):
        prior = 0.5
        for outcome in (1.0, 1.0, 0.0, 1.0, 0.0, 0.0, 0.0):
            prior = update_credibility(prior, outcome)
            assert 0.0 <= prior <= 1.0

    def test_repeated_success_approaches_one(self):
        prior = 0.0
        for _ in range(20):
            prior = update_credibility(prior, 1.0)
        assert prior == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("weight", [-0.1, 1.1])
    def test_invalid_weight_raises(self, weight):
        with pytest.raises(ValueError, match="belief_update_weight"):
            update_credibility(0.5, 1.0, belief_update_weight=weight)
