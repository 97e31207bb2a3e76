"""
MyersonianMechanism — Configured Facade over the Mechanism Functions

Stateless: every method is a pure function of its arguments and the frozen
config, so one instance can serve concurrent keeper invocations for
different providers.

Typical keeper cycle:
    1. build_distribution(history)        once per scoring epoch
    2. tier_boundaries(distribution)      once per distribution
    3. assess_provider(score, ...)        per provider
    4. slash(...) / update_credibility(...) per verified proof
"""

from typing import Iterable, Optional, Union

from lexjusticia.config import MechanismConfig
from lexjusticia.core.domain.assessment import ProviderAssessment
from lexjusticia.core.domain.boundaries import TierBoundaries
from lexjusticia.core.domain.distribution import ScoreDistribution
from lexjusticia.core.domain.market import CrisisState, MarketSnapshot
from lexjusticia.core.domain.pricing import CappedCrisisSpread
from lexjusticia.core.domain.tier import ProviderTier, TierAllocation
from lexjusticia.core.domain.verification import ProofOutcome, SlashResult
from lexjusticia.mechanism.allocation import allocate_optimal_tier
from lexjusticia.mechanism.credibility import update_credibility
from lexjusticia.mechanism.crisis_detection import detect_crisis
from lexjusticia.mechanism.crisis_spread import (
    calculate_optimal_crisis_spread,
    constrain_crisis_spread,
)
from lexjusticia.mechanism.rewards import calculate_ic_reward, calculate_marginal_ic_reward
from lexjusticia.mechanism.slashing import calculate_slashing_amount
from lexjusticia.mechanism.thresholds import compute_optimal_tier_boundaries


class MyersonianMechanism:
    """Scoring, tiering, pricing and slashing with one parameter set."""

    def __init__(self, config: Optional[MechanismConfig] = None):
        """
        Args:
            config: mechanism parameters (default: protocol defaults)
        """
        self.config = config or MechanismConfig()

    @staticmethod
    def build_distribution(scores: Iterable[float]) -> ScoreDistribution:
        return ScoreDistribution.from_scores(scores)

    def tier_boundaries(self, distribution: ScoreDistribution) -> TierBoundaries:
        cfg = self.config
        return compute_optimal_tier_boundaries(
            distribution,
            adverse_selection_param=cfg.adverse_selection_param,
            crisis_cost_param=cfg.crisis_cost_param,
            tolerance=cfg.root_tolerance,
            max_iterations=cfg.root_max_iterations,
        )

    def allocate(self, score: float, boundaries: TierBoundaries) -> TierAllocation:
        return allocate_optimal_tier(score, boundaries)

    def assess_provider(
        self,
        score: float,
        distribution: ScoreDistribution,
        boundaries: Optional[TierBoundaries] = None,
    ) -> ProviderAssessment:
        """
        Allocation plus cumulative and marginal IC reward for one score.

        Args:
            score: Provider score
            distribution: Historical distribution of the scoring epoch
            boundaries: Precomputed boundaries for ``distribution``; computed
                when omitted

        Returns:
            ProviderAssessment
        """
        cfg = self.config
        if boundaries is None:
            boundaries = self.tier_boundaries(distribution)

        return ProviderAssessment(
            score=score,
            allocation=allocate_optimal_tier(score, boundaries),
            cumulative_reward=calculate_ic_reward(
                score,
                distribution,
                number_of_segments=cfg.reward_segments,
                adverse_selection_param=cfg.adverse_selection_param,
            ),
            marginal_reward=calculate_marginal_ic_reward(
                score, distribution, adverse_selection_param=cfg.adverse_selection_param
            ),
            within_observed_range=distribution.contains(score),
            boundaries=boundaries,
        )

    def crisis_spread(
        self,
        tier: ProviderTier,
        base_price: float,
        current_volatility: float,
        normal_volatility: float,
        information_advantage: float,
        risk_aversion: float,
    ) -> CappedCrisisSpread:
        """Crisis spread capped for ``tier``, with its uncapped breakdown."""
        cfg = self.config
        breakdown = calculate_optimal_crisis_spread(
            base_price,
            current_volatility,
            normal_volatility,
            information_advantage,
            risk_aversion,
            adverse_selection_param=cfg.spread_adverse_selection_param,
        )
        return constrain_crisis_spread(
            breakdown,
            tier,
            martyr_cap_bps=cfg.martyr_max_spread_bps,
            citizen_cap_bps=cfg.citizen_max_spread_bps,
        )

    def slash(
        self,
        claimed_score: float,
        actual_score: float,
        distribution: ScoreDistribution,
    ) -> SlashResult:
        cfg = self.config
        return calculate_slashing_amount(
            claimed_score,
            actual_score,
            distribution,
            max_slash_fraction=cfg.max_slash_fraction,
            adverse_selection_param=cfg.adverse_selection_param,
        )

    def update_credibility(
        self,
        prior: float,
        proof_outcome: Union[float, bool, ProofOutcome],
    ) -> float:
        return update_credibility(
            prior, proof_outcome, belief_update_weight=self.config.belief_update_weight
        )

    def detect_crisis(self, snapshot: MarketSnapshot) -> CrisisState:
        return detect_crisis(snapshot, self.config)
