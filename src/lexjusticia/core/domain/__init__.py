"""
Domain models and value objects.

Immutable value types produced and consumed by the mechanism engine:
ScoreDistribution, TierBoundaries, CappedCrisisSpread, SlashResult and
friends. None of them carries identity or persists beyond the call that
produced it.
"""

from lexjusticia.core.domain.assessment import ProviderAssessment
from lexjusticia.core.domain.boundaries import TierBoundaries
from lexjusticia.core.domain.distribution import ScoreDistribution
from lexjusticia.core.domain.market import CrisisState, CrisisType, MarketSnapshot
from lexjusticia.core.domain.pricing import (
    BASE_SPREAD_BPS,
    CappedCrisisSpread,
    CrisisSpreadBreakdown,
)
from lexjusticia.core.domain.tier import ProviderTier, TierAllocation
from lexjusticia.core.domain.verification import ProofOutcome, SlashResult
from lexjusticia.core.domain.virtual_value import LowerVirtualValue, UpperVirtualValue

__all__ = [
    # Distribution
    "ScoreDistribution",
    # Virtual values
    "UpperVirtualValue",
    "LowerVirtualValue",
    # Tiers
    "ProviderTier",
    "TierAllocation",
    "TierBoundaries",
    # Pricing
    "BASE_SPREAD_BPS",
    "CrisisSpreadBreakdown",
    "CappedCrisisSpread",
    # Verification
    "ProofOutcome",
    "SlashResult",
    # Market
    "CrisisState",
    "CrisisType",
    "MarketSnapshot",
    # Assessment
    "ProviderAssessment",
]
