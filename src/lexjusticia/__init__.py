"""
lexjusticia — Myersonian mechanism engine for tiered liquidity provision.

Scores providers on historical performance, partitions them into tiers,
computes incentive-compatible rewards, crisis spreads, slashes and
credibility updates. Pure functions over immutable inputs; persistence,
ledger access and proof verification belong to the caller.
"""

from lexjusticia.config import MechanismConfig
from lexjusticia.core.domain import (
    CappedCrisisSpread,
    CrisisSpreadBreakdown,
    ProviderTier,
    ScoreDistribution,
    SlashResult,
    TierAllocation,
    TierBoundaries,
)
from lexjusticia.mechanism import MyersonianMechanism

__version__ = "0.1.0"

__all__ = [
    "MechanismConfig",
    "MyersonianMechanism",
    "ScoreDistribution",
    "TierBoundaries",
    "TierAllocation",
    "ProviderTier",
    "CrisisSpreadBreakdown",
    "CappedCrisisSpread",
    "SlashResult",
]
