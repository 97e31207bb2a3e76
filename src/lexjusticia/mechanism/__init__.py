"""
Mechanism — Myersonian scoring and mechanism-parameter engine.

- virtual_value: phi_u / phi_l
- thresholds: roots of phi_u / phi_l and tier boundaries
- allocation: optimal allocation rule (MARTYR / SOVEREIGN / REJECT)
- rewards: incentive-compatible cumulative and marginal rewards
- crisis_spread: spread decomposition and tier caps
- slashing: penalty for over-claimed virtual value
- credibility: proof-weighted credibility blend
- crisis_detection: crisis classification of a market snapshot
- engine: configured facade
"""

from .allocation import allocate_optimal_tier
from .credibility import update_credibility
from .crisis_detection import detect_crisis
from .crisis_spread import (
    apply_spread_constraint,
    calculate_optimal_crisis_spread,
    constrain_crisis_spread,
    spread_cap_bps,
)
from .engine import MyersonianMechanism
from .rewards import calculate_ic_reward, calculate_marginal_ic_reward
from .slashing import calculate_slashing_amount
from .thresholds import (
    compute_optimal_tier_boundaries,
    find_lower_virtual_root,
    find_upper_virtual_root,
)
from .virtual_value import lower_virtual_value, upper_virtual_value

__all__ = [
    "upper_virtual_value",
    "lower_virtual_value",
    "find_upper_virtual_root",
    "find_lower_virtual_root",
    "compute_optimal_tier_boundaries",
    "allocate_optimal_tier",
    "calculate_ic_reward",
    "calculate_marginal_ic_reward",
    "calculate_optimal_crisis_spread",
    "spread_cap_bps",
    "apply_spread_constraint",
    "constrain_crisis_spread",
    "calculate_slashing_amount",
    "update_credibility",
    "detect_crisis",
    "MyersonianMechanism",
]
